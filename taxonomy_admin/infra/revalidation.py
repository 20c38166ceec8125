"""Page revalidation signals.

Every successful taxonomy mutation bumps the version of the admin page
path and notifies subscribed listeners in this process. Versions are
per-process; HTTP caching uses a digest of the tree instead.
"""

import threading
from collections.abc import Callable

from taxonomy_admin.infra.logging import get_logger

logger = get_logger(__name__)

Listener = Callable[[str, int], None]


class PathRevalidator:
    """Per-path version counters with optional listeners."""

    def __init__(self) -> None:
        self._versions: dict[str, int] = {}
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    def revalidate(self, path: str) -> int:
        """Mark a path stale and return its new version."""
        with self._lock:
            version = self._versions.get(path, 0) + 1
            self._versions[path] = version
            listeners = list(self._listeners)

        logger.debug("Path revalidated", path=path, version=version)

        for listener in listeners:
            listener(path, version)
        return version

    def version(self, path: str) -> int:
        """Current version of a path (0 if never revalidated)."""
        with self._lock:
            return self._versions.get(path, 0)

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener(path, version)`` after every revalidation."""
        with self._lock:
            self._listeners.append(listener)

    def clear(self) -> None:
        with self._lock:
            self._versions.clear()
            self._listeners.clear()


_revalidator: PathRevalidator | None = None


def get_revalidator() -> PathRevalidator:
    """Get the process-wide revalidator."""
    global _revalidator
    if _revalidator is None:
        _revalidator = PathRevalidator()
    return _revalidator
