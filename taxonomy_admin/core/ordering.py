"""List helpers for dense sibling ordering."""

import re
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_WHITESPACE = re.compile(r"\s+")


def normalize_code(code: str) -> str:
    """Lowercase a code and replace whitespace runs with underscores."""
    return _WHITESPACE.sub("_", code.strip().lower())


def array_move(items: Sequence[T], old_index: int, new_index: int) -> list[T]:
    """Return a copy with the item at ``old_index`` moved to ``new_index``."""
    result = list(items)
    result.insert(new_index, result.pop(old_index))
    return result


def splice(ids: Sequence[T], moved: T, index: int) -> list[T]:
    """Remove ``moved`` from ``ids`` (if present) and insert it at ``index``.

    ``index`` is clamped to the bounds of the remaining list.
    """
    result = [i for i in ids if i != moved]
    index = max(0, min(index, len(result)))
    result.insert(index, moved)
    return result


def dense_positions(ids: Sequence[T]) -> list[tuple[T, int]]:
    """Pair each id with its position 0..N-1."""
    return [(item, position) for position, item in enumerate(ids)]
