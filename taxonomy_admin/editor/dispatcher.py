"""Mutation Dispatcher - optimistic patch, persist, reconcile on response."""

from dataclasses import dataclass

from taxonomy_admin.editor.commands import Command
from taxonomy_admin.editor.gateway import TaxonomyGateway
from taxonomy_admin.editor.tree import TreeSnapshot, TreeStore
from taxonomy_admin.infra.logging import get_logger
from taxonomy_admin.schemas.common import ActionResult

logger = get_logger(__name__)


@dataclass(frozen=True)
class DispatchOutcome:
    """What happened to a dispatched command.

    Attributes:
        command: The command that was dispatched
        success: Whether the gateway accepted it
        reverted: Whether the predicted patch was rolled back
        error: Error message when not successful
    """

    command: Command
    success: bool
    reverted: bool = False
    error: str | None = None


def _replay(base: TreeSnapshot, commands: list[Command]) -> TreeStore:
    """Rebuild a store from ``base`` with ``commands`` applied in order.

    Commands that no longer fit the rebuilt tree are skipped; the server
    will reject them too.
    """
    store = TreeStore()
    store.restore(base)
    for command in commands:
        try:
            command.apply(store)
        except (KeyError, ValueError) as e:
            logger.warning(
                "Pending mutation no longer applies",
                command=type(command).__name__,
                error=str(e),
            )
    return store


class MutationDispatcher:
    """Applies commands to a store and persists them through a gateway.

    While commands are in flight the dispatcher keeps the last tree the
    server confirmed. A failed command is dropped by rebuilding the store
    from that tree plus the commands still pending, so overlapping drops
    never undo each other.
    """

    def __init__(self, store: TreeStore, gateway: TaxonomyGateway) -> None:
        self.store = store
        self.gateway = gateway
        self._confirmed: TreeSnapshot | None = None
        self._pending: list[Command] = []

    @property
    def pending(self) -> tuple[Command, ...]:
        return tuple(self._pending)

    async def dispatch(self, command: Command) -> DispatchOutcome:
        """Patch the store, send the command, and undo only its patch if it fails.

        The store shows the predicted tree as soon as this coroutine starts.
        """
        if not self._pending:
            self._confirmed = self.store.snapshot()
        expanded_before = set(self.store.expanded)
        command.apply(self.store)
        added_expansion = self.store.expanded - expanded_before
        self._pending.append(command)

        try:
            result: ActionResult = await command.send(self.gateway)
        except Exception as e:
            self._revert(command, added_expansion)
            logger.warning(
                "Mutation raised, reverted local tree",
                command=type(command).__name__,
                error=str(e),
                error_type=type(e).__name__,
            )
            return DispatchOutcome(command=command, success=False, reverted=True, error=str(e))

        if not result.success:
            self._revert(command, added_expansion)
            logger.warning(
                "Mutation rejected, reverted local tree",
                command=type(command).__name__,
                error=result.error,
            )
            return DispatchOutcome(
                command=command, success=False, reverted=True, error=result.error
            )

        self._confirm(command)
        logger.debug("Mutation persisted", command=type(command).__name__)
        return DispatchOutcome(command=command, success=True)

    def _confirm(self, command: Command) -> None:
        self._pending.remove(command)
        if self._confirmed is not None:
            self._confirmed = _replay(self._confirmed, [command]).snapshot()
        if not self._pending:
            self._confirmed = None

    def _revert(self, command: Command, added_expansion: set[str]) -> None:
        self._pending.remove(command)
        if self._confirmed is None:
            return
        rebuilt = _replay(self._confirmed, self._pending)
        self.store.categories = rebuilt.categories
        self.store.expanded -= added_expansion
        if not self._pending:
            self._confirmed = None
