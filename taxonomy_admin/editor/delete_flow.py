"""Delete Flow - usage check, then hard delete or soft archive.

States::

    idle -> checking_usage -> confirm_hard_delete  -> deleted
                           -> confirm_soft_archive -> archived
    (any failure)          -> error

The confirm step is only reachable once usage has been checked, so the
admin always sees whether the item will be removed or archived.
"""

import enum

from taxonomy_admin.editor.gateway import Resource, TaxonomyGateway
from taxonomy_admin.infra.logging import get_logger
from taxonomy_admin.schemas.common import DeleteResult, UsageResult

logger = get_logger(__name__)


class DeleteState(str, enum.Enum):
    IDLE = "idle"
    CHECKING_USAGE = "checking_usage"
    CONFIRM_HARD_DELETE = "confirm_hard_delete"
    CONFIRM_SOFT_ARCHIVE = "confirm_soft_archive"
    DELETING = "deleting"
    DELETED = "deleted"
    ARCHIVED = "archived"
    ERROR = "error"


_CONFIRM_STATES = frozenset({DeleteState.CONFIRM_HARD_DELETE, DeleteState.CONFIRM_SOFT_ARCHIVE})


class DeleteFlowError(RuntimeError):
    """Transition requested from a state that does not allow it."""


class DeleteFlow:
    """Delete dialog state for one item."""

    def __init__(self, gateway: TaxonomyGateway, resource: Resource, item_id: str) -> None:
        self.gateway = gateway
        self.resource = resource
        self.item_id = item_id
        self.state = DeleteState.IDLE
        self.usage: UsageResult | None = None
        self.error: str | None = None

    async def check_usage(self) -> DeleteState:
        """Load usage and move to the matching confirm state."""
        if self.state not in (DeleteState.IDLE, DeleteState.ERROR):
            raise DeleteFlowError(f"Cannot check usage while {self.state.value}")

        self.state = DeleteState.CHECKING_USAGE
        self.usage = None
        self.error = None
        try:
            self.usage = await self.gateway.check_usage(self.resource, self.item_id)
        except Exception as e:
            logger.warning(
                "Usage check failed",
                resource=self.resource.value,
                item_id=self.item_id,
                error=str(e),
            )
            self.error = "Failed to check usage."
            self.state = DeleteState.ERROR
            return self.state

        self.state = (
            DeleteState.CONFIRM_SOFT_ARCHIVE if self.usage.in_use else DeleteState.CONFIRM_HARD_DELETE
        )
        return self.state

    async def confirm(self) -> DeleteState:
        """Run the delete; the server archives instead when the item is in use."""
        if self.state not in _CONFIRM_STATES:
            raise DeleteFlowError(f"Cannot confirm while {self.state.value}")

        self.state = DeleteState.DELETING
        try:
            result: DeleteResult = await self.gateway.delete_item(self.resource, self.item_id)
        except Exception as e:
            logger.warning(
                "Delete failed",
                resource=self.resource.value,
                item_id=self.item_id,
                error=str(e),
            )
            self.error = str(e)
            self.state = DeleteState.ERROR
            return self.state

        if not result.success:
            self.error = result.error or "Delete failed"
            self.state = DeleteState.ERROR
        elif result.action == "archived":
            self.state = DeleteState.ARCHIVED
        else:
            self.state = DeleteState.DELETED
        return self.state

    def cancel(self) -> None:
        if self.state is DeleteState.DELETING:
            raise DeleteFlowError("Cannot cancel while deleting")
        self.state = DeleteState.IDLE
        self.usage = None
        self.error = None

    @property
    def prompt(self) -> str:
        """Dialog text for the current state."""
        match self.state:
            case DeleteState.IDLE | DeleteState.CHECKING_USAGE:
                return "Checking usage..."
            case DeleteState.CONFIRM_SOFT_ARCHIVE:
                description = self.usage.usage_description if self.usage else "other records"
                return (
                    f"This item is referenced by {description} and cannot be permanently "
                    "deleted. It will be archived (deprecated) instead."
                )
            case DeleteState.CONFIRM_HARD_DELETE:
                return (
                    "This item is not used anywhere and will be permanently deleted. "
                    "This action cannot be undone."
                )
            case DeleteState.DELETING:
                return "Processing..."
            case DeleteState.DELETED:
                return "Permanently deleted."
            case DeleteState.ARCHIVED:
                return "Archived (deprecated)."
            case DeleteState.ERROR:
                return self.error or "Something went wrong."
