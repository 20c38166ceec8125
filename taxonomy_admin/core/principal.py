"""Caller context for mutation handlers."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from taxonomy_admin.core.errors import AuthorizationError


@dataclass(frozen=True)
class Principal:
    """Authenticated caller, passed explicitly into every handler.

    Attributes:
        user_id: Portal user id (recorded in the audit log)
        role: Portal role (owner, admin, member, ...)
        permissions: Extra permission strings granted to the user
    """

    user_id: str
    role: str | None
    permissions: frozenset[str] = field(default_factory=frozenset)

    def has_role(self, allowed_roles: Iterable[str]) -> bool:
        return self.role is not None and self.role in set(allowed_roles)

    def has_permission(self, permission: str | None) -> bool:
        return permission is not None and permission in self.permissions


def require_admin(
    caller: Principal | None,
    allowed_roles: Iterable[str],
    permission: str | None = None,
) -> Principal:
    """Ensure the caller may administer the taxonomy.

    Either an allowed role or an explicit grant of ``permission`` suffices.

    Raises:
        AuthorizationError: If the caller is missing or holds neither
    """
    if caller is None or not caller.user_id:
        raise AuthorizationError("Not authenticated")
    if not (caller.has_role(allowed_roles) or caller.has_permission(permission)):
        raise AuthorizationError(f"Role '{caller.role}' may not manage the taxonomy")
    return caller
