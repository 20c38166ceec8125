"""Tests for caller authorization."""

import pytest

from taxonomy_admin.core.errors import AuthorizationError
from taxonomy_admin.core.principal import Principal, require_admin

ROLES = ["owner", "admin"]


def test_admin_is_allowed() -> None:
    caller = Principal(user_id="u1", role="admin")
    assert require_admin(caller, ROLES) is caller


def test_member_is_rejected() -> None:
    with pytest.raises(AuthorizationError, match="member"):
        require_admin(Principal(user_id="u1", role="member"), ROLES)


def test_missing_role_is_rejected() -> None:
    with pytest.raises(AuthorizationError):
        require_admin(Principal(user_id="u1", role=None), ROLES)


def test_missing_caller_is_rejected() -> None:
    with pytest.raises(AuthorizationError, match="Not authenticated"):
        require_admin(None, ROLES)


def test_principal_is_immutable() -> None:
    caller = Principal(user_id="u1", role="admin")
    with pytest.raises(AttributeError):
        caller.role = "owner"  # type: ignore[misc]


def test_permission_grant_is_allowed() -> None:
    caller = Principal(user_id="u1", role="member", permissions=frozenset({"taxonomy:manage"}))
    assert require_admin(caller, ROLES, "taxonomy:manage") is caller


def test_unrelated_permission_is_rejected() -> None:
    caller = Principal(user_id="u1", role="member", permissions=frozenset({"seasons:manage"}))
    with pytest.raises(AuthorizationError):
        require_admin(caller, ROLES, "taxonomy:manage")
