"""Core module - caller context, errors, ordering and identifier helpers."""

from taxonomy_admin.core.dimension_kind import DimensionKind, UsageReference
from taxonomy_admin.core.errors import (
    AuthorizationError,
    DuplicateCodeError,
    InvalidOrderingError,
    NotFoundError,
    TaxonomyError,
)
from taxonomy_admin.core.node_id import NodeRef, NodeType, parse_id, prefix_id
from taxonomy_admin.core.ordering import array_move, normalize_code, splice
from taxonomy_admin.core.principal import Principal, require_admin

__all__ = [
    "DimensionKind",
    "UsageReference",
    "AuthorizationError",
    "DuplicateCodeError",
    "InvalidOrderingError",
    "NotFoundError",
    "TaxonomyError",
    "NodeRef",
    "NodeType",
    "parse_id",
    "prefix_id",
    "array_move",
    "normalize_code",
    "splice",
    "Principal",
    "require_admin",
]
