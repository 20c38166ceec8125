"""Pydantic schemas for the taxonomy API."""

from taxonomy_admin.schemas.common import (
    ActionResult,
    DeleteResult,
    ErrorResponse,
    HealthResponse,
    UsageResult,
)
from taxonomy_admin.schemas.dimension import (
    DimensionValueCreate,
    DimensionValueRead,
    DimensionValueUpdate,
)
from taxonomy_admin.schemas.taxonomy import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    CollectionCreate,
    CollectionRead,
    CollectionUpdate,
    MoveProductTypeRequest,
    MoveSubcategoryRequest,
    ProductTypeCreate,
    ProductTypeRead,
    ProductTypeUpdate,
    ReorderRequest,
    SubcategoryCreate,
    SubcategoryRead,
    SubcategoryUpdate,
)

__all__ = [
    "ActionResult",
    "DeleteResult",
    "ErrorResponse",
    "HealthResponse",
    "UsageResult",
    "DimensionValueCreate",
    "DimensionValueRead",
    "DimensionValueUpdate",
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "CollectionCreate",
    "CollectionRead",
    "CollectionUpdate",
    "MoveProductTypeRequest",
    "MoveSubcategoryRequest",
    "ProductTypeCreate",
    "ProductTypeRead",
    "ProductTypeUpdate",
    "ReorderRequest",
    "SubcategoryCreate",
    "SubcategoryRead",
    "SubcategoryUpdate",
]
