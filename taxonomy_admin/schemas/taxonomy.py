"""Request and response schemas for the product tree and collections."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taxonomy_admin.models import TaxonomyStatus


class ItemCreate(BaseModel):
    """Payload of the "add" dialog.

    Only presence is validated here; code uniqueness is checked on insert.
    """

    code: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1)
    sort_order: int | None = Field(default=None, ge=0)

    model_config = {"extra": "forbid"}

    @field_validator("code", "name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class CategoryCreate(ItemCreate):
    pass


class SubcategoryCreate(ItemCreate):
    category_id: UUID


class ProductTypeCreate(ItemCreate):
    subcategory_id: UUID


class CollectionCreate(ItemCreate):
    description: str | None = None


class ItemUpdate(BaseModel):
    """Rename / status change. Unset fields are left untouched."""

    name: str | None = Field(default=None, min_length=1)
    status: TaxonomyStatus | None = None

    model_config = {"extra": "forbid"}

    @field_validator("name")
    @classmethod
    def not_blank(cls, v: str | None) -> str:
        if v is None or not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("status")
    @classmethod
    def not_null(cls, v: TaxonomyStatus | None) -> TaxonomyStatus:
        # Omit the field to keep the current value
        if v is None:
            raise ValueError("must not be null")
        return v


class CategoryUpdate(ItemUpdate):
    pass


class SubcategoryUpdate(ItemUpdate):
    goods_class_default_id: UUID | None = None


class ProductTypeUpdate(ItemUpdate):
    pass


class CollectionUpdate(ItemUpdate):
    description: str | None = None
    intent: str | None = None
    design_mandate: str | None = None
    branding_mandate: str | None = None
    system_role: str | None = None
    context_brief: str | None = None


class ReorderRequest(BaseModel):
    """Full sibling set in its new order."""

    ordered_ids: list[UUID] = Field(min_length=1)

    model_config = {"extra": "forbid"}


class MoveSubcategoryRequest(BaseModel):
    to_category_id: UUID
    new_index: int = Field(ge=0)

    model_config = {"extra": "forbid"}


class MoveProductTypeRequest(BaseModel):
    to_subcategory_id: UUID
    new_index: int = Field(ge=0)

    model_config = {"extra": "forbid"}


# =============================================================================
# Tree read model
# =============================================================================


class ProductTypeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    name: str
    status: TaxonomyStatus
    sort_order: int
    subcategory_id: UUID


class SubcategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    name: str
    status: TaxonomyStatus
    sort_order: int
    category_id: UUID
    product_types: list[ProductTypeRead] = []


class CategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    name: str
    status: TaxonomyStatus
    sort_order: int
    subcategories: list[SubcategoryRead] = []


class CollectionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    name: str
    description: str | None = None
    intent: str | None = None
    design_mandate: str | None = None
    branding_mandate: str | None = None
    system_role: str | None = None
    context_brief: str | None = None
    status: TaxonomyStatus
    sort_order: int
