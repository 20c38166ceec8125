"""Schemas for dimension lookup values."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taxonomy_admin.models import TaxonomyStatus


class DimensionValueCreate(BaseModel):
    code: str = Field(min_length=1, max_length=100)
    label: str = Field(min_length=1)
    description: str | None = None
    sort_order: int | None = Field(default=None, ge=0)

    model_config = {"extra": "forbid"}

    @field_validator("code", "label")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class DimensionValueUpdate(BaseModel):
    label: str | None = Field(default=None, min_length=1)
    description: str | None = None
    status: TaxonomyStatus | None = None

    model_config = {"extra": "forbid"}

    @field_validator("label")
    @classmethod
    def not_blank(cls, v: str | None) -> str:
        if v is None or not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("status")
    @classmethod
    def not_null(cls, v: TaxonomyStatus | None) -> TaxonomyStatus:
        if v is None:
            raise ValueError("must not be null")
        return v


class DimensionValueRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    label: str
    description: str | None = None
    status: TaxonomyStatus
    sort_order: int
    # Only set on fit blocks / size scales
    pattern_block_ref: str | None = None
    sizes: list[Any] | None = None
