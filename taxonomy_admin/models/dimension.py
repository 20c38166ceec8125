"""Dimension lookup tables.

Ten admin-managed value sets that replace hard-coded enums. They share one
column layout (code, label, description, status, sort_order); fit blocks and
size scales carry one extra column each.
"""

from typing import Any

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taxonomy_admin.models.base import (
    Base,
    SortOrderMixin,
    TaxonomyStatus,
    TimestampMixin,
    UuidPrimaryKeyMixin,
    status_column,
)


class DimensionValueMixin(UuidPrimaryKeyMixin, SortOrderMixin, TimestampMixin):
    """Columns shared by every dimension table."""

    code: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    label: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[TaxonomyStatus] = status_column()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id}, code='{self.code}')>"


class Construction(Base, DimensionValueMixin):
    """How the product is built (knit, woven, ...)."""

    __tablename__ = "constructions"


class MaterialWeightClass(Base, DimensionValueMixin):
    """Relative material weight (light, mid, heavy, insulated)."""

    __tablename__ = "material_weight_classes"


class SellingWindow(Base, DimensionValueMixin):
    """When the product is sold (core year-round, SS, FW, ...)."""

    __tablename__ = "selling_windows"


class AssortmentTenure(Base, DimensionValueMixin):
    """How long the product stays in the line."""

    __tablename__ = "assortment_tenures"


class FitBlock(Base, DimensionValueMixin):
    """Shared pattern / fit family."""

    __tablename__ = "fit_blocks"

    pattern_block_ref: Mapped[str | None] = mapped_column(Text, nullable=True)


class UseCase(Base, DimensionValueMixin):
    """Functional intent (everyday, layering, ...)."""

    __tablename__ = "use_cases"


class AudienceGender(Base, DimensionValueMixin):
    __tablename__ = "audience_genders"


class AudienceAgeGroup(Base, DimensionValueMixin):
    __tablename__ = "audience_age_groups"


class GoodsClass(Base, DimensionValueMixin):
    """Goods sub-classification (softgoods, hardgoods)."""

    __tablename__ = "goods_classes"


class SizeScale(Base, DimensionValueMixin):
    """Sizing system (alpha S-XL, numeric waist, one-size)."""

    __tablename__ = "size_scales"

    sizes: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
