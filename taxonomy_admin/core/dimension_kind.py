"""Closed set of dimension lookup tables.

Each ``DimensionKind`` resolves its model and the columns that reference it
through an exhaustive ``match``, so adding a member without wiring it up
fails type checking (``assert_never``) instead of failing a lookup at runtime.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, assert_never

from taxonomy_admin.models import (
    AssortmentTenure,
    AudienceAgeGroup,
    AudienceGender,
    Construction,
    FitBlock,
    GoodsClass,
    MaterialWeightClass,
    ProductSubcategory,
    SeasonSlot,
    SellingWindow,
    SizeScale,
    SkuConcept,
    UseCase,
)

if TYPE_CHECKING:
    from taxonomy_admin.models import DimensionValueMixin


@dataclass(frozen=True)
class UsageReference:
    """A foreign-key column pointing at a dimension value.

    Attributes:
        column: Mapped column holding the dimension id
        noun: Plural description used in usage summaries
    """

    column: Any
    noun: str


class DimensionKind(str, enum.Enum):
    """Dimension lookup tables, keyed by table name."""

    CONSTRUCTIONS = "constructions"
    MATERIAL_WEIGHT_CLASSES = "material_weight_classes"
    SELLING_WINDOWS = "selling_windows"
    ASSORTMENT_TENURES = "assortment_tenures"
    FIT_BLOCKS = "fit_blocks"
    USE_CASES = "use_cases"
    AUDIENCE_GENDERS = "audience_genders"
    AUDIENCE_AGE_GROUPS = "audience_age_groups"
    GOODS_CLASSES = "goods_classes"
    SIZE_SCALES = "size_scales"

    @property
    def model(self) -> type[DimensionValueMixin]:
        match self:
            case DimensionKind.CONSTRUCTIONS:
                return Construction
            case DimensionKind.MATERIAL_WEIGHT_CLASSES:
                return MaterialWeightClass
            case DimensionKind.SELLING_WINDOWS:
                return SellingWindow
            case DimensionKind.ASSORTMENT_TENURES:
                return AssortmentTenure
            case DimensionKind.FIT_BLOCKS:
                return FitBlock
            case DimensionKind.USE_CASES:
                return UseCase
            case DimensionKind.AUDIENCE_GENDERS:
                return AudienceGender
            case DimensionKind.AUDIENCE_AGE_GROUPS:
                return AudienceAgeGroup
            case DimensionKind.GOODS_CLASSES:
                return GoodsClass
            case DimensionKind.SIZE_SCALES:
                return SizeScale
            case _:
                assert_never(self)

    @property
    def label(self) -> str:
        """Singular human label, e.g. ``material weight class``."""
        match self:
            case DimensionKind.CONSTRUCTIONS:
                return "construction"
            case DimensionKind.MATERIAL_WEIGHT_CLASSES:
                return "material weight class"
            case DimensionKind.SELLING_WINDOWS:
                return "selling window"
            case DimensionKind.ASSORTMENT_TENURES:
                return "assortment tenure"
            case DimensionKind.FIT_BLOCKS:
                return "fit block"
            case DimensionKind.USE_CASES:
                return "use case"
            case DimensionKind.AUDIENCE_GENDERS:
                return "audience gender"
            case DimensionKind.AUDIENCE_AGE_GROUPS:
                return "audience age group"
            case DimensionKind.GOODS_CLASSES:
                return "goods class"
            case DimensionKind.SIZE_SCALES:
                return "size scale"
            case _:
                assert_never(self)

    @property
    def usage_references(self) -> tuple[UsageReference, ...]:
        """Columns counted by the delete-time usage check."""
        slots = "season slot(s)"
        concepts = "SKU concept(s)"
        match self:
            case DimensionKind.AUDIENCE_GENDERS:
                return (UsageReference(SeasonSlot.audience_gender_id, slots),)
            case DimensionKind.AUDIENCE_AGE_GROUPS:
                return (UsageReference(SeasonSlot.audience_age_group_id, slots),)
            case DimensionKind.SELLING_WINDOWS:
                return (UsageReference(SeasonSlot.selling_window_id, slots),)
            case DimensionKind.ASSORTMENT_TENURES:
                return (UsageReference(SeasonSlot.assortment_tenure_id, slots),)
            case DimensionKind.CONSTRUCTIONS:
                return (UsageReference(SkuConcept.construction_id, concepts),)
            case DimensionKind.MATERIAL_WEIGHT_CLASSES:
                return (UsageReference(SkuConcept.material_weight_class_id, concepts),)
            case DimensionKind.FIT_BLOCKS:
                return (UsageReference(SkuConcept.fit_block_id, concepts),)
            case DimensionKind.USE_CASES:
                return (UsageReference(SkuConcept.use_case_id, concepts),)
            case DimensionKind.GOODS_CLASSES:
                return (
                    UsageReference(SkuConcept.goods_class_id, concepts),
                    UsageReference(
                        ProductSubcategory.goods_class_default_id,
                        "subcategory default(s)",
                    ),
                )
            case DimensionKind.SIZE_SCALES:
                return (UsageReference(SkuConcept.size_scale_id, concepts),)
            case _:
                assert_never(self)
