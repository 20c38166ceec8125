"""SQLAlchemy models for the product taxonomy."""

from taxonomy_admin.models.audit_log import AuditLogEntry
from taxonomy_admin.models.base import Base, TaxonomyStatus, TimestampMixin
from taxonomy_admin.models.collection import Collection
from taxonomy_admin.models.dimension import (
    AssortmentTenure,
    AudienceAgeGroup,
    AudienceGender,
    Construction,
    DimensionValueMixin,
    FitBlock,
    GoodsClass,
    MaterialWeightClass,
    SellingWindow,
    SizeScale,
    UseCase,
)
from taxonomy_admin.models.product_category import ProductCategory
from taxonomy_admin.models.product_subcategory import ProductSubcategory
from taxonomy_admin.models.product_type import ProductType
from taxonomy_admin.models.references import (
    FactoryCapability,
    FactoryCosting,
    FactoryNegotiation,
    SeasonSlot,
    SkuConcept,
)

__all__ = [
    "Base",
    "TaxonomyStatus",
    "TimestampMixin",
    "AuditLogEntry",
    "Collection",
    "DimensionValueMixin",
    "AssortmentTenure",
    "AudienceAgeGroup",
    "AudienceGender",
    "Construction",
    "FitBlock",
    "GoodsClass",
    "MaterialWeightClass",
    "SellingWindow",
    "SizeScale",
    "UseCase",
    "ProductCategory",
    "ProductSubcategory",
    "ProductType",
    "FactoryCapability",
    "FactoryCosting",
    "FactoryNegotiation",
    "SeasonSlot",
    "SkuConcept",
]
