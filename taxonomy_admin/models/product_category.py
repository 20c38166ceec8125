"""ProductCategory model - product taxonomy root."""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taxonomy_admin.models.base import (
    Base,
    SortOrderMixin,
    TaxonomyStatus,
    TimestampMixin,
    UuidPrimaryKeyMixin,
    status_column,
)

if TYPE_CHECKING:
    from taxonomy_admin.models.product_subcategory import ProductSubcategory


class ProductCategory(Base, UuidPrimaryKeyMixin, SortOrderMixin, TimestampMixin):
    """Product category - root of the taxonomy (Category -> Subcategory -> ProductType)."""

    __tablename__ = "product_categories"

    code: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[TaxonomyStatus] = status_column()
    taxonomy_version: Mapped[str | None] = mapped_column(String(20), nullable=True, default="v1.0")

    # Relationships
    subcategories: Mapped[list["ProductSubcategory"]] = relationship(
        "ProductSubcategory",
        order_by="ProductSubcategory.sort_order",
        passive_deletes=True,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<ProductCategory(id={self.id}, code='{self.code}')>"
