"""ProductSubcategory model - product taxonomy level 2."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text, Uuid
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
    from taxonomy_admin.models.product_type import ProductType


class ProductSubcategory(Base, UuidPrimaryKeyMixin, SortOrderMixin, TimestampMixin):
    """Product subcategory - level 2 of the taxonomy, owned by one category."""

    __tablename__ = "product_subcategories"

    code: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("product_categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    goods_class_default_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("goods_classes.id"),
        nullable=True,
    )
    status: Mapped[TaxonomyStatus] = status_column()
    taxonomy_version: Mapped[str | None] = mapped_column(String(20), nullable=True, default="v1.0")

    # Relationships
    product_types: Mapped[list["ProductType"]] = relationship(
        "ProductType",
        order_by="ProductType.sort_order",
        passive_deletes=True,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<ProductSubcategory(id={self.id}, code='{self.code}')>"
