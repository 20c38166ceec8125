"""ProductType model - leaf of product taxonomy."""

import uuid

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from taxonomy_admin.models.base import (
    Base,
    SortOrderMixin,
    TaxonomyStatus,
    TimestampMixin,
    UuidPrimaryKeyMixin,
    status_column,
)


class ProductType(Base, UuidPrimaryKeyMixin, SortOrderMixin, TimestampMixin):
    """Product type - leaf node, owned by one subcategory."""

    __tablename__ = "product_types"

    code: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    subcategory_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("product_subcategories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status: Mapped[TaxonomyStatus] = status_column()
    taxonomy_version: Mapped[str | None] = mapped_column(String(20), nullable=True, default="v1.0")

    def __repr__(self) -> str:
        return f"<ProductType(id={self.id}, code='{self.code}')>"
