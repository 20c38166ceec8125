"""Collection model - merchandising groupings outside the product tree."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taxonomy_admin.models.base import (
    Base,
    SortOrderMixin,
    TaxonomyStatus,
    TimestampMixin,
    UuidPrimaryKeyMixin,
    status_column,
)


class Collection(Base, UuidPrimaryKeyMixin, SortOrderMixin, TimestampMixin):
    """Line / merchandising collection (Core, Material Story, ...)."""

    __tablename__ = "collections"

    code: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Strategy fields
    intent: Mapped[str | None] = mapped_column(Text, nullable=True)
    design_mandate: Mapped[str | None] = mapped_column(Text, nullable=True)
    branding_mandate: Mapped[str | None] = mapped_column(Text, nullable=True)
    system_role: Mapped[str | None] = mapped_column(Text, nullable=True)
    context_brief: Mapped[str | None] = mapped_column(Text, nullable=True)
    context_brief_updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    status: Mapped[TaxonomyStatus] = status_column()

    def __repr__(self) -> str:
        return f"<Collection(id={self.id}, code='{self.code}')>"
