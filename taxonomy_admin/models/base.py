"""Base model infrastructure for SQLAlchemy models."""

import enum
import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, Integer, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


class TaxonomyStatus(str, enum.Enum):
    """Lifecycle status shared by every taxonomy table.

    ``deprecated`` is the soft-delete state used when a row is still
    referenced elsewhere.
    """

    ACTIVE = "active"
    DEPRECATED = "deprecated"


def status_column() -> Mapped[TaxonomyStatus]:
    return mapped_column(
        Enum(
            TaxonomyStatus,
            name="taxonomy_status",
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=False,
        default=TaxonomyStatus.ACTIVE,
        index=True,
    )


class UuidPrimaryKeyMixin:
    """Mixin providing a random UUID primary key."""

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)


class SortOrderMixin:
    """Mixin providing the dense sibling ordering column."""

    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class TimestampMixin:
    """Mixin providing created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
    )
