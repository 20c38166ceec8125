"""Audit log - append-only trail of taxonomy mutations."""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from taxonomy_admin.models.base import Base, UuidPrimaryKeyMixin


class AuditLogEntry(Base, UuidPrimaryKeyMixin):
    """One row per successful mutation. Never updated or deleted."""

    __tablename__ = "taxonomy_audit_log"

    actor_user_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    resource_type: Mapped[str] = mapped_column(String(50), nullable=False)
    resource_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True, index=True)
    action: Mapped[str] = mapped_column(String(50), nullable=False)
    metadata_json: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<AuditLogEntry(resource_type='{self.resource_type}', "
            f"resource_id={self.resource_id}, action='{self.action}')>"
        )
