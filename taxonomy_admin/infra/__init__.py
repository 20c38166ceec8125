"""Infrastructure - Database, logging, revalidation."""

from taxonomy_admin.infra.database import get_db_session, DatabaseSession, close_db_engine
from taxonomy_admin.infra.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from taxonomy_admin.infra.revalidation import PathRevalidator, get_revalidator

__all__ = [
    "get_db_session",
    "DatabaseSession",
    "close_db_engine",
    "setup_logging",
    "bind_request_context",
    "clear_request_context",
    "get_logger",
    "PathRevalidator",
    "get_revalidator",
]
