"""API routes module."""

from taxonomy_admin.api.routes.dimensions import router as dimensions_router
from taxonomy_admin.api.routes.health import router as health_router
from taxonomy_admin.api.routes.taxonomy import router as taxonomy_router

__all__ = ["dimensions_router", "health_router", "taxonomy_router"]
