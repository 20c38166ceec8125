"""Business logic services."""

from taxonomy_admin.services.base_taxonomy_service import BaseTaxonomyService, SiblingScope
from taxonomy_admin.services.dimension_service import DimensionService
from taxonomy_admin.services.local_gateway import LocalGateway
from taxonomy_admin.services.taxonomy_client import TaxonomyClient
from taxonomy_admin.services.taxonomy_service import TaxonomyService

__all__ = [
    "BaseTaxonomyService",
    "SiblingScope",
    "DimensionService",
    "LocalGateway",
    "TaxonomyClient",
    "TaxonomyService",
]
