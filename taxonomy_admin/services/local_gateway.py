"""In-process gateway: calls the services directly, one session per call."""

import uuid
from collections.abc import Sequence
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taxonomy_admin.core.dimension_kind import DimensionKind
from taxonomy_admin.core.principal import Principal
from taxonomy_admin.editor.gateway import Resource, TreeResource
from taxonomy_admin.infra.database import get_session_factory
from taxonomy_admin.infra.revalidation import PathRevalidator
from taxonomy_admin.schemas.common import ActionResult, DeleteResult, UsageResult
from taxonomy_admin.services.dimension_service import DimensionService
from taxonomy_admin.services.taxonomy_service import TaxonomyService


def _ids(values: Sequence[str]) -> list[uuid.UUID]:
    return [uuid.UUID(str(v)) for v in values]


class LocalGateway:
    """Gateway bound to a caller and a session factory."""

    def __init__(
        self,
        caller: Principal,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        revalidator: PathRevalidator | None = None,
    ) -> None:
        self.caller = caller
        self.session_factory = session_factory or get_session_factory()
        self.revalidator = revalidator

    @asynccontextmanager
    async def _session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.session_factory() as session:
            yield session

    @asynccontextmanager
    async def _taxonomy(self) -> AsyncGenerator[TaxonomyService, None]:
        async with self._session() as session:
            yield TaxonomyService(session, revalidator=self.revalidator)

    async def get_hierarchy(self) -> list[dict[str, Any]]:
        async with self._taxonomy() as service:
            tree = await service.get_hierarchy(self.caller)
        return [c.model_dump(mode="json") for c in tree]

    async def reorder_categories(self, ordered_ids: Sequence[str]) -> ActionResult:
        async with self._taxonomy() as service:
            return await service.reorder_categories(self.caller, _ids(ordered_ids))

    async def reorder_subcategories(
        self, category_id: str, ordered_ids: Sequence[str]
    ) -> ActionResult:
        async with self._taxonomy() as service:
            return await service.reorder_subcategories(
                self.caller, uuid.UUID(category_id), _ids(ordered_ids)
            )

    async def reorder_product_types(
        self, subcategory_id: str, ordered_ids: Sequence[str]
    ) -> ActionResult:
        async with self._taxonomy() as service:
            return await service.reorder_product_types(
                self.caller, uuid.UUID(subcategory_id), _ids(ordered_ids)
            )

    async def move_subcategory(
        self, subcategory_id: str, to_category_id: str, new_index: int
    ) -> ActionResult:
        async with self._taxonomy() as service:
            return await service.move_subcategory(
                self.caller, uuid.UUID(subcategory_id), uuid.UUID(to_category_id), new_index
            )

    async def move_product_type(
        self, product_type_id: str, to_subcategory_id: str, new_index: int
    ) -> ActionResult:
        async with self._taxonomy() as service:
            return await service.move_product_type(
                self.caller, uuid.UUID(product_type_id), uuid.UUID(to_subcategory_id), new_index
            )

    async def check_usage(self, resource: Resource, item_id: str) -> UsageResult:
        item_uuid = uuid.UUID(item_id)
        async with self._session() as session:
            if isinstance(resource, DimensionKind):
                service = DimensionService(session, revalidator=self.revalidator)
                return await service.check_usage(self.caller, resource, item_uuid)

            taxonomy = TaxonomyService(session, revalidator=self.revalidator)
            match resource:
                case TreeResource.CATEGORY:
                    return await taxonomy.check_category_usage(self.caller, item_uuid)
                case TreeResource.SUBCATEGORY:
                    return await taxonomy.check_subcategory_usage(self.caller, item_uuid)
                case TreeResource.PRODUCT_TYPE:
                    return await taxonomy.check_product_type_usage(self.caller, item_uuid)
                case TreeResource.COLLECTION:
                    return await taxonomy.check_collection_usage(self.caller, item_uuid)

    async def delete_item(self, resource: Resource, item_id: str) -> DeleteResult:
        item_uuid = uuid.UUID(item_id)
        async with self._session() as session:
            if isinstance(resource, DimensionKind):
                service = DimensionService(session, revalidator=self.revalidator)
                return await service.delete_value(self.caller, resource, item_uuid)

            taxonomy = TaxonomyService(session, revalidator=self.revalidator)
            match resource:
                case TreeResource.CATEGORY:
                    return await taxonomy.delete_category(self.caller, item_uuid)
                case TreeResource.SUBCATEGORY:
                    return await taxonomy.delete_subcategory(self.caller, item_uuid)
                case TreeResource.PRODUCT_TYPE:
                    return await taxonomy.delete_product_type(self.caller, item_uuid)
                case TreeResource.COLLECTION:
                    return await taxonomy.delete_collection(self.caller, item_uuid)
