"""Taxonomy Service - product tree and collections.

Operations on the three-level tree (Category -> Subcategory -> ProductType)
and on merchandising collections. Every public method takes the calling
``Principal`` first and fails with ``AuthorizationError`` before touching
the database if the caller is not a taxonomy admin.
"""

import hashlib
import uuid
from collections.abc import Sequence

from sqlalchemy import select
from pydantic import TypeAdapter
from sqlalchemy.orm import selectinload

from taxonomy_admin.core.principal import Principal
from taxonomy_admin.infra.logging import get_logger
from taxonomy_admin.models import (
    Collection,
    FactoryCapability,
    FactoryCosting,
    FactoryNegotiation,
    ProductCategory,
    ProductSubcategory,
    ProductType,
    SeasonSlot,
)
from taxonomy_admin.schemas.common import ActionResult, DeleteResult, UsageResult
from taxonomy_admin.schemas.taxonomy import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    CollectionCreate,
    CollectionRead,
    CollectionUpdate,
    ProductTypeCreate,
    ProductTypeUpdate,
    SubcategoryCreate,
    SubcategoryUpdate,
)
from taxonomy_admin.services.base_taxonomy_service import BaseTaxonomyService, SiblingScope

logger = get_logger(__name__)

CATEGORIES = SiblingScope(
    model=ProductCategory,
    label="category",
    resource_type="category",
)
SUBCATEGORIES = SiblingScope(
    model=ProductSubcategory,
    label="subcategory",
    resource_type="subcategory",
    parent_column=ProductSubcategory.category_id,
    parent_model=ProductCategory,
)
PRODUCT_TYPES = SiblingScope(
    model=ProductType,
    label="product type",
    resource_type="product_type",
    parent_column=ProductType.subcategory_id,
    parent_model=ProductSubcategory,
)
COLLECTIONS = SiblingScope(
    model=Collection,
    label="collection",
    resource_type="collection",
)

SEASON_SLOTS = "season slot(s)"

_HIERARCHY = TypeAdapter(list[CategoryRead])


def hierarchy_etag(tree: Sequence[CategoryRead]) -> str:
    """Strong ETag for a hierarchy: a digest of its JSON form."""
    digest = hashlib.sha256(_HIERARCHY.dump_json(list(tree))).hexdigest()
    return f'"{digest[:32]}"'


class TaxonomyService(BaseTaxonomyService):
    """Product tree and collection operations."""

    # =========================================================================
    # Reads
    # =========================================================================

    async def get_hierarchy(self, caller: Principal) -> list[CategoryRead]:
        """Full tree, every level ordered by ``sort_order``."""
        self._authorize(caller)
        stmt = (
            select(ProductCategory)
            .options(
                selectinload(ProductCategory.subcategories).selectinload(
                    ProductSubcategory.product_types
                )
            )
            .order_by(ProductCategory.sort_order)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return [CategoryRead.model_validate(c) for c in result.scalars().all()]

    async def list_collections(self, caller: Principal) -> list[CollectionRead]:
        self._authorize(caller)
        stmt = (
            select(Collection)
            .order_by(Collection.sort_order)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return [CollectionRead.model_validate(c) for c in result.scalars().all()]

    # =========================================================================
    # Create
    # =========================================================================

    async def create_category(self, caller: Principal, data: CategoryCreate) -> ActionResult:
        return await self._create(
            caller,
            CATEGORIES,
            {"code": data.code, "name": data.name},
            position=data.sort_order,
        )

    async def create_subcategory(self, caller: Principal, data: SubcategoryCreate) -> ActionResult:
        return await self._create(
            caller,
            SUBCATEGORIES,
            {"code": data.code, "name": data.name, "category_id": data.category_id},
            position=data.sort_order,
        )

    async def create_product_type(self, caller: Principal, data: ProductTypeCreate) -> ActionResult:
        return await self._create(
            caller,
            PRODUCT_TYPES,
            {"code": data.code, "name": data.name, "subcategory_id": data.subcategory_id},
            position=data.sort_order,
        )

    async def create_collection(self, caller: Principal, data: CollectionCreate) -> ActionResult:
        return await self._create(
            caller,
            COLLECTIONS,
            {"code": data.code, "name": data.name, "description": data.description},
            position=data.sort_order,
        )

    # =========================================================================
    # Update
    # =========================================================================

    async def update_category(
        self, caller: Principal, category_id: uuid.UUID, data: CategoryUpdate
    ) -> ActionResult:
        return await self._update(caller, CATEGORIES, category_id, data.model_dump(exclude_unset=True))

    async def update_subcategory(
        self, caller: Principal, subcategory_id: uuid.UUID, data: SubcategoryUpdate
    ) -> ActionResult:
        return await self._update(
            caller, SUBCATEGORIES, subcategory_id, data.model_dump(exclude_unset=True)
        )

    async def update_product_type(
        self, caller: Principal, product_type_id: uuid.UUID, data: ProductTypeUpdate
    ) -> ActionResult:
        return await self._update(
            caller, PRODUCT_TYPES, product_type_id, data.model_dump(exclude_unset=True)
        )

    async def update_collection(
        self, caller: Principal, collection_id: uuid.UUID, data: CollectionUpdate
    ) -> ActionResult:
        return await self._update(
            caller, COLLECTIONS, collection_id, data.model_dump(exclude_unset=True)
        )

    # =========================================================================
    # Reorder (full sibling-set rewrite)
    # =========================================================================

    async def reorder_categories(
        self, caller: Principal, ordered_ids: Sequence[uuid.UUID]
    ) -> ActionResult:
        return await self._reorder(caller, CATEGORIES, None, ordered_ids)

    async def reorder_subcategories(
        self, caller: Principal, category_id: uuid.UUID, ordered_ids: Sequence[uuid.UUID]
    ) -> ActionResult:
        return await self._reorder(caller, SUBCATEGORIES, category_id, ordered_ids)

    async def reorder_product_types(
        self, caller: Principal, subcategory_id: uuid.UUID, ordered_ids: Sequence[uuid.UUID]
    ) -> ActionResult:
        return await self._reorder(caller, PRODUCT_TYPES, subcategory_id, ordered_ids)

    async def reorder_collections(
        self, caller: Principal, ordered_ids: Sequence[uuid.UUID]
    ) -> ActionResult:
        return await self._reorder(caller, COLLECTIONS, None, ordered_ids)

    # =========================================================================
    # Reclassify (move to a different parent)
    # =========================================================================

    async def move_subcategory(
        self,
        caller: Principal,
        subcategory_id: uuid.UUID,
        to_category_id: uuid.UUID,
        new_index: int,
    ) -> ActionResult:
        return await self._move(caller, SUBCATEGORIES, subcategory_id, to_category_id, new_index)

    async def move_product_type(
        self,
        caller: Principal,
        product_type_id: uuid.UUID,
        to_subcategory_id: uuid.UUID,
        new_index: int,
    ) -> ActionResult:
        return await self._move(caller, PRODUCT_TYPES, product_type_id, to_subcategory_id, new_index)

    # =========================================================================
    # Usage checks
    # =========================================================================

    async def check_category_usage(self, caller: Principal, category_id: uuid.UUID) -> UsageResult:
        self._authorize(caller)
        return await self._category_usage(category_id)

    async def check_subcategory_usage(
        self, caller: Principal, subcategory_id: uuid.UUID
    ) -> UsageResult:
        self._authorize(caller)
        return await self._subcategory_usage([subcategory_id])

    async def check_product_type_usage(
        self, caller: Principal, product_type_id: uuid.UUID
    ) -> UsageResult:
        self._authorize(caller)
        return await self._tally([(SeasonSlot.product_type_id, [product_type_id], SEASON_SLOTS)])

    async def check_collection_usage(
        self, caller: Principal, collection_id: uuid.UUID
    ) -> UsageResult:
        self._authorize(caller)
        return await self._tally([(SeasonSlot.collection_id, [collection_id], SEASON_SLOTS)])

    async def _category_usage(self, category_id: uuid.UUID) -> UsageResult:
        result = await self.db.execute(
            select(ProductSubcategory.id).where(ProductSubcategory.category_id == category_id)
        )
        sub_ids = list(result.scalars().all())
        if not sub_ids:
            return UsageResult(in_use=False)
        return await self._subcategory_usage(sub_ids)

    async def _subcategory_usage(self, sub_ids: list[uuid.UUID]) -> UsageResult:
        """Season slots of child product types plus factory records."""
        result = await self.db.execute(
            select(ProductType.id).where(ProductType.subcategory_id.in_(sub_ids))
        )
        pt_ids = list(result.scalars().all())

        return await self._tally(
            [
                (SeasonSlot.product_type_id, pt_ids, SEASON_SLOTS),
                (FactoryCapability.subcategory_id, sub_ids, "factory capability record(s)"),
                (FactoryCosting.subcategory_id, sub_ids, "factory costing record(s)"),
                (FactoryNegotiation.subcategory_id, sub_ids, "factory negotiation(s)"),
            ]
        )

    # =========================================================================
    # Delete / archive
    # =========================================================================

    async def delete_category(self, caller: Principal, category_id: uuid.UUID) -> DeleteResult:
        usage = await self.check_category_usage(caller, category_id)
        return await self._delete_or_archive(caller, CATEGORIES, category_id, usage)

    async def delete_subcategory(self, caller: Principal, subcategory_id: uuid.UUID) -> DeleteResult:
        usage = await self.check_subcategory_usage(caller, subcategory_id)
        return await self._delete_or_archive(caller, SUBCATEGORIES, subcategory_id, usage)

    async def delete_product_type(self, caller: Principal, product_type_id: uuid.UUID) -> DeleteResult:
        usage = await self.check_product_type_usage(caller, product_type_id)
        return await self._delete_or_archive(caller, PRODUCT_TYPES, product_type_id, usage)

    async def delete_collection(self, caller: Principal, collection_id: uuid.UUID) -> DeleteResult:
        usage = await self.check_collection_usage(caller, collection_id)
        return await self._delete_or_archive(caller, COLLECTIONS, collection_id, usage)
