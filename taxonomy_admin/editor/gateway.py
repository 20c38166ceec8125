"""Persistence gateway used by the editor.

The editor never talks to the database directly. It goes through a
``TaxonomyGateway``: ``TaxonomyClient`` over HTTP or ``LocalGateway``
in-process. Both carry the caller's ``Principal``.
"""

import enum
from collections.abc import Sequence
from typing import Any, Protocol

from taxonomy_admin.core.dimension_kind import DimensionKind
from taxonomy_admin.schemas.common import ActionResult, DeleteResult, UsageResult


class TreeResource(str, enum.Enum):
    """Deletable items outside the dimension tables."""

    CATEGORY = "category"
    SUBCATEGORY = "subcategory"
    PRODUCT_TYPE = "product_type"
    COLLECTION = "collection"


Resource = TreeResource | DimensionKind


class TaxonomyGateway(Protocol):
    async def get_hierarchy(self) -> list[dict[str, Any]]: ...

    async def reorder_categories(self, ordered_ids: Sequence[str]) -> ActionResult: ...

    async def reorder_subcategories(
        self, category_id: str, ordered_ids: Sequence[str]
    ) -> ActionResult: ...

    async def reorder_product_types(
        self, subcategory_id: str, ordered_ids: Sequence[str]
    ) -> ActionResult: ...

    async def move_subcategory(
        self, subcategory_id: str, to_category_id: str, new_index: int
    ) -> ActionResult: ...

    async def move_product_type(
        self, product_type_id: str, to_subcategory_id: str, new_index: int
    ) -> ActionResult: ...

    async def check_usage(self, resource: Resource, item_id: str) -> UsageResult: ...

    async def delete_item(self, resource: Resource, item_id: str) -> DeleteResult: ...
