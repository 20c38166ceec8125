"""Editor commands.

A command is the semantic result of a drop: it can patch a ``TreeStore``
with its predicted outcome and send itself through a gateway.
"""

from dataclasses import dataclass

from taxonomy_admin.core.node_id import NodeType
from taxonomy_admin.editor.gateway import TaxonomyGateway
from taxonomy_admin.editor.tree import TreeStore
from taxonomy_admin.schemas.common import ActionResult


@dataclass(frozen=True)
class ReorderCategories:
    ordered_ids: tuple[str, ...]

    def apply(self, store: TreeStore) -> None:
        store.reorder_categories(self.ordered_ids)

    async def send(self, gateway: TaxonomyGateway) -> ActionResult:
        return await gateway.reorder_categories(list(self.ordered_ids))


@dataclass(frozen=True)
class ReorderSubcategories:
    category_id: str
    ordered_ids: tuple[str, ...]

    def apply(self, store: TreeStore) -> None:
        store.reorder_subcategories(self.category_id, self.ordered_ids)

    async def send(self, gateway: TaxonomyGateway) -> ActionResult:
        return await gateway.reorder_subcategories(self.category_id, list(self.ordered_ids))


@dataclass(frozen=True)
class ReorderProductTypes:
    subcategory_id: str
    ordered_ids: tuple[str, ...]

    def apply(self, store: TreeStore) -> None:
        store.reorder_product_types(self.subcategory_id, self.ordered_ids)

    async def send(self, gateway: TaxonomyGateway) -> ActionResult:
        return await gateway.reorder_product_types(self.subcategory_id, list(self.ordered_ids))


@dataclass(frozen=True)
class MoveSubcategory:
    """Re-parent a subcategory.

    ``expand_target`` is set for cross-level drops (onto the category row),
    which append at the end and open the target category.
    """

    subcategory_id: str
    to_category_id: str
    new_index: int
    expand_target: bool = False

    def apply(self, store: TreeStore) -> None:
        store.move_subcategory(self.subcategory_id, self.to_category_id, self.new_index)
        if self.expand_target:
            store.expand(NodeType.CATEGORY, self.to_category_id)

    async def send(self, gateway: TaxonomyGateway) -> ActionResult:
        return await gateway.move_subcategory(
            self.subcategory_id, self.to_category_id, self.new_index
        )


@dataclass(frozen=True)
class MoveProductType:
    """Re-parent a product type (see ``MoveSubcategory``)."""

    product_type_id: str
    to_subcategory_id: str
    new_index: int
    expand_target: bool = False

    def apply(self, store: TreeStore) -> None:
        store.move_product_type(self.product_type_id, self.to_subcategory_id, self.new_index)
        if self.expand_target:
            store.expand(NodeType.SUBCATEGORY, self.to_subcategory_id)

    async def send(self, gateway: TaxonomyGateway) -> ActionResult:
        return await gateway.move_product_type(
            self.product_type_id, self.to_subcategory_id, self.new_index
        )


Command = (
    ReorderCategories
    | ReorderSubcategories
    | ReorderProductTypes
    | MoveSubcategory
    | MoveProductType
)
