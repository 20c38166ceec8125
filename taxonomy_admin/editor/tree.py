"""Tree Store - in-memory copy of the product tree for the editor.

Seeded from the hierarchy read, patched optimistically by commands and
restored from a snapshot when a mutation fails. Local ``sort_order`` values
are re-densified after every patch so the store always looks like what the
server will hold once the mutation lands.
"""

import copy
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from taxonomy_admin.core.node_id import NodeRef, NodeType, prefix_id
from taxonomy_admin.core.ordering import splice


@dataclass
class ProductTypeNode:
    id: str
    code: str
    name: str
    status: str = "active"
    sort_order: int = 0


@dataclass
class SubcategoryNode:
    id: str
    code: str
    name: str
    status: str = "active"
    sort_order: int = 0
    product_types: list[ProductTypeNode] = field(default_factory=list)


@dataclass
class CategoryNode:
    id: str
    code: str
    name: str
    status: str = "active"
    sort_order: int = 0
    subcategories: list[SubcategoryNode] = field(default_factory=list)


TreeNode = CategoryNode | SubcategoryNode | ProductTypeNode


@dataclass(frozen=True)
class TreeSnapshot:
    """Opaque copy of the store state, taken before an optimistic patch."""

    categories: list[CategoryNode]
    expanded: frozenset[str]


def _field(source: Any, name: str, default: Any = None) -> Any:
    if isinstance(source, dict):
        return source.get(name, default)
    return getattr(source, name, default)


def _status(source: Any) -> str:
    value = _field(source, "status", "active")
    return getattr(value, "value", value)


def _densify(nodes: Sequence[Any]) -> None:
    for position, node in enumerate(nodes):
        node.sort_order = position


def _reordered(nodes: Sequence[Any], ordered_ids: Sequence[str]) -> list[Any]:
    by_id = {node.id: node for node in nodes}
    if set(by_id) != set(ordered_ids) or len(ordered_ids) != len(by_id):
        raise ValueError("ordered ids do not match the sibling set")
    return [by_id[node_id] for node_id in ordered_ids]


class TreeStore:
    """Mutable client-side tree plus the set of expanded rows."""

    def __init__(self, categories: Iterable[CategoryNode] | None = None) -> None:
        self.categories: list[CategoryNode] = list(categories or [])
        self.expanded: set[str] = set()

    @classmethod
    def from_hierarchy(cls, hierarchy: Iterable[Any]) -> "TreeStore":
        """Build a store from ``CategoryRead`` models or their JSON form."""
        categories = []
        for cat in hierarchy:
            subcategories = []
            for sub in _field(cat, "subcategories", []) or []:
                product_types = [
                    ProductTypeNode(
                        id=str(_field(pt, "id")),
                        code=_field(pt, "code"),
                        name=_field(pt, "name"),
                        status=_status(pt),
                        sort_order=_field(pt, "sort_order", 0),
                    )
                    for pt in _field(sub, "product_types", []) or []
                ]
                subcategories.append(
                    SubcategoryNode(
                        id=str(_field(sub, "id")),
                        code=_field(sub, "code"),
                        name=_field(sub, "name"),
                        status=_status(sub),
                        sort_order=_field(sub, "sort_order", 0),
                        product_types=product_types,
                    )
                )
            categories.append(
                CategoryNode(
                    id=str(_field(cat, "id")),
                    code=_field(cat, "code"),
                    name=_field(cat, "name"),
                    status=_status(cat),
                    sort_order=_field(cat, "sort_order", 0),
                    subcategories=subcategories,
                )
            )
        return cls(categories)

    # =========================================================================
    # Lookups
    # =========================================================================

    def find_category(self, category_id: str) -> CategoryNode | None:
        return next((c for c in self.categories if c.id == category_id), None)

    def find_subcategory(self, subcategory_id: str) -> SubcategoryNode | None:
        for cat in self.categories:
            for sub in cat.subcategories:
                if sub.id == subcategory_id:
                    return sub
        return None

    def find_product_type(self, product_type_id: str) -> ProductTypeNode | None:
        parent = self.find_pt_parent(product_type_id)
        if parent is None:
            return None
        return next(pt for pt in parent.product_types if pt.id == product_type_id)

    def find_sub_parent(self, subcategory_id: str) -> CategoryNode | None:
        """Category holding the subcategory."""
        return next(
            (c for c in self.categories if any(s.id == subcategory_id for s in c.subcategories)),
            None,
        )

    def find_pt_parent(self, product_type_id: str) -> SubcategoryNode | None:
        """Subcategory holding the product type."""
        for cat in self.categories:
            for sub in cat.subcategories:
                if any(pt.id == product_type_id for pt in sub.product_types):
                    return sub
        return None

    def find_item(self, ref: NodeRef) -> TreeNode | None:
        match ref.type:
            case NodeType.CATEGORY:
                return self.find_category(ref.id)
            case NodeType.SUBCATEGORY:
                return self.find_subcategory(ref.id)
            case NodeType.PRODUCT_TYPE:
                return self.find_product_type(ref.id)

    def ids(self) -> list[str]:
        """Category ids in display order."""
        return [c.id for c in self.categories]

    # =========================================================================
    # Expansion
    # =========================================================================

    def expand(self, node_type: NodeType, node_id: str) -> None:
        self.expanded.add(prefix_id(node_type, node_id))

    def collapse(self, node_type: NodeType, node_id: str) -> None:
        self.expanded.discard(prefix_id(node_type, node_id))

    def toggle(self, node_type: NodeType, node_id: str) -> bool:
        key = prefix_id(node_type, node_id)
        if key in self.expanded:
            self.expanded.discard(key)
            return False
        self.expanded.add(key)
        return True

    def is_expanded(self, node_type: NodeType, node_id: str) -> bool:
        return prefix_id(node_type, node_id) in self.expanded

    # =========================================================================
    # Snapshot / restore
    # =========================================================================

    def snapshot(self) -> TreeSnapshot:
        return TreeSnapshot(
            categories=copy.deepcopy(self.categories),
            expanded=frozenset(self.expanded),
        )

    def restore(self, snapshot: TreeSnapshot) -> None:
        self.categories = copy.deepcopy(snapshot.categories)
        self.expanded = set(snapshot.expanded)

    # =========================================================================
    # Patches
    # =========================================================================

    def reorder_categories(self, ordered_ids: Sequence[str]) -> None:
        self.categories = _reordered(self.categories, ordered_ids)
        _densify(self.categories)

    def reorder_subcategories(self, category_id: str, ordered_ids: Sequence[str]) -> None:
        cat = self._require_category(category_id)
        cat.subcategories = _reordered(cat.subcategories, ordered_ids)
        _densify(cat.subcategories)

    def reorder_product_types(self, subcategory_id: str, ordered_ids: Sequence[str]) -> None:
        sub = self._require_subcategory(subcategory_id)
        sub.product_types = _reordered(sub.product_types, ordered_ids)
        _densify(sub.product_types)

    def move_subcategory(self, subcategory_id: str, to_category_id: str, new_index: int) -> None:
        """Re-parent a subcategory and place it at ``new_index``."""
        source = self.find_sub_parent(subcategory_id)
        if source is None:
            raise KeyError(f"subcategory {subcategory_id} not in tree")
        dest = self._require_category(to_category_id)

        moved = next(s for s in source.subcategories if s.id == subcategory_id)
        source.subcategories = [s for s in source.subcategories if s.id != subcategory_id]
        dest.subcategories = splice(dest.subcategories, moved, new_index)
        _densify(source.subcategories)
        _densify(dest.subcategories)

    def move_product_type(self, product_type_id: str, to_subcategory_id: str, new_index: int) -> None:
        """Re-parent a product type and place it at ``new_index``."""
        source = self.find_pt_parent(product_type_id)
        if source is None:
            raise KeyError(f"product type {product_type_id} not in tree")
        dest = self._require_subcategory(to_subcategory_id)

        moved = next(pt for pt in source.product_types if pt.id == product_type_id)
        source.product_types = [pt for pt in source.product_types if pt.id != product_type_id]
        dest.product_types = splice(dest.product_types, moved, new_index)
        _densify(source.product_types)
        _densify(dest.product_types)

    def _require_category(self, category_id: str) -> CategoryNode:
        cat = self.find_category(category_id)
        if cat is None:
            raise KeyError(f"category {category_id} not in tree")
        return cat

    def _require_subcategory(self, subcategory_id: str) -> SubcategoryNode:
        sub = self.find_subcategory(subcategory_id)
        if sub is None:
            raise KeyError(f"subcategory {subcategory_id} not in tree")
        return sub
