"""Tests for drop resolution in the drag coordinator."""

import pytest

from taxonomy_admin.core.node_id import NodeType
from taxonomy_admin.editor.commands import (
    MoveProductType,
    MoveSubcategory,
    ReorderCategories,
    ReorderProductTypes,
    ReorderSubcategories,
)
from taxonomy_admin.editor.drag import DragCoordinator
from taxonomy_admin.editor.tree import CategoryNode, ProductTypeNode, SubcategoryNode, TreeStore


@pytest.fixture
def store() -> TreeStore:
    return TreeStore([
        CategoryNode("c1", "tops", "Tops", subcategories=[
            SubcategoryNode("s1", "tees", "Tees", product_types=[
                ProductTypeNode("p1", "crew", "Crew"),
                ProductTypeNode("p2", "vneck", "V-Neck", sort_order=1),
            ]),
            SubcategoryNode("s2", "knits", "Knits", sort_order=1),
            SubcategoryNode("s3", "sweats", "Sweats", sort_order=2, product_types=[
                ProductTypeNode("p3", "hoodie", "Hoodie"),
            ]),
        ]),
        CategoryNode("c2", "bottoms", "Bottoms", sort_order=1, subcategories=[
            SubcategoryNode("s4", "pants", "Pants", product_types=[
                ProductTypeNode("p4", "chino", "Chino"),
            ]),
        ]),
        CategoryNode("c3", "outerwear", "Outerwear", sort_order=2),
    ])


@pytest.fixture
def drag(store: TreeStore) -> DragCoordinator:
    return DragCoordinator(store)


def _drop(drag: DragCoordinator, active: str, over: str | None):
    drag.start(active)
    drag.hover(over)
    return drag.drop()


class TestNoOps:
    def test_no_hover_target(self, drag: DragCoordinator) -> None:
        assert _drop(drag, "cat-c1", None) is None

    def test_drop_on_self(self, drag: DragCoordinator) -> None:
        assert _drop(drag, "sub-s1", "sub-s1") is None

    def test_unparseable_ids(self, drag: DragCoordinator) -> None:
        assert _drop(drag, "col-x", "cat-c1") is None
        assert _drop(drag, "cat-c1", "garbage") is None

    def test_subcategory_onto_current_parent(self, drag: DragCoordinator) -> None:
        assert _drop(drag, "sub-s2", "cat-c1") is None

    def test_product_type_onto_current_parent(self, drag: DragCoordinator) -> None:
        assert _drop(drag, "pt-p1", "sub-s1") is None

    def test_category_onto_subcategory(self, drag: DragCoordinator) -> None:
        assert _drop(drag, "cat-c1", "sub-s4") is None

    def test_product_type_onto_category(self, drag: DragCoordinator) -> None:
        assert _drop(drag, "pt-p1", "cat-c2") is None

    def test_drop_clears_session(self, drag: DragCoordinator) -> None:
        _drop(drag, "cat-c1", "cat-c2")
        assert drag.active_id is None
        assert drag.over_id is None
        assert drag.drop() is None

    def test_cancel(self, drag: DragCoordinator) -> None:
        drag.start("cat-c1")
        drag.hover("cat-c2")
        drag.cancel()
        assert drag.drop() is None


class TestReorder:
    def test_category_reorder(self, drag: DragCoordinator) -> None:
        command = _drop(drag, "cat-c1", "cat-c3")
        assert command == ReorderCategories(("c2", "c3", "c1"))

    def test_subcategory_same_parent(self, drag: DragCoordinator) -> None:
        command = _drop(drag, "sub-s3", "sub-s1")
        assert command == ReorderSubcategories("c1", ("s3", "s1", "s2"))

    def test_product_type_same_parent(self, drag: DragCoordinator) -> None:
        command = _drop(drag, "pt-p1", "pt-p2")
        assert command == ReorderProductTypes("s1", ("p2", "p1"))


class TestReclassify:
    def test_subcategory_onto_foreign_sibling_inserts_at_its_index(
        self, drag: DragCoordinator
    ) -> None:
        command = _drop(drag, "sub-s2", "sub-s4")
        assert command == MoveSubcategory("s2", "c2", 0)

    def test_product_type_onto_foreign_sibling(self, drag: DragCoordinator) -> None:
        command = _drop(drag, "pt-p4", "pt-p2")
        assert command == MoveProductType("p4", "s1", 1)

    def test_subcategory_onto_other_category_appends(self, drag: DragCoordinator) -> None:
        command = _drop(drag, "sub-s1", "cat-c2")
        assert command == MoveSubcategory("s1", "c2", 1, expand_target=True)

    def test_product_type_onto_other_subcategory_appends(self, drag: DragCoordinator) -> None:
        command = _drop(drag, "pt-p1", "sub-s3")
        assert command == MoveProductType("p1", "s3", 1, expand_target=True)

    def test_cross_level_apply_expands_target(
        self, drag: DragCoordinator, store: TreeStore
    ) -> None:
        command = _drop(drag, "sub-s1", "cat-c3")
        command.apply(store)

        assert [s.id for s in store.find_category("c3").subcategories] == ["s1"]
        assert store.is_expanded(NodeType.CATEGORY, "c3")


class TestDropTargets:
    def test_category_row_accepts_categories_and_subcategories(
        self, drag: DragCoordinator
    ) -> None:
        drag.start("sub-s1")
        drag.hover("cat-c2")
        assert drag.is_drop_target(NodeType.CATEGORY, "c2")
        assert not drag.is_drop_target(NodeType.CATEGORY, "c1")

    def test_product_type_row_rejects_subcategory(self, drag: DragCoordinator) -> None:
        drag.start("sub-s1")
        drag.hover("pt-p4")
        assert not drag.is_drop_target(NodeType.PRODUCT_TYPE, "p4")

    def test_nothing_highlighted_without_drag(self, drag: DragCoordinator) -> None:
        assert not drag.is_drop_target(NodeType.CATEGORY, "c1")
