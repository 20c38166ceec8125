"""Drag Coordinator - turns drag gestures into editor commands.

Holds one active id and one hovered id at a time (prefixed node ids). On
drop it decides between a same-parent reorder, a cross-parent reclassify at
the hovered sibling's position, and a cross-level reclassify that appends to
the hovered parent. It never touches storage; the returned command is handed
to the ``MutationDispatcher``.
"""

from taxonomy_admin.core.node_id import NodeRef, NodeType, parse_id
from taxonomy_admin.core.ordering import array_move
from taxonomy_admin.editor.commands import (
    Command,
    MoveProductType,
    MoveSubcategory,
    ReorderCategories,
    ReorderProductTypes,
    ReorderSubcategories,
)
from taxonomy_admin.editor.tree import TreeStore
from taxonomy_admin.infra.logging import get_logger

logger = get_logger(__name__)

# Row types that highlight while a node of the given type is dragged over them
_DROP_TARGETS: dict[NodeType, frozenset[NodeType]] = {
    NodeType.CATEGORY: frozenset({NodeType.CATEGORY, NodeType.SUBCATEGORY}),
    NodeType.SUBCATEGORY: frozenset({NodeType.SUBCATEGORY, NodeType.PRODUCT_TYPE}),
    NodeType.PRODUCT_TYPE: frozenset({NodeType.PRODUCT_TYPE}),
}


class DragCoordinator:
    """Tracks a single drag session over a ``TreeStore``."""

    def __init__(self, store: TreeStore) -> None:
        self.store = store
        self.active_id: str | None = None
        self.over_id: str | None = None

    def start(self, active_id: str) -> None:
        self.active_id = active_id
        self.over_id = None

    def hover(self, over_id: str | None) -> None:
        self.over_id = over_id

    def cancel(self) -> None:
        self.active_id = None
        self.over_id = None

    def drop(self) -> Command | None:
        """End the drag and return the command to dispatch, if any."""
        active_id, over_id = self.active_id, self.over_id
        self.cancel()

        if active_id is None or over_id is None or active_id == over_id:
            return None

        active = parse_id(active_id)
        over = parse_id(over_id)
        if active is None or over is None:
            logger.debug("Ignoring drop with unparseable ids", active_id=active_id, over_id=over_id)
            return None

        match active.type:
            case NodeType.CATEGORY:
                return self._drop_category(active, over)
            case NodeType.SUBCATEGORY:
                return self._drop_subcategory(active, over)
            case NodeType.PRODUCT_TYPE:
                return self._drop_product_type(active, over)

    def is_drop_target(self, row_type: NodeType, row_id: str) -> bool:
        """Whether the row is the current hover target and accepts the dragged node."""
        active = parse_id(self.active_id)
        over = parse_id(self.over_id)
        if active is None or over is None:
            return False
        if over.type != row_type or over.id != row_id:
            return False
        return active.type in _DROP_TARGETS[row_type]

    # =========================================================================
    # Drop rules
    # =========================================================================

    def _drop_category(self, active: NodeRef, over: NodeRef) -> Command | None:
        if over.type != NodeType.CATEGORY:
            return None
        ids = self.store.ids()
        if active.id not in ids or over.id not in ids:
            return None
        reordered = array_move(ids, ids.index(active.id), ids.index(over.id))
        return ReorderCategories(tuple(reordered))

    def _drop_subcategory(self, active: NodeRef, over: NodeRef) -> Command | None:
        source = self.store.find_sub_parent(active.id)
        if source is None:
            return None

        if over.type == NodeType.SUBCATEGORY:
            dest = self.store.find_sub_parent(over.id)
            if dest is None:
                return None
            if dest.id == source.id:
                ids = [s.id for s in source.subcategories]
                reordered = array_move(ids, ids.index(active.id), ids.index(over.id))
                return ReorderSubcategories(source.id, tuple(reordered))
            insert_at = [s.id for s in dest.subcategories].index(over.id)
            return MoveSubcategory(active.id, dest.id, insert_at)

        if over.type == NodeType.CATEGORY and over.id != source.id:
            dest = self.store.find_category(over.id)
            if dest is None:
                return None
            return MoveSubcategory(active.id, dest.id, len(dest.subcategories), expand_target=True)

        return None

    def _drop_product_type(self, active: NodeRef, over: NodeRef) -> Command | None:
        source = self.store.find_pt_parent(active.id)
        if source is None:
            return None

        if over.type == NodeType.PRODUCT_TYPE:
            dest = self.store.find_pt_parent(over.id)
            if dest is None:
                return None
            if dest.id == source.id:
                ids = [pt.id for pt in source.product_types]
                reordered = array_move(ids, ids.index(active.id), ids.index(over.id))
                return ReorderProductTypes(source.id, tuple(reordered))
            insert_at = [pt.id for pt in dest.product_types].index(over.id)
            return MoveProductType(active.id, dest.id, insert_at)

        if over.type == NodeType.SUBCATEGORY and over.id != source.id:
            dest = self.store.find_subcategory(over.id)
            if dest is None:
                return None
            return MoveProductType(active.id, dest.id, len(dest.product_types), expand_target=True)

        return None
