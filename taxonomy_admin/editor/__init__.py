"""Client-side taxonomy editor: tree store, drag handling, dispatch, delete flow."""

from taxonomy_admin.editor.commands import (
    Command,
    MoveProductType,
    MoveSubcategory,
    ReorderCategories,
    ReorderProductTypes,
    ReorderSubcategories,
)
from taxonomy_admin.editor.delete_flow import DeleteFlow, DeleteFlowError, DeleteState
from taxonomy_admin.editor.dispatcher import DispatchOutcome, MutationDispatcher
from taxonomy_admin.editor.drag import DragCoordinator
from taxonomy_admin.editor.gateway import Resource, TaxonomyGateway, TreeResource
from taxonomy_admin.editor.tree import (
    CategoryNode,
    ProductTypeNode,
    SubcategoryNode,
    TreeSnapshot,
    TreeStore,
)

__all__ = [
    "Command",
    "MoveProductType",
    "MoveSubcategory",
    "ReorderCategories",
    "ReorderProductTypes",
    "ReorderSubcategories",
    "DeleteFlow",
    "DeleteFlowError",
    "DeleteState",
    "DispatchOutcome",
    "MutationDispatcher",
    "DragCoordinator",
    "Resource",
    "TaxonomyGateway",
    "TreeResource",
    "CategoryNode",
    "ProductTypeNode",
    "SubcategoryNode",
    "TreeSnapshot",
    "TreeStore",
]
