"""Product tree and collection endpoints.

Mutations return ``ActionResult`` / ``DeleteResult`` bodies with status 200;
expected failures (duplicate code, bad ordering) are reported in the body
with ``success: false``. Authorization and missing rows map to 403 / 404
through the application exception handlers.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Header, Response, status

from taxonomy_admin.api.deps import Caller, Taxonomy
from taxonomy_admin.schemas.common import ActionResult, DeleteResult, UsageResult
from taxonomy_admin.schemas.taxonomy import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    CollectionCreate,
    CollectionRead,
    CollectionUpdate,
    MoveProductTypeRequest,
    MoveSubcategoryRequest,
    ProductTypeCreate,
    ProductTypeUpdate,
    ReorderRequest,
    SubcategoryCreate,
    SubcategoryUpdate,
)
from taxonomy_admin.services.taxonomy_service import hierarchy_etag

router = APIRouter()


@router.get("", response_model=list[CategoryRead], summary="Full product tree")
async def get_hierarchy(
    caller: Caller,
    service: Taxonomy,
    response: Response,
    if_none_match: Annotated[str | None, Header()] = None,
) -> list[CategoryRead] | Response:
    """Categories with nested subcategories and product types.

    The ``ETag`` is a digest of the returned tree, so it stays valid across
    restarts and workers and changes whenever the content does.
    """
    tree = await service.get_hierarchy(caller)
    etag = hierarchy_etag(tree)
    if if_none_match == etag:
        return Response(status_code=status.HTTP_304_NOT_MODIFIED, headers={"ETag": etag})
    response.headers["ETag"] = etag
    return tree


# =============================================================================
# Categories
# =============================================================================


@router.post("/categories", response_model=ActionResult)
async def create_category(data: CategoryCreate, caller: Caller, service: Taxonomy) -> ActionResult:
    return await service.create_category(caller, data)


@router.post("/categories/reorder", response_model=ActionResult)
async def reorder_categories(
    data: ReorderRequest, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.reorder_categories(caller, data.ordered_ids)


@router.patch("/categories/{category_id}", response_model=ActionResult)
async def update_category(
    category_id: UUID, data: CategoryUpdate, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.update_category(caller, category_id, data)


@router.get("/categories/{category_id}/usage", response_model=UsageResult)
async def category_usage(category_id: UUID, caller: Caller, service: Taxonomy) -> UsageResult:
    return await service.check_category_usage(caller, category_id)


@router.delete("/categories/{category_id}", response_model=DeleteResult)
async def delete_category(category_id: UUID, caller: Caller, service: Taxonomy) -> DeleteResult:
    return await service.delete_category(caller, category_id)


@router.post("/categories/{category_id}/subcategories/reorder", response_model=ActionResult)
async def reorder_subcategories(
    category_id: UUID, data: ReorderRequest, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.reorder_subcategories(caller, category_id, data.ordered_ids)


# =============================================================================
# Subcategories
# =============================================================================


@router.post("/subcategories", response_model=ActionResult)
async def create_subcategory(
    data: SubcategoryCreate, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.create_subcategory(caller, data)


@router.patch("/subcategories/{subcategory_id}", response_model=ActionResult)
async def update_subcategory(
    subcategory_id: UUID, data: SubcategoryUpdate, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.update_subcategory(caller, subcategory_id, data)


@router.post("/subcategories/{subcategory_id}/move", response_model=ActionResult)
async def move_subcategory(
    subcategory_id: UUID, data: MoveSubcategoryRequest, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.move_subcategory(
        caller, subcategory_id, data.to_category_id, data.new_index
    )


@router.get("/subcategories/{subcategory_id}/usage", response_model=UsageResult)
async def subcategory_usage(
    subcategory_id: UUID, caller: Caller, service: Taxonomy
) -> UsageResult:
    return await service.check_subcategory_usage(caller, subcategory_id)


@router.delete("/subcategories/{subcategory_id}", response_model=DeleteResult)
async def delete_subcategory(
    subcategory_id: UUID, caller: Caller, service: Taxonomy
) -> DeleteResult:
    return await service.delete_subcategory(caller, subcategory_id)


@router.post("/subcategories/{subcategory_id}/product-types/reorder", response_model=ActionResult)
async def reorder_product_types(
    subcategory_id: UUID, data: ReorderRequest, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.reorder_product_types(caller, subcategory_id, data.ordered_ids)


# =============================================================================
# Product types
# =============================================================================


@router.post("/product-types", response_model=ActionResult)
async def create_product_type(
    data: ProductTypeCreate, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.create_product_type(caller, data)


@router.patch("/product-types/{product_type_id}", response_model=ActionResult)
async def update_product_type(
    product_type_id: UUID, data: ProductTypeUpdate, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.update_product_type(caller, product_type_id, data)


@router.post("/product-types/{product_type_id}/move", response_model=ActionResult)
async def move_product_type(
    product_type_id: UUID, data: MoveProductTypeRequest, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.move_product_type(
        caller, product_type_id, data.to_subcategory_id, data.new_index
    )


@router.get("/product-types/{product_type_id}/usage", response_model=UsageResult)
async def product_type_usage(
    product_type_id: UUID, caller: Caller, service: Taxonomy
) -> UsageResult:
    return await service.check_product_type_usage(caller, product_type_id)


@router.delete("/product-types/{product_type_id}", response_model=DeleteResult)
async def delete_product_type(
    product_type_id: UUID, caller: Caller, service: Taxonomy
) -> DeleteResult:
    return await service.delete_product_type(caller, product_type_id)


# =============================================================================
# Collections
# =============================================================================


@router.get("/collections", response_model=list[CollectionRead])
async def list_collections(caller: Caller, service: Taxonomy) -> list[CollectionRead]:
    return await service.list_collections(caller)


@router.post("/collections", response_model=ActionResult)
async def create_collection(
    data: CollectionCreate, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.create_collection(caller, data)


@router.post("/collections/reorder", response_model=ActionResult)
async def reorder_collections(
    data: ReorderRequest, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.reorder_collections(caller, data.ordered_ids)


@router.patch("/collections/{collection_id}", response_model=ActionResult)
async def update_collection(
    collection_id: UUID, data: CollectionUpdate, caller: Caller, service: Taxonomy
) -> ActionResult:
    return await service.update_collection(caller, collection_id, data)


@router.get("/collections/{collection_id}/usage", response_model=UsageResult)
async def collection_usage(collection_id: UUID, caller: Caller, service: Taxonomy) -> UsageResult:
    return await service.check_collection_usage(caller, collection_id)


@router.delete("/collections/{collection_id}", response_model=DeleteResult)
async def delete_collection(
    collection_id: UUID, caller: Caller, service: Taxonomy
) -> DeleteResult:
    return await service.delete_collection(caller, collection_id)
