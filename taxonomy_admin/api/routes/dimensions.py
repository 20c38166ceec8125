"""Dimension value endpoints, one set of routes for all ten tables.

``{kind}`` is validated against ``DimensionKind``; unknown table names
get a 422 from request validation.
"""

from uuid import UUID

from fastapi import APIRouter

from taxonomy_admin.api.deps import Caller, Dimensions
from taxonomy_admin.core.dimension_kind import DimensionKind
from taxonomy_admin.schemas.common import ActionResult, DeleteResult, UsageResult
from taxonomy_admin.schemas.dimension import (
    DimensionValueCreate,
    DimensionValueRead,
    DimensionValueUpdate,
)
from taxonomy_admin.schemas.taxonomy import ReorderRequest

router = APIRouter()


@router.get("/{kind}", response_model=list[DimensionValueRead])
async def list_values(
    kind: DimensionKind, caller: Caller, service: Dimensions
) -> list[DimensionValueRead]:
    return await service.list_values(caller, kind)


@router.post("/{kind}", response_model=ActionResult)
async def create_value(
    kind: DimensionKind, data: DimensionValueCreate, caller: Caller, service: Dimensions
) -> ActionResult:
    return await service.create_value(caller, kind, data)


@router.post("/{kind}/reorder", response_model=ActionResult)
async def reorder_values(
    kind: DimensionKind, data: ReorderRequest, caller: Caller, service: Dimensions
) -> ActionResult:
    return await service.reorder_values(caller, kind, data.ordered_ids)


@router.patch("/{kind}/{value_id}", response_model=ActionResult)
async def update_value(
    kind: DimensionKind,
    value_id: UUID,
    data: DimensionValueUpdate,
    caller: Caller,
    service: Dimensions,
) -> ActionResult:
    return await service.update_value(caller, kind, value_id, data)


@router.get("/{kind}/{value_id}/usage", response_model=UsageResult)
async def value_usage(
    kind: DimensionKind, value_id: UUID, caller: Caller, service: Dimensions
) -> UsageResult:
    return await service.check_usage(caller, kind, value_id)


@router.delete("/{kind}/{value_id}", response_model=DeleteResult)
async def delete_value(
    kind: DimensionKind, value_id: UUID, caller: Caller, service: Dimensions
) -> DeleteResult:
    return await service.delete_value(caller, kind, value_id)
