"""Dimension Service - generic CRUD over the dimension lookup tables.

One implementation serves all ten tables; the table, its label and the
columns that reference it come from the ``DimensionKind`` member.
"""

import uuid
from collections.abc import Sequence

from sqlalchemy import select

from taxonomy_admin.core.dimension_kind import DimensionKind
from taxonomy_admin.core.principal import Principal
from taxonomy_admin.schemas.common import ActionResult, DeleteResult, UsageResult
from taxonomy_admin.schemas.dimension import (
    DimensionValueCreate,
    DimensionValueRead,
    DimensionValueUpdate,
)
from taxonomy_admin.services.base_taxonomy_service import BaseTaxonomyService, SiblingScope


def dimension_scope(kind: DimensionKind) -> SiblingScope:
    return SiblingScope(
        model=kind.model,
        label=f"{kind.label} value",
        resource_type=kind.value,
    )


class DimensionService(BaseTaxonomyService):
    """CRUD for dimension values, parameterized over ``DimensionKind``."""

    async def list_values(self, caller: Principal, kind: DimensionKind) -> list[DimensionValueRead]:
        self._authorize(caller)
        model = kind.model
        stmt = (
            select(model)
            .order_by(model.sort_order)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return [DimensionValueRead.model_validate(row) for row in result.scalars().all()]

    async def create_value(
        self, caller: Principal, kind: DimensionKind, data: DimensionValueCreate
    ) -> ActionResult:
        values = {"code": data.code, "label": data.label, "description": data.description}
        # Size scales require a size list; new scales start empty
        if kind is DimensionKind.SIZE_SCALES:
            values["sizes"] = []
        return await self._create(caller, dimension_scope(kind), values, position=data.sort_order)

    async def update_value(
        self,
        caller: Principal,
        kind: DimensionKind,
        value_id: uuid.UUID,
        data: DimensionValueUpdate,
    ) -> ActionResult:
        return await self._update(
            caller, dimension_scope(kind), value_id, data.model_dump(exclude_unset=True)
        )

    async def reorder_values(
        self, caller: Principal, kind: DimensionKind, ordered_ids: Sequence[uuid.UUID]
    ) -> ActionResult:
        return await self._reorder(caller, dimension_scope(kind), None, ordered_ids)

    async def check_usage(
        self, caller: Principal, kind: DimensionKind, value_id: uuid.UUID
    ) -> UsageResult:
        self._authorize(caller)
        return await self._tally(
            (ref.column, [value_id], ref.noun) for ref in kind.usage_references
        )

    async def delete_value(
        self, caller: Principal, kind: DimensionKind, value_id: uuid.UUID
    ) -> DeleteResult:
        usage = await self.check_usage(caller, kind, value_id)
        return await self._delete_or_archive(caller, dimension_scope(kind), value_id, usage)
