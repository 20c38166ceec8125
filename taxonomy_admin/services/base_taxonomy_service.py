"""Base Taxonomy Service - shared write path for every taxonomy table.

All taxonomy tables (the product tree, collections and the dimension lookup
tables) share the same row shape: a unique ``code``, a ``status`` and a
``sort_order`` that is kept dense (0..N-1) within its sibling set. This base
class owns the operations that must preserve those invariants:

- authorization of the caller
- code normalization and duplicate-code translation on insert
- full sibling-set rewrites of ``sort_order``
- usage-aware delete (hard delete vs. soft archive)
- audit entry + commit + page revalidation after every mutation

Subclasses describe their tables and expose the public operations.
"""

import uuid
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taxonomy_admin.config import settings
from taxonomy_admin.core.errors import DuplicateCodeError, InvalidOrderingError, NotFoundError
from taxonomy_admin.core.ordering import dense_positions, normalize_code, splice
from taxonomy_admin.core.principal import Principal, require_admin
from taxonomy_admin.infra.logging import get_logger
from taxonomy_admin.infra.revalidation import PathRevalidator, get_revalidator
from taxonomy_admin.models import AuditLogEntry, TaxonomyStatus
from taxonomy_admin.schemas.common import ActionResult, DeleteResult, UsageResult

logger = get_logger(__name__)


@dataclass(frozen=True)
class SiblingScope:
    """Describes one taxonomy table and how its sibling sets are scoped.

    Attributes:
        model: Mapped class of the table
        label: Singular human label used in messages ("product type")
        resource_type: Audit log resource type ("product_type")
        parent_column: Foreign key grouping siblings, None for flat tables
        parent_model: Mapped class the foreign key points at
    """

    model: Any
    label: str
    resource_type: str
    parent_column: Any = None
    parent_model: Any = None

    @property
    def parent_key(self) -> str | None:
        return self.parent_column.key if self.parent_column is not None else None


def _is_unique_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig if exc.orig is not None else exc).lower()
    return "unique" in message or "duplicate key" in message


class BaseTaxonomyService:
    """Shared write path for taxonomy tables."""

    def __init__(
        self,
        db_session: AsyncSession,
        revalidator: PathRevalidator | None = None,
        allowed_roles: Iterable[str] | None = None,
        page_path: str | None = None,
        admin_permission: str | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            db_session: Async SQLAlchemy session; the service commits it
            revalidator: Revalidation signal sink (process-wide by default)
            allowed_roles: Roles allowed to mutate (settings.admin_roles by default)
            page_path: Path revalidated after mutations
            admin_permission: Permission granting admin to other roles
        """
        self.db = db_session
        self.revalidator = revalidator or get_revalidator()
        self.allowed_roles = frozenset(allowed_roles or settings.admin_roles)
        self.page_path = page_path or settings.taxonomy_page_path
        self.admin_permission = admin_permission or settings.admin_permission

    # =========================================================================
    # Authorization and bookkeeping
    # =========================================================================

    def _authorize(self, caller: Principal) -> Principal:
        return require_admin(caller, self.allowed_roles, self.admin_permission)

    async def _commit(
        self,
        caller: Principal,
        scope: SiblingScope,
        resource_id: uuid.UUID | None,
        action: str,
        **metadata: Any,
    ) -> None:
        """Write the audit entry, commit, and signal revalidation."""
        self.db.add(
            AuditLogEntry(
                actor_user_id=caller.user_id,
                resource_type=scope.resource_type,
                resource_id=resource_id,
                action=action,
                metadata_json=_jsonable(metadata) or None,
            )
        )
        await self.db.commit()
        self.revalidator.revalidate(self.page_path)

    async def _get_or_raise(self, scope: SiblingScope, item_id: uuid.UUID) -> Any:
        row = await self.db.get(scope.model, item_id)
        if row is None:
            raise NotFoundError(scope.label, item_id)
        return row

    async def _ensure_parent(self, scope: SiblingScope, parent_id: uuid.UUID) -> None:
        parent = await self.db.get(scope.parent_model, parent_id)
        if parent is None:
            raise NotFoundError(f"parent of {scope.label}", parent_id)

    # =========================================================================
    # Sibling ordering
    # =========================================================================

    async def _lock_parents(self, scope: SiblingScope, parent_ids: Iterable[uuid.UUID | None]) -> None:
        """Lock parent rows so concurrent rewrites of a sibling set serialize.

        Flat tables lock their own rows. Backends without row locks
        (SQLite) ignore FOR UPDATE.
        """
        if scope.parent_model is None:
            stmt = select(scope.model.id).order_by(scope.model.id).with_for_update()
        else:
            ids = sorted({p for p in parent_ids if p is not None}, key=str)
            if not ids:
                return
            stmt = (
                select(scope.parent_model.id)
                .where(scope.parent_model.id.in_(ids))
                .order_by(scope.parent_model.id)
                .with_for_update()
            )
        await self.db.execute(stmt)

    async def _sibling_ids(self, scope: SiblingScope, parent_id: uuid.UUID | None) -> list[uuid.UUID]:
        """Ids of a sibling set in current ``sort_order``."""
        stmt = select(scope.model.id).order_by(scope.model.sort_order, scope.model.created_at)
        if scope.parent_column is not None:
            stmt = stmt.where(scope.parent_column == parent_id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def _rewrite_order(self, scope: SiblingScope, ordered_ids: Sequence[uuid.UUID]) -> None:
        """Set ``sort_order = index`` for every id."""
        for item_id, position in dense_positions(ordered_ids):
            await self.db.execute(
                update(scope.model)
                .where(scope.model.id == item_id)
                .values(sort_order=position)
            )

    async def _reorder(
        self,
        caller: Principal,
        scope: SiblingScope,
        parent_id: uuid.UUID | None,
        ordered_ids: Sequence[uuid.UUID],
    ) -> ActionResult:
        """Rewrite a whole sibling set's order in one transaction.

        ``ordered_ids`` must contain exactly the current siblings.
        """
        self._authorize(caller)
        if scope.parent_model is not None:
            await self._ensure_parent(scope, parent_id)

        try:
            await self._lock_parents(scope, [parent_id])
            current = await self._sibling_ids(scope, parent_id)
            if len(set(ordered_ids)) != len(ordered_ids) or set(ordered_ids) != set(current):
                raise InvalidOrderingError(
                    f"Ordered ids must list each {scope.label} under this parent exactly once"
                )

            await self._rewrite_order(scope, ordered_ids)
            await self._commit(
                caller, scope, parent_id, "reorder", ordered_ids=list(ordered_ids)
            )
        except (InvalidOrderingError, SQLAlchemyError) as e:
            await self.db.rollback()
            logger.warning(
                "Reorder failed",
                resource_type=scope.resource_type,
                parent_id=str(parent_id) if parent_id else None,
                error=str(e),
            )
            return ActionResult.fail(str(e))

        logger.info(
            "Siblings reordered",
            resource_type=scope.resource_type,
            parent_id=str(parent_id) if parent_id else None,
            count=len(ordered_ids),
        )
        return ActionResult.ok()

    async def _move(
        self,
        caller: Principal,
        scope: SiblingScope,
        item_id: uuid.UUID,
        to_parent_id: uuid.UUID,
        new_index: int,
    ) -> ActionResult:
        """Re-parent an item and place it at ``new_index`` among its new siblings.

        Both the destination and the source sibling sets end up dense.
        """
        self._authorize(caller)
        row = await self._get_or_raise(scope, item_id)
        await self._ensure_parent(scope, to_parent_id)
        from_parent_id = getattr(row, scope.parent_key)

        try:
            await self._lock_parents(scope, [from_parent_id, to_parent_id])
            await self.db.execute(
                update(scope.model)
                .where(scope.model.id == item_id)
                .values({scope.parent_key: to_parent_id})
            )

            siblings = await self._sibling_ids(scope, to_parent_id)
            await self._rewrite_order(scope, splice(siblings, item_id, new_index))

            if from_parent_id != to_parent_id:
                remaining = await self._sibling_ids(scope, from_parent_id)
                await self._rewrite_order(scope, remaining)

            await self._commit(
                caller,
                scope,
                item_id,
                "move",
                from_parent_id=from_parent_id,
                to_parent_id=to_parent_id,
                new_index=new_index,
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.warning(
                "Move failed",
                resource_type=scope.resource_type,
                item_id=str(item_id),
                error=str(e),
            )
            return ActionResult.fail(str(e))

        logger.info(
            "Item moved",
            resource_type=scope.resource_type,
            item_id=str(item_id),
            from_parent_id=str(from_parent_id),
            to_parent_id=str(to_parent_id),
            new_index=new_index,
        )
        return ActionResult.ok()

    # =========================================================================
    # Create / update
    # =========================================================================

    async def _create(
        self,
        caller: Principal,
        scope: SiblingScope,
        values: dict[str, Any],
        position: int | None = None,
    ) -> ActionResult:
        """Insert a row at ``position`` (end of its siblings by default).

        Duplicate codes come back as a failed result and insert nothing.
        """
        self._authorize(caller)
        parent_id = values.get(scope.parent_key) if scope.parent_key else None
        if scope.parent_model is not None:
            await self._ensure_parent(scope, parent_id)

        values = {**values, "code": normalize_code(values["code"])}
        item_id = uuid.uuid4()

        try:
            await self._lock_parents(scope, [parent_id])
            siblings = await self._sibling_ids(scope, parent_id)
            self.db.add(scope.model(id=item_id, sort_order=len(siblings), **values))
            await self.db.flush()

            if position is not None and position < len(siblings):
                await self._rewrite_order(scope, splice(siblings, item_id, position))

            await self._commit(caller, scope, item_id, "create", code=values["code"])
        except IntegrityError as e:
            await self.db.rollback()
            if _is_unique_violation(e):
                logger.info(
                    "Duplicate code rejected",
                    resource_type=scope.resource_type,
                    code=values["code"],
                )
                return ActionResult.fail(str(DuplicateCodeError(scope.label)))
            return ActionResult.fail(str(e.orig if e.orig is not None else e))
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Create failed", resource_type=scope.resource_type, error=str(e))
            return ActionResult.fail(str(e))

        logger.info(
            "Item created",
            resource_type=scope.resource_type,
            item_id=str(item_id),
            code=values["code"],
        )
        return ActionResult.ok(id=str(item_id))

    async def _update(
        self,
        caller: Principal,
        scope: SiblingScope,
        item_id: uuid.UUID,
        values: dict[str, Any],
    ) -> ActionResult:
        """Apply a partial update (rename, status, descriptive fields)."""
        self._authorize(caller)
        row = await self._get_or_raise(scope, item_id)

        for key, value in values.items():
            setattr(row, key, value)

        try:
            await self._commit(caller, scope, item_id, "update", fields=sorted(values))
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Update failed",
                resource_type=scope.resource_type,
                item_id=str(item_id),
                error=str(e),
            )
            return ActionResult.fail(str(e))

        logger.info(
            "Item updated",
            resource_type=scope.resource_type,
            item_id=str(item_id),
            fields=sorted(values),
        )
        return ActionResult.ok()

    # =========================================================================
    # Usage and delete
    # =========================================================================

    async def _count(self, column: Any, ids: Sequence[uuid.UUID]) -> int:
        """Count rows whose ``column`` points at any of ``ids``."""
        if not ids:
            return 0
        stmt = select(func.count()).select_from(column.class_).where(column.in_(ids))
        return int((await self.db.execute(stmt)).scalar_one())

    async def _tally(self, references: Iterable[tuple[Any, Sequence[uuid.UUID], str]]) -> UsageResult:
        """Sum reference counts into a UsageResult.

        Args:
            references: (column, ids, noun) triples, e.g.
                (SeasonSlot.product_type_id, [pt1, pt2], "season slot(s)")
        """
        total = 0
        parts: list[str] = []
        for column, ids, noun in references:
            count = await self._count(column, ids)
            if count > 0:
                total += count
                parts.append(f"{count} {noun}")

        return UsageResult(
            in_use=total > 0,
            usage_count=total,
            usage_description=", ".join(parts),
        )

    async def _delete_or_archive(
        self,
        caller: Principal,
        scope: SiblingScope,
        item_id: uuid.UUID,
        usage: UsageResult,
    ) -> DeleteResult:
        """Hard delete an unused row, or flip a used one to ``deprecated``."""
        row = await self._get_or_raise(scope, item_id)
        parent_id = getattr(row, scope.parent_key) if scope.parent_key else None

        try:
            if usage.in_use:
                row.status = TaxonomyStatus.DEPRECATED
                await self._commit(
                    caller, scope, item_id, "archive", usage=usage.usage_description
                )
                logger.info(
                    "Item archived",
                    resource_type=scope.resource_type,
                    item_id=str(item_id),
                    usage=usage.usage_description,
                )
                return DeleteResult(success=True, action="archived")

            await self._lock_parents(scope, [parent_id])
            await self.db.execute(delete(scope.model).where(scope.model.id == item_id))
            await self._rewrite_order(scope, await self._sibling_ids(scope, parent_id))
            await self._commit(caller, scope, item_id, "delete")
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Delete failed",
                resource_type=scope.resource_type,
                item_id=str(item_id),
                error=str(e),
            )
            return DeleteResult(success=False, error=str(e))

        logger.info("Item deleted", resource_type=scope.resource_type, item_id=str(item_id))
        return DeleteResult(success=True, action="deleted")


def _jsonable(metadata: dict[str, Any]) -> dict[str, Any]:
    """Stringify UUIDs so audit metadata fits a JSON column."""

    def convert(value: Any) -> Any:
        if isinstance(value, uuid.UUID):
            return str(value)
        if isinstance(value, (list, tuple)):
            return [convert(v) for v in value]
        return value

    return {key: convert(value) for key, value in metadata.items()}
