"""FastAPI dependencies for dependency injection.

Provides:
- Database session
- Caller principal from identity headers
- Taxonomy and dimension services
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from taxonomy_admin.core.principal import Principal
from taxonomy_admin.infra.database import get_db_session
from taxonomy_admin.infra.logging import get_logger
from taxonomy_admin.infra.revalidation import PathRevalidator, get_revalidator
from taxonomy_admin.services.dimension_service import DimensionService
from taxonomy_admin.services.taxonomy_service import TaxonomyService

logger = get_logger(__name__)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session.

    Yields:
        AsyncSession, committed when the request succeeds
    """
    async with get_db_session() as session:
        yield session


async def get_principal(
    x_user_id: Annotated[str | None, Header()] = None,
    x_user_role: Annotated[str | None, Header()] = None,
    x_user_permissions: Annotated[str | None, Header()] = None,
) -> Principal:
    """Build the caller principal from identity headers.

    The portal's auth proxy sets these after verifying the session.

    Raises:
        HTTPException: 401 if the user id header is missing
    """
    if not x_user_id:
        logger.warning("Rejected request: missing X-User-Id header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )

    permissions = frozenset(
        p.strip() for p in (x_user_permissions or "").split(",") if p.strip()
    )
    return Principal(user_id=x_user_id, role=x_user_role, permissions=permissions)


def get_page_revalidator() -> PathRevalidator:
    return get_revalidator()


# Type aliases for cleaner annotations
DbSession = Annotated[AsyncSession, Depends(get_db)]
Caller = Annotated[Principal, Depends(get_principal)]
Revalidator = Annotated[PathRevalidator, Depends(get_page_revalidator)]


async def get_taxonomy_service(db: DbSession, revalidator: Revalidator) -> TaxonomyService:
    return TaxonomyService(db, revalidator=revalidator)


async def get_dimension_service(db: DbSession, revalidator: Revalidator) -> DimensionService:
    return DimensionService(db, revalidator=revalidator)


Taxonomy = Annotated[TaxonomyService, Depends(get_taxonomy_service)]
Dimensions = Annotated[DimensionService, Depends(get_dimension_service)]
