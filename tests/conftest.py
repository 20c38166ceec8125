"""Shared fixtures: in-memory SQLite database, services, API client."""

import os
import uuid
from types import SimpleNamespace

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from taxonomy_admin.api.deps import get_db, get_page_revalidator
from taxonomy_admin.core.principal import Principal
from taxonomy_admin.infra.database import create_engine_for_url
from taxonomy_admin.infra.revalidation import PathRevalidator
from taxonomy_admin.main import app
from taxonomy_admin.models import (
    Base,
    ProductCategory,
    ProductSubcategory,
    ProductType,
)
from taxonomy_admin.services.dimension_service import DimensionService
from taxonomy_admin.services.taxonomy_service import TaxonomyService


@pytest_asyncio.fixture
async def engine():
    engine = create_engine_for_url(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def revalidator() -> PathRevalidator:
    return PathRevalidator()


@pytest.fixture
def admin() -> Principal:
    return Principal(user_id="user-admin", role="admin")


@pytest.fixture
def member() -> Principal:
    return Principal(user_id="user-member", role="member")


@pytest.fixture
def taxonomy_service(db_session, revalidator) -> TaxonomyService:
    return TaxonomyService(db_session, revalidator=revalidator)


@pytest.fixture
def dimension_service(db_session, revalidator) -> DimensionService:
    return DimensionService(db_session, revalidator=revalidator)


@pytest_asyncio.fixture
async def tree(session_factory) -> SimpleNamespace:
    """Seed a small tree and return its ids.

    Layout::

        tops (0)     -> tees (0) -> crew (0), vneck (1)
                     -> knits (1)
                     -> sweats (2) -> hoodie (0)
        bottoms (1)  -> pants (0) -> chino (0)
        outerwear (2)
    """
    ids = SimpleNamespace(**{name: uuid.uuid4() for name in (
        "tops", "bottoms", "outerwear",
        "tees", "knits", "sweats", "pants",
        "crew", "vneck", "hoodie", "chino",
    )})

    async with session_factory() as session:
        session.add_all([
            ProductCategory(id=ids.tops, code="tops", name="Tops", sort_order=0),
            ProductCategory(id=ids.bottoms, code="bottoms", name="Bottoms", sort_order=1),
            ProductCategory(id=ids.outerwear, code="outerwear", name="Outerwear", sort_order=2),
        ])
        await session.flush()
        session.add_all([
            ProductSubcategory(id=ids.tees, code="tees", name="Tees", category_id=ids.tops, sort_order=0),
            ProductSubcategory(id=ids.knits, code="knits", name="Knits", category_id=ids.tops, sort_order=1),
            ProductSubcategory(id=ids.sweats, code="sweats", name="Sweats", category_id=ids.tops, sort_order=2),
            ProductSubcategory(id=ids.pants, code="pants", name="Pants", category_id=ids.bottoms, sort_order=0),
        ])
        await session.flush()
        session.add_all([
            ProductType(id=ids.crew, code="crew", name="Crew", subcategory_id=ids.tees, sort_order=0),
            ProductType(id=ids.vneck, code="vneck", name="V-Neck", subcategory_id=ids.tees, sort_order=1),
            ProductType(id=ids.hoodie, code="hoodie", name="Hoodie", subcategory_id=ids.sweats, sort_order=0),
            ProductType(id=ids.chino, code="chino", name="Chino", subcategory_id=ids.pants, sort_order=0),
        ])
        await session.commit()

    return ids


@pytest.fixture
def sibling_order(session_factory):
    """Return ``[(id, sort_order), ...]`` of a sibling set, read in a fresh session."""

    async def read(model, parent_column=None, parent_id=None) -> list[tuple[uuid.UUID, int]]:
        stmt = select(model.id, model.sort_order).order_by(model.sort_order)
        if parent_column is not None:
            stmt = stmt.where(parent_column == parent_id)
        async with session_factory() as session:
            result = await session.execute(stmt)
            return [(row.id, row.sort_order) for row in result.all()]

    return read


@pytest_asyncio.fixture
async def client(session_factory, revalidator):
    """API client bound to the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_page_revalidator] = lambda: revalidator

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"X-User-Id": "user-admin", "X-User-Role": "admin"}
