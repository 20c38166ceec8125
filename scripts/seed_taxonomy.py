#!/usr/bin/env python
"""Seed a starter taxonomy for local development.

This script:
1. Creates missing tables (optional)
2. Inserts dimension values, collections and a small product tree

Rows whose code already exists are left alone, so the script can be run
repeatedly.

Usage:
    # Seed the database configured in .env / DATABASE_URL
    python scripts/seed_taxonomy.py

    # Create tables first (SQLite or a fresh local Postgres)
    python scripts/seed_taxonomy.py --create-schema

    # Show what would be seeded
    python scripts/seed_taxonomy.py --dry-run
"""

import argparse
import asyncio
import sys
import uuid
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from taxonomy_admin.core.dimension_kind import DimensionKind
from taxonomy_admin.core.principal import Principal
from taxonomy_admin.infra.database import close_db_engine, create_schema, get_db_session
from taxonomy_admin.infra.logging import get_logger, setup_logging
from taxonomy_admin.models import ProductCategory, ProductSubcategory
from taxonomy_admin.schemas.dimension import DimensionValueCreate
from taxonomy_admin.schemas.taxonomy import (
    CategoryCreate,
    CollectionCreate,
    ProductTypeCreate,
    SubcategoryCreate,
)
from taxonomy_admin.services.dimension_service import DimensionService
from taxonomy_admin.services.taxonomy_service import TaxonomyService

setup_logging()
logger = get_logger(__name__)

SEED_CALLER = Principal(user_id="seed-script", role="owner")

DIMENSIONS: dict[DimensionKind, list[tuple[str, str]]] = {
    DimensionKind.AUDIENCE_GENDERS: [("womens", "Womens"), ("mens", "Mens"), ("unisex", "Unisex")],
    DimensionKind.AUDIENCE_AGE_GROUPS: [("adult", "Adult"), ("kids", "Kids")],
    DimensionKind.SELLING_WINDOWS: [("spring_summer", "Spring/Summer"), ("fall_winter", "Fall/Winter")],
    DimensionKind.ASSORTMENT_TENURES: [("core", "Core"), ("seasonal", "Seasonal")],
    DimensionKind.CONSTRUCTIONS: [("knit", "Knit"), ("woven", "Woven")],
    DimensionKind.MATERIAL_WEIGHT_CLASSES: [("light", "Light"), ("mid", "Mid"), ("heavy", "Heavy")],
    DimensionKind.FIT_BLOCKS: [("regular", "Regular"), ("relaxed", "Relaxed")],
    DimensionKind.USE_CASES: [("everyday", "Everyday"), ("active", "Active")],
    DimensionKind.GOODS_CLASSES: [("apparel", "Apparel"), ("accessories", "Accessories")],
    DimensionKind.SIZE_SCALES: [("alpha", "Alpha (XS-XL)")],
}

COLLECTIONS = [
    ("essentials", "Essentials", "Year-round core assortment"),
    ("capsule_one", "Capsule One", "First limited capsule"),
]

TREE: dict[tuple[str, str], dict[tuple[str, str], list[tuple[str, str]]]] = {
    ("tops", "Tops"): {
        ("tees", "Tees"): [("crew_tee", "Crew Tee"), ("v_neck_tee", "V-Neck Tee")],
        ("sweatshirts", "Sweatshirts"): [("crewneck", "Crewneck"), ("hoodie", "Hoodie")],
    },
    ("bottoms", "Bottoms"): {
        ("pants", "Pants"): [("chino", "Chino"), ("jogger", "Jogger")],
        ("shorts", "Shorts"): [("short", "Short")],
    },
}


def _log_result(kind: str, code: str, result) -> None:
    if result.success:
        logger.info("Seeded", kind=kind, code=code)
    else:
        logger.info("Skipped", kind=kind, code=code, reason=result.error)


async def _id_by_code(session, model, code: str) -> uuid.UUID:
    result = await session.execute(select(model.id).where(model.code == code))
    return result.scalar_one()


async def seed_dimensions() -> None:
    for kind, values in DIMENSIONS.items():
        for code, label in values:
            async with get_db_session() as session:
                result = await DimensionService(session).create_value(
                    SEED_CALLER, kind, DimensionValueCreate(code=code, label=label)
                )
            _log_result(kind.value, code, result)


async def seed_collections() -> None:
    for code, name, description in COLLECTIONS:
        async with get_db_session() as session:
            result = await TaxonomyService(session).create_collection(
                SEED_CALLER, CollectionCreate(code=code, name=name, description=description)
            )
        _log_result("collection", code, result)


async def seed_tree() -> None:
    for (cat_code, cat_name), subcategories in TREE.items():
        async with get_db_session() as session:
            service = TaxonomyService(session)
            result = await service.create_category(
                SEED_CALLER, CategoryCreate(code=cat_code, name=cat_name)
            )
            _log_result("category", cat_code, result)
            category_id = await _id_by_code(session, ProductCategory, cat_code)

            for (sub_code, sub_name), product_types in subcategories.items():
                result = await service.create_subcategory(
                    SEED_CALLER,
                    SubcategoryCreate(code=sub_code, name=sub_name, category_id=category_id),
                )
                _log_result("subcategory", sub_code, result)
                subcategory_id = await _id_by_code(session, ProductSubcategory, sub_code)

                for pt_code, pt_name in product_types:
                    result = await service.create_product_type(
                        SEED_CALLER,
                        ProductTypeCreate(code=pt_code, name=pt_name, subcategory_id=subcategory_id),
                    )
                    _log_result("product_type", pt_code, result)


def print_plan() -> None:
    print("\nDimension values:")
    for kind, values in DIMENSIONS.items():
        print(f"  {kind.value}: {', '.join(code for code, _ in values)}")
    print("\nCollections:")
    for code, name, _ in COLLECTIONS:
        print(f"  {code} ({name})")
    print("\nProduct tree:")
    for (cat_code, _), subcategories in TREE.items():
        print(f"  {cat_code}")
        for (sub_code, _), product_types in subcategories.items():
            print(f"    {sub_code}: {', '.join(code for code, _ in product_types)}")


async def main() -> int:
    parser = argparse.ArgumentParser(description="Seed a starter taxonomy")
    parser.add_argument("--create-schema", action="store_true", help="Create missing tables first")
    parser.add_argument("--dry-run", action="store_true", help="Print the seed plan and exit")
    args = parser.parse_args()

    if args.dry_run:
        print_plan()
        return 0

    try:
        if args.create_schema:
            await create_schema()
        await seed_dimensions()
        await seed_collections()
        await seed_tree()
    finally:
        await close_db_engine()

    logger.info("Seed complete")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
