"""Tests for taxonomy table mappings."""

from taxonomy_admin.core.dimension_kind import DimensionKind
from taxonomy_admin.models import (
    Collection,
    ProductCategory,
    ProductSubcategory,
    ProductType,
    TaxonomyStatus,
)


def test_tree_tablenames():
    """Tree levels should map to their product_* tables."""
    assert ProductCategory.__tablename__ == "product_categories"
    assert ProductSubcategory.__tablename__ == "product_subcategories"
    assert ProductType.__tablename__ == "product_types"
    assert Collection.__tablename__ == "collections"


def test_sortable_tables_have_ordering_columns():
    """Every admin-managed table should have code, status, sort_order columns."""
    models = [ProductCategory, ProductSubcategory, ProductType, Collection]
    models += [kind.model for kind in DimensionKind]
    for model in models:
        columns = {c.name for c in model.__table__.columns}
        assert {"id", "code", "status", "sort_order"} <= columns, model.__name__


def test_codes_are_unique():
    for model in (ProductCategory, ProductSubcategory, ProductType, Collection):
        assert model.__table__.columns["code"].unique


def test_children_cascade_with_parent():
    """Deleting a parent row should cascade in the database."""
    (sub_fk,) = ProductSubcategory.__table__.columns["category_id"].foreign_keys
    (pt_fk,) = ProductType.__table__.columns["subcategory_id"].foreign_keys

    assert sub_fk.ondelete == "CASCADE"
    assert pt_fk.ondelete == "CASCADE"


def test_status_values():
    assert [s.value for s in TaxonomyStatus] == ["active", "deprecated"]
