"""Tests for taxonomy request and result schemas."""

import pytest
from pydantic import ValidationError

from taxonomy_admin.schemas import (
    ActionResult,
    CategoryCreate,
    CategoryUpdate,
    DimensionValueUpdate,
    MoveSubcategoryRequest,
    ReorderRequest,
)


def test_create_strips_whitespace():
    data = CategoryCreate(code="  tops ", name=" Tops ")
    assert data.code == "tops"
    assert data.name == "Tops"


def test_create_rejects_blank_code():
    with pytest.raises(ValidationError):
        CategoryCreate(code="   ", name="Tops")


def test_reorder_requires_ids():
    with pytest.raises(ValidationError):
        ReorderRequest(ordered_ids=[])


def test_move_rejects_negative_index():
    with pytest.raises(ValidationError):
        MoveSubcategoryRequest(
            to_category_id="5f0c6c3e-6b1d-4b43-9d5e-0c5a3b6f2a11", new_index=-1
        )


def test_update_leaves_unset_fields_out():
    data = DimensionValueUpdate(label="Travel")
    assert data.model_dump(exclude_unset=True) == {"label": "Travel"}


def test_action_result_helpers():
    assert ActionResult.ok().model_dump() == {"success": True, "data": None, "error": None}
    assert ActionResult.ok(id="x").data == {"id": "x"}
    assert ActionResult.fail("nope").model_dump() == {
        "success": False,
        "data": None,
        "error": "nope",
    }


def test_rename_strips_and_rejects_blank():
    assert CategoryUpdate(name=" Tops ").name == "Tops"
    with pytest.raises(ValidationError):
        CategoryUpdate(name="   ")


def test_update_rejects_explicit_nulls():
    with pytest.raises(ValidationError):
        CategoryUpdate(name=None)
    with pytest.raises(ValidationError):
        DimensionValueUpdate(status=None)
    with pytest.raises(ValidationError):
        DimensionValueUpdate(label="  ")


def test_update_allows_clearing_description():
    data = DimensionValueUpdate(description=None)
    assert data.model_dump(exclude_unset=True) == {"description": None}
