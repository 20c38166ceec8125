"""Tests for ordering helpers."""

from taxonomy_admin.core.ordering import array_move, dense_positions, normalize_code, splice


class TestNormalizeCode:
    def test_lowercases_and_underscores(self) -> None:
        assert normalize_code("Crew Neck Tee") == "crew_neck_tee"

    def test_collapses_whitespace_runs(self) -> None:
        assert normalize_code("  Heavy \t Weight  ") == "heavy_weight"

    def test_already_normalized(self) -> None:
        assert normalize_code("v_neck") == "v_neck"


class TestArrayMove:
    def test_move_forward(self) -> None:
        assert array_move(["a", "b", "c"], 0, 2) == ["b", "c", "a"]

    def test_move_backward(self) -> None:
        assert array_move(["a", "b", "c"], 2, 0) == ["c", "a", "b"]

    def test_does_not_mutate_input(self) -> None:
        items = ["a", "b", "c"]
        array_move(items, 0, 1)
        assert items == ["a", "b", "c"]


class TestSplice:
    def test_inserts_new_item(self) -> None:
        assert splice(["a", "b"], "x", 1) == ["a", "x", "b"]

    def test_moves_existing_item(self) -> None:
        """An id already in the list is removed before insertion."""
        assert splice(["a", "x", "b", "c"], "x", 3) == ["a", "b", "c", "x"]

    def test_clamps_index(self) -> None:
        assert splice(["a", "b"], "x", 99) == ["a", "b", "x"]
        assert splice(["a", "b"], "x", -5) == ["x", "a", "b"]


def test_dense_positions() -> None:
    assert dense_positions(["b", "c", "a"]) == [("b", 0), ("c", 1), ("a", 2)]
