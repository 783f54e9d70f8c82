"""Unit tests for pagination and projection."""

from __future__ import annotations

import pytest

from sheet_orm.domain.errors import ValidationError
from sheet_orm.domain.services import (
    apply_limit,
    apply_offset,
    apply_select,
    project,
    validate_select,
)
from sheet_orm.domain.value_objects import QueryOptions, freeze_rows


@pytest.fixture
def letters() -> list:
    return freeze_rows([{"id": c, "a": i, "b": i * 10} for i, c in enumerate("ABCDE")])


def ids(rows: list) -> list:
    return [row["id"] for row in rows]


@pytest.mark.unit
class TestPagination:
    """Tests for offset and limit."""

    def test_offset(self, letters: list) -> None:
        """Offset drops leading rows."""
        assert ids(apply_offset(letters, 2)) == ["C", "D", "E"]
        assert apply_offset(letters, 10) == []

    def test_limit(self, letters: list) -> None:
        """Limit keeps leading rows."""
        assert ids(apply_limit(letters, 2)) == ["A", "B"]
        assert apply_limit(letters, 0) == []

    def test_absent_is_noop(self, letters: list) -> None:
        """None leaves the rows alone."""
        assert apply_offset(letters, None) == letters
        assert apply_limit(letters, None) == letters

    def test_negative_values_rejected(self, letters: list) -> None:
        """Negative offset or limit is an error."""
        with pytest.raises(ValidationError):
            apply_offset(letters, -1)
        with pytest.raises(ValidationError):
            apply_limit(letters, -1)

    def test_offset_then_limit(self, letters: list) -> None:
        """Offset applies before limit."""
        result = project(letters, QueryOptions(offset=1, limit=2), frozenset({"id", "a", "b"}))
        assert ids(result) == ["B", "C"]


@pytest.mark.unit
class TestSelect:
    """Tests for field projection."""

    def test_select_keeps_requested_fields_in_order(self, letters: list) -> None:
        """Output rows have exactly the selected fields, in request order."""
        result = apply_select(letters, ["b", "id"])
        assert list(result[0].keys()) == ["b", "id"]
        assert dict(result[1]) == {"b": 10, "id": "B"}

    def test_select_reports_all_invalid_keys(self) -> None:
        """Every unknown field is named in one error."""
        with pytest.raises(ValidationError, match="nope, missing"):
            validate_select(["id", "nope", "missing"], frozenset({"id", "a", "b"}))

    def test_empty_schema_is_vacuous(self) -> None:
        """Nothing to validate against means nothing can be invalid."""
        validate_select(["anything"], frozenset())
        assert project([], QueryOptions(select=["anything"]), frozenset()) == []

    def test_project_uses_explicit_schema(self, letters: list) -> None:
        """Fields are checked against the supplied schema, not the rows."""
        with pytest.raises(ValidationError):
            project(letters, QueryOptions(select=["a"]), frozenset({"id"}))

    def test_select_twice_equals_select_once(self, letters: list) -> None:
        """Narrowing a projection equals projecting narrowly."""
        twice = apply_select(apply_select(letters, ["a", "b"]), ["a"])
        once = apply_select(letters, ["a"])
        assert twice == once

    def test_select_does_not_touch_input(self, letters: list) -> None:
        """Projection builds new rows."""
        apply_select(letters, ["id"])
        assert set(letters[0].keys()) == {"id", "a", "b"}

    def test_project_validates_before_slicing(self, letters: list) -> None:
        """An invalid select fails even when the page is empty."""
        options = QueryOptions(offset=10, select=["bogus"])
        with pytest.raises(ValidationError, match="bogus"):
            project(letters, options, frozenset({"id", "a", "b"}))
