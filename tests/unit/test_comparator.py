"""Unit tests for the value comparator."""

from __future__ import annotations

import pytest

from sheet_orm.domain.services.comparator import compare_strings, compare_values, display_value
from sheet_orm.domain.value_objects import SortDirection

ASC = SortDirection.ASC
DESC = SortDirection.DESC


@pytest.mark.unit
class TestCompareValues:
    """Tests for compare_values."""

    def test_numbers(self) -> None:
        """Numbers compare by sign of their difference."""
        assert compare_values(1, 2) == -1
        assert compare_values(2, 1) == 1
        assert compare_values(2, 2.0) == 0
        assert compare_values(1.5, 10) == -1

    def test_numbers_descending(self) -> None:
        """Descending negates the result."""
        assert compare_values(1, 2, DESC) == 1
        assert compare_values(2, 1, DESC) == -1
        assert compare_values(3, 3, DESC) == 0

    def test_strings(self) -> None:
        """Strings compare lexicographically."""
        assert compare_values("Alice", "Bob") == -1
        assert compare_values("Bob", "Alice") == 1
        assert compare_values("Bob", "Bob") == 0

    def test_strings_ignore_case_first(self) -> None:
        """Case only decides ties."""
        assert compare_values("apple", "Banana") == -1
        assert compare_values("Banana", "apple") == 1

    def test_lowercase_before_uppercase_on_tie(self) -> None:
        """Strings equal up to case put lowercase first."""
        assert compare_strings("a", "A") == -1
        assert compare_strings("A", "a") == 1

    def test_numbers_are_not_compared_as_strings(self) -> None:
        """10 sorts after 9 numerically."""
        assert compare_values(9, 10) == -1

    def test_mixed_types_compare_as_strings(self) -> None:
        """A number and a string compare by display string."""
        assert compare_values(10, "9") == -1  # "10" < "9"
        assert compare_values("abc", 5) == 1

    def test_booleans_compare_as_strings(self) -> None:
        """Booleans are not numbers."""
        assert compare_values(False, True) == -1
        assert compare_values(True, 0) == 1  # "true" > "0"

    def test_null_sinks_ascending(self) -> None:
        """A null sorts last when ascending."""
        assert compare_values(None, 1) == 1
        assert compare_values(1, None) == -1

    def test_null_rises_descending(self) -> None:
        """A null sorts first when descending."""
        assert compare_values(None, 1, DESC) == -1
        assert compare_values(1, None, DESC) == 1

    def test_two_nulls_tie(self) -> None:
        """Two nulls are equal in either direction."""
        assert compare_values(None, None) == 0
        assert compare_values(None, None, DESC) == 0


@pytest.mark.unit
class TestDisplayValue:
    """Tests for display_value."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "true"),
            (False, "false"),
            (None, "null"),
            (3.0, "3"),
            (2.5, "2.5"),
            (7, "7"),
            ("x", "x"),
        ],
    )
    def test_display(self, value: object, expected: str) -> None:
        """Values render the way the spreadsheet shows them."""
        assert display_value(value) == expected  # type: ignore[arg-type]
