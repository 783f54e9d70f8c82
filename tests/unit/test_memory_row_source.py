"""Unit tests for the in-memory row source."""

from __future__ import annotations

import pytest

from sheet_orm.adapters.outbound import InMemoryRowSource
from sheet_orm.ports.outbound import RowSource


@pytest.mark.unit
class TestInMemoryRowSource:
    """Tests for InMemoryRowSource."""

    def test_implements_port(self) -> None:
        """The adapter satisfies the RowSource protocol."""
        assert isinstance(InMemoryRowSource(), RowSource)

    def test_snapshot_is_isolated(self) -> None:
        """Changing the caller's dicts does not change the source."""
        data = [{"id": 1, "name": "Alice"}]
        source = InMemoryRowSource(data)
        data[0]["name"] = "Mallory"
        data.append({"id": 2, "name": "Bob"})

        rows = source.get_rows()
        assert len(rows) == 1
        assert rows[0]["name"] == "Alice"

    def test_rows_are_read_only(self) -> None:
        """Rows cannot be modified through the source."""
        source = InMemoryRowSource([{"id": 1}])
        with pytest.raises(TypeError):
            source.get_rows()[0]["id"] = 2  # type: ignore[index]

    def test_replace(self) -> None:
        """replace() swaps the snapshot."""
        source = InMemoryRowSource([{"id": 1}])
        source.replace([{"id": 2}, {"id": 3}])
        assert len(source) == 2
        assert source.get_rows()[0]["id"] == 2

    def test_invalidate_is_noop(self) -> None:
        """Invalidating keeps the rows."""
        source = InMemoryRowSource([{"id": 1}])
        source.invalidate()
        assert len(source.get_rows()) == 1
