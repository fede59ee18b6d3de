"""Tests for table coercion and column classification."""

from __future__ import annotations

from decimal import Decimal

import pytest

from charts.errors import ColumnNotFound, InvalidInput
from charts.table import Column, Table, as_table

pytestmark = pytest.mark.unit


def test_as_table_accepts_column_mapping_in_declared_order() -> None:
    """Keep column order from the mapping and classify each column."""

    table = as_table({"name": ["a", "b"], "score": [1, 2.5], "weight": [Decimal("1.5"), None]})

    assert table.names == ("name", "score", "weight")
    assert table.row_count == 2
    assert [c.kind for c in table.columns] == ["text", "numeric", "numeric"]


def test_as_table_accepts_records_and_fills_missing_cells() -> None:
    """Row mappings contribute columns in first-seen order; gaps become None."""

    table = as_table([{"a": 1, "b": "x"}, {"b": "y", "c": 3}])

    assert table.names == ("a", "b", "c")
    assert table.column("a").values == (1, None)
    assert table.column("c").values == (None, 3)


def test_as_table_returns_existing_table_unchanged(sales_table: Table) -> None:
    """Pass Table instances through."""

    assert as_table(sales_table) is sales_table


@pytest.mark.parametrize("data", ["not_a_table", 42, None, b"bytes", [1, 2, 3], {}, []])
def test_as_table_rejects_non_tabular_input(data: object) -> None:
    """Reject scalars, strings, non-mapping records and empty input."""

    with pytest.raises(InvalidInput, match="data must be a table"):
        as_table(data)


def test_as_table_rejects_ragged_columns() -> None:
    """Columns must share one length."""

    with pytest.raises(InvalidInput, match="equal-length"):
        as_table({"a": [1, 2], "b": [1]})


def test_as_table_rejects_string_column_values() -> None:
    """A bare string is not a column of cells."""

    with pytest.raises(InvalidInput, match="'a'"):
        as_table({"a": "abc"})


def test_table_rejects_duplicate_column_names() -> None:
    """Column names are unique within a table."""

    with pytest.raises(InvalidInput, match="unique column names; duplicated: a"):
        Table(columns=(Column.of("a", [1]), Column.of("a", [2])))


def test_column_kind_rules() -> None:
    """Booleans and all-null columns are not numeric; empty columns are."""

    assert Column.of("flags", [True, False]).kind == "text"
    assert Column.of("gaps", [None, None]).kind == "text"
    assert Column.of("empty", []).kind == "numeric"
    assert Column.of("mixed", [1, "2"]).kind == "text"
    assert Column.of("sparse", [1, None, 3.5]).kind == "numeric"


def test_column_lookup_reports_missing_name(sales_table: Table) -> None:
    """Unknown columns raise ColumnNotFound naming the column."""

    with pytest.raises(ColumnNotFound, match="nope"):
        sales_table.column("nope")


def test_rows_where_matches_string_cast_cells() -> None:
    """Filter rows by the string form of a cell."""

    table = as_table({"g": [1, 2, 1], "v": [10, 20, 30]})

    subset = table.rows_where("g", "1")

    assert subset.column("v").values == (10, 30)
    assert subset.column("v").kind == "numeric"
