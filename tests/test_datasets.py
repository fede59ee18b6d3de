"""Tests for the per-family Chart.js dataset builders."""

from __future__ import annotations

from decimal import Decimal

import pytest

from charts.datasets import build_payload
from charts.palette import DEFAULT_PALETTE, default_colors
from charts.schema import CHART_TYPES
from charts.table import Table

pytestmark = pytest.mark.unit


def test_bar_dataset_fields(sales_table: Table) -> None:
    """Bar datasets reuse one palette color for fill and border, without borders."""

    payload = build_payload(sales_table, "bar", "month", ["sales", "costs"])

    assert payload.data["labels"] == ["Jan", "Feb", "Mar"]
    assert payload.data["datasets"] == [
        {"label": "sales", "data": [10, 15, 12], "backgroundColor": "#3366CC", "borderColor": "#3366CC", "borderWidth": 0},
        {"label": "costs", "data": [8, 12, 10], "backgroundColor": "#DC3912", "borderColor": "#DC3912", "borderWidth": 0},
    ]


def test_line_dataset_is_unfilled_with_points(sales_table: Table) -> None:
    payload = build_payload(sales_table, "line", "month", "sales")

    (dataset,) = payload.data["datasets"]
    assert dataset["fill"] is False
    assert dataset["borderWidth"] == 2
    assert dataset["pointRadius"] == 3
    assert dataset["pointHoverRadius"] == 5
    assert dataset["tension"] == 0.3


def test_radar_dataset_fills_with_translucent_border_color(sales_table: Table) -> None:
    payload = build_payload(sales_table, "radar", "month", ["sales", "costs"])

    first, second = payload.data["datasets"]
    assert first["fill"] is True
    assert first["borderColor"] == "#3366CC"
    assert first["backgroundColor"] == "#3366CC40"
    assert second["backgroundColor"] == "#DC391240"


def test_segment_colors_follow_rows_not_series() -> None:
    """Segment charts color each row; there is exactly one dataset."""

    table = Table.from_columns({"name": [f"s{i}" for i in range(14)], "count": list(range(14))})

    payload = build_payload(table, "doughnut", "name", "count")

    (dataset,) = payload.data["datasets"]
    assert payload.data["labels"] == [f"s{i}" for i in range(14)]
    assert dataset["data"] == list(range(14))
    assert dataset["backgroundColor"] == default_colors(14)
    assert dataset["borderWidth"] == 0
    assert dataset["label"] == "count"


def test_scatter_points_have_no_radius_and_no_labels() -> None:
    """Each y column becomes a series against the shared x column."""

    table = Table.from_columns({"t": [10, 15], "demand": [100, 140], "supply": [120, 150]})

    payload = build_payload(table, "scatter", "t", ["demand", "supply"])

    assert "labels" not in payload.data
    demand, supply = payload.data["datasets"]
    assert demand["data"] == [{"x": 10, "y": 100}, {"x": 15, "y": 140}]
    assert supply["data"][1] == {"x": 15, "y": 150}
    assert demand["showLine"] is False
    assert supply["borderColor"] == DEFAULT_PALETTE[1]


def test_bubble_single_dataset_labelled_by_value_column() -> None:
    table = Table.from_columns({"x": [20, 30], "y": [40, 50], "r": [10, 15]})

    payload = build_payload(table, "bubble", "x", ["y", "r"])

    assert "labels" not in payload.data
    (dataset,) = payload.data["datasets"]
    assert dataset["label"] == "y"
    assert dataset["data"] == [{"x": 20, "y": 40, "r": 10}, {"x": 30, "y": 50, "r": 15}]
    assert dataset["backgroundColor"] == "#3366CC99"
    assert dataset["borderColor"] == "#3366CC"


def test_bubble_groups_in_first_seen_order(bubble_table: Table) -> None:
    """Groups are ordered by first appearance, not alphabetically."""

    payload = build_payload(bubble_table, "bubble", "x", {"value": "y", "radius": "r", "group": "region"})

    datasets = payload.data["datasets"]
    assert [d["label"] for d in datasets] == ["north", "south", "east"]
    assert datasets[0]["data"] == [{"x": 20, "y": 30, "r": 10}, {"x": 25, "y": 35, "r": 8}]
    assert [d["borderColor"] for d in datasets] == default_colors(3)
    assert sum(len(d["data"]) for d in datasets) == bubble_table.row_count


def test_bubble_group_values_are_string_cast() -> None:
    table = Table.from_columns({"x": [1, 2, 3], "y": [1, 2, 3], "r": [1, 1, 1], "g": [2, 1, 2]})

    payload = build_payload(table, "bubble", "x", ["y", "r", "g"])

    assert [d["label"] for d in payload.data["datasets"]] == ["2", "1"]


def test_decimals_and_gaps_become_json_numbers() -> None:
    table = Table.from_columns({"k": ["a", "b"], "v": [Decimal("1.5"), None]})

    payload = build_payload(table, "bar", "k", "v")

    assert payload.data["datasets"][0]["data"] == [1.5, None]


@pytest.mark.parametrize("chart_type", CHART_TYPES)
def test_every_type_builds_non_empty_datasets_sized_to_rows(chart_type: str) -> None:
    """Datasets are never empty and values line up with the table rows."""

    table = Table.from_columns({"x": [1, 2, 3], "y": [4, 5, 6], "r": [1, 2, 3], "name": ["a", "b", "c"]})
    x = "name" if chart_type not in ("scatter", "bubble") else "x"
    y: object = ["y", "r"] if chart_type == "bubble" else "y"

    payload = build_payload(table, chart_type, x, y)  # type: ignore[arg-type]

    datasets = payload.data["datasets"]
    assert datasets
    assert sum(len(d["data"]) for d in datasets) == len(datasets) * table.row_count
    assert payload.meta.chart_type == chart_type
