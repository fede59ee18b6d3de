"""Tests for the hand-off encoding and configuration validation."""

from __future__ import annotations

import json
from dataclasses import replace

import pytest

from charts.builder import build_chart
from charts.codec import chart_to_json, decode_meta, encode_chart, encode_meta
from charts.errors import InvalidInput, UnsupportedChartType
from charts.schema import ChartMeta, ColumnRoleMapping
from charts.table import Table
from charts.validator import validate_chart_configuration

pytestmark = pytest.mark.unit


def test_encode_chart_matches_chartjs_constructor_shape(sales_table: Table) -> None:
    chart = build_chart(sales_table, "bar", "month", "sales")

    payload = encode_chart(chart)

    assert set(payload) == {"type", "data", "options", "meta"}
    assert payload["type"] == "bar"
    assert payload["meta"] == {"type": "bar", "x": "month", "y": ["sales"]}
    assert json.loads(chart_to_json(chart)) == payload


def test_encode_chart_does_not_share_structure(sales_table: Table) -> None:
    chart = build_chart(sales_table, "bar", "month", "sales")

    payload = encode_chart(chart)
    payload["options"]["responsive"] = False
    payload["data"]["labels"].append("Apr")

    assert chart.options["responsive"] is True
    assert chart.data["labels"] == ["Jan", "Feb", "Mar"]


def test_meta_wire_shapes_per_family() -> None:
    segment = ChartMeta(chart_type="pie", columns=ColumnRoleMapping(label_column="k", value_columns=("v",)))
    bubble = ChartMeta(
        chart_type="bubble",
        columns=ColumnRoleMapping(label_column="x", value_columns=("y",), radius_column="r", group_column="g"),
    )

    assert encode_meta(segment) == {"type": "pie", "x": "k", "y": "v"}
    assert encode_meta(bubble) == {"type": "bubble", "x": "x", "y": "y", "radius": "r", "group": "g"}
    assert decode_meta(encode_meta(segment)) == segment
    assert decode_meta(encode_meta(bubble)) == bubble


def test_decode_meta_rejects_bad_payloads() -> None:
    with pytest.raises(UnsupportedChartType):
        decode_meta({"type": "gauge", "x": None, "y": []})
    with pytest.raises(InvalidInput):
        decode_meta({"type": "bar", "x": 3, "y": []})
    with pytest.raises(InvalidInput):
        decode_meta(["bar"])  # type: ignore[arg-type]


@pytest.mark.parametrize("chart_type", ["bar", "line", "radar", "pie", "doughnut", "polarArea"])
def test_built_labelled_charts_validate(sales_table: Table, chart_type: str) -> None:
    chart = build_chart(sales_table, chart_type, "month")

    assert validate_chart_configuration(chart).is_valid


def test_built_point_charts_validate(bubble_table: Table) -> None:
    scatter = build_chart(bubble_table, "scatter", "x", ["y", "r"])
    bubble = build_chart(bubble_table, "bubble", "x", ["y", "r", "region"])

    assert validate_chart_configuration(scatter).is_valid
    assert validate_chart_configuration(bubble).is_valid


def test_validator_reports_shape_errors(sales_table: Table) -> None:
    chart = build_chart(sales_table, "bar", "month", "sales")
    broken = replace(chart, data={"labels": ["Jan"], "datasets": [{"label": "sales", "data": [1, 2]}]})
    empty = replace(chart, data={"labels": ["Jan"], "datasets": []})

    broken_result = validate_chart_configuration(broken)
    empty_result = validate_chart_configuration(empty)

    assert not broken_result.is_valid
    assert any("has 2 values for 1 labels" in error for error in broken_result.errors)
    assert any("at least one dataset" in error for error in empty_result.errors)


def test_validator_rejects_labels_on_point_charts(bubble_table: Table) -> None:
    chart = build_chart(bubble_table, "scatter", "x", "y")
    labelled = replace(chart, data={**chart.data, "labels": ["a"]})

    result = validate_chart_configuration(labelled)

    assert any("must be omitted" in error for error in result.errors)


def test_validator_warns_when_colors_repeat() -> None:
    table = Table.from_columns({f"c{i}": [i] for i in range(13)})

    result = validate_chart_configuration(build_chart(table, "bar"))

    assert result.is_valid
    assert any("colors repeat" in warning for warning in result.warnings)
