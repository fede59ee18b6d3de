"""Assemble complete Chart.js configurations from tables.

`build_chart` is the single entry point; the `*_chart` helpers fix the chart
type and translate friendlier argument names onto it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .columns import ValueSpec
from .datasets import build_payload, line_element
from .options import default_options, merge_options
from .schema import ChartConfiguration, family_for
from .table import as_table

logger = logging.getLogger(__name__)


def build_chart(
    data: object,
    chart_type: str = "bar",
    x: str | None = None,
    y: ValueSpec = None,
    options: Mapping[str, Any] | None = None,
    *,
    keep_null: bool = True,
) -> ChartConfiguration:
    """Build a Chart.js configuration from table-shaped data.

    Args:
        data: A Table, a column mapping, or an iterable of row mappings.
        chart_type: One of bar, line, scatter, bubble, pie, doughnut, radar, polarArea.
        x: Label column (category/segment charts) or x column (point charts).
        y: Value column(s). Bubble charts take `[value, radius, group?]` or a
            mapping with `value`, `radius` and optional `group`.
        options: Option overrides merged over the chart type defaults.
        keep_null: Merge mode for None overrides; see `merge_options`.

    Returns:
        ChartConfiguration with type, data, merged options and meta.

    Raises:
        UnsupportedChartType: For unknown chart types.
        InvalidInput: When `data` is not table-shaped.
        ChartError: Any column resolution failure.
    """

    family_for(chart_type)
    table = as_table(data)
    merged = merge_options(default_options(chart_type), options, keep_null=keep_null)
    payload = build_payload(table, chart_type, x, y, line=line_element(merged))
    config = ChartConfiguration(
        chart_type=payload.meta.chart_type,
        data=payload.data,
        options=merged,
        meta=payload.meta,
    )
    logger.debug(
        "Built %s chart with %d dataset(s) from %d row(s).",
        chart_type,
        len(config.data["datasets"]),
        table.row_count,
    )
    return config


def bar_chart(
    data: object,
    x: str | None = None,
    y: str | Sequence[str] | None = None,
    *,
    horizontal: bool = False,
    options: Mapping[str, Any] | None = None,
) -> ChartConfiguration:
    """Build a bar chart; `horizontal` puts categories on the y axis."""

    base: dict[str, Any] = {"indexAxis": "y"} if horizontal else {}
    return build_chart(data, "bar", x, y, merge_options(base, options))


def line_chart(
    data: object,
    x: str | None = None,
    y: str | Sequence[str] | None = None,
    *,
    smooth: bool = True,
    fill: bool = False,
    options: Mapping[str, Any] | None = None,
) -> ChartConfiguration:
    """Build a line chart.

    Args:
        data: Table-shaped input.
        x: Label column.
        y: Value column(s).
        smooth: False draws straight segments (tension 0).
        fill: True fills the area under each line.
        options: Caller options; win over `smooth` and `fill`.
    """

    line: dict[str, Any] = {}
    if not smooth:
        line["tension"] = 0
    if fill:
        line["fill"] = True
    base: dict[str, Any] = {"elements": {"line": line}} if line else {}
    return build_chart(data, "line", x, y, merge_options(base, options))


def scatter_chart(
    data: object,
    x: str | None = None,
    y: str | Sequence[str] | None = None,
    *,
    options: Mapping[str, Any] | None = None,
) -> ChartConfiguration:
    """Build a scatter chart with one series per y column."""

    return build_chart(data, "scatter", x, y, options)


def bubble_chart(
    data: object,
    x: str | None = None,
    y: str | None = None,
    radius: str | None = None,
    *,
    group: str | None = None,
    options: Mapping[str, Any] | None = None,
) -> ChartConfiguration:
    """Build a bubble chart; `group` splits points into one dataset per value."""

    return build_chart(data, "bubble", x, {"value": y, "radius": radius, "group": group}, options)


def pie_chart(
    data: object,
    labels: str | None = None,
    values: str | None = None,
    *,
    options: Mapping[str, Any] | None = None,
) -> ChartConfiguration:
    return build_chart(data, "pie", labels, values, options)


def doughnut_chart(
    data: object,
    labels: str | None = None,
    values: str | None = None,
    *,
    options: Mapping[str, Any] | None = None,
) -> ChartConfiguration:
    return build_chart(data, "doughnut", labels, values, options)


def radar_chart(
    data: object,
    labels: str | None = None,
    values: str | Sequence[str] | None = None,
    *,
    options: Mapping[str, Any] | None = None,
) -> ChartConfiguration:
    return build_chart(data, "radar", labels, values, options)


def polar_area_chart(
    data: object,
    labels: str | None = None,
    values: str | None = None,
    *,
    options: Mapping[str, Any] | None = None,
) -> ChartConfiguration:
    return build_chart(data, "polarArea", labels, values, options)
