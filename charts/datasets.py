"""Build Chart.js `data` blocks from resolved table columns.

There is one builder per chart family. Each is a pure function of the table,
the resolved column roles and the chart type, and returns the `data` block
together with the meta needed to rebuild it later.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .columns import ValueSpec, resolve_columns, resolve_labels
from .palette import default_colors, with_alpha
from .schema import ChartData, ChartDataset, ChartMeta, ChartPayload, ColumnRoleMapping, Point, family_for
from .table import Scalar, Table

RADAR_FILL_ALPHA = 0.25
BUBBLE_FILL_ALPHA = 0.6
LINE_STYLE_DEFAULTS: dict[str, Any] = {"fill": False, "tension": 0.3}


def _number(cell: Scalar) -> int | float | None:
    """Return a JSON-friendly number for a numeric cell."""

    if cell is None:
        return None
    if isinstance(cell, Decimal):
        return float(cell)
    return cell  # type: ignore[return-value]


def _numbers(table: Table, name: str) -> list[int | float | None]:
    return [_number(cell) for cell in table.column(name).values]


def build_category_payload(
    table: Table,
    columns: ColumnRoleMapping,
    chart_type: str,
    *,
    line: Mapping[str, Any] | None = None,
) -> ChartPayload:
    """Build bar/line/radar data: one dataset per value column.

    Line datasets take `fill` and `tension` from `line` (the `elements.line`
    options) so dataset-level values never contradict the chart options. A
    None value leaves the key off the dataset.
    """

    labels = resolve_labels(table, columns.label_column)
    colors = default_colors(len(columns.value_columns))

    datasets: list[ChartDataset] = []
    for name, color in zip(columns.value_columns, colors):
        dataset: ChartDataset = {
            "label": name,
            "data": _numbers(table, name),
            "backgroundColor": color,
            "borderColor": color,
            "borderWidth": 0 if chart_type == "bar" else 2,
        }
        if chart_type == "line":
            dataset["pointRadius"] = 3
            dataset["pointHoverRadius"] = 5
            for key, value in _line_style(line).items():
                if value is not None:
                    dataset[key] = value  # type: ignore[literal-required]
        if chart_type == "radar":
            dataset["fill"] = True
            dataset["backgroundColor"] = with_alpha(color, RADAR_FILL_ALPHA)
        datasets.append(dataset)

    return ChartPayload(
        data={"labels": labels, "datasets": datasets},
        meta=ChartMeta(chart_type=chart_type, columns=columns),  # type: ignore[arg-type]
    )


def build_segment_payload(table: Table, columns: ColumnRoleMapping, chart_type: str) -> ChartPayload:
    """Build pie/doughnut/polarArea data: a single dataset colored per row."""

    value_column = columns.value_columns[0]
    values = _numbers(table, value_column)
    dataset: ChartDataset = {
        "label": value_column,
        "data": values,
        "backgroundColor": default_colors(len(values)),
        "borderWidth": 0,
    }
    return ChartPayload(
        data={"labels": resolve_labels(table, columns.label_column), "datasets": [dataset]},
        meta=ChartMeta(chart_type=chart_type, columns=columns),  # type: ignore[arg-type]
    )


def build_scatter_payload(table: Table, columns: ColumnRoleMapping) -> ChartPayload:
    """Build scatter data: one dataset of {x, y} points per y column."""

    xs = _numbers(table, columns.label_column or "")
    colors = default_colors(len(columns.value_columns))

    datasets: list[ChartDataset] = []
    for name, color in zip(columns.value_columns, colors):
        points: list[Point] = [{"x": x, "y": y} for x, y in zip(xs, _numbers(table, name))]
        datasets.append(
            {
                "label": name,
                "data": points,  # type: ignore[typeddict-item]
                "backgroundColor": color,
                "borderColor": color,
                "showLine": False,
            }
        )
    data: ChartData = {"datasets": datasets}
    return ChartPayload(data=data, meta=ChartMeta(chart_type="scatter", columns=columns))


def _bubble_points(table: Table, columns: ColumnRoleMapping) -> list[Point]:
    xs = _numbers(table, columns.label_column or "")
    ys = _numbers(table, columns.value_columns[0])
    rs = _numbers(table, columns.radius_column or "")
    return [{"x": x, "y": y, "r": r} for x, y, r in zip(xs, ys, rs)]


def _distinct(cells: tuple[Scalar, ...]) -> list[str]:
    """Return distinct string-cast cells in first-seen order."""

    seen: dict[str, None] = {}
    for cell in cells:
        seen.setdefault(str(cell), None)
    return list(seen)


def build_bubble_payload(table: Table, columns: ColumnRoleMapping) -> ChartPayload:
    """Build bubble data: one dataset, or one per distinct group value."""

    groups: list[tuple[str, Table]] = []
    if columns.group_column is not None:
        groups = [
            (value, table.rows_where(columns.group_column, value))
            for value in _distinct(table.column(columns.group_column).values)
        ]
    if not groups:
        groups = [(columns.value_columns[0], table)]
    colors = default_colors(max(1, len(groups)))

    datasets: list[ChartDataset] = [
        {
            "label": label,
            "data": _bubble_points(subset, columns),  # type: ignore[typeddict-item]
            "backgroundColor": with_alpha(color, BUBBLE_FILL_ALPHA),
            "borderColor": color,
        }
        for (label, subset), color in zip(groups, colors)
    ]
    data: ChartData = {"datasets": datasets}
    return ChartPayload(data=data, meta=ChartMeta(chart_type="bubble", columns=columns))


def build_payload(
    table: Table,
    chart_type: str,
    x: str | None = None,
    y: ValueSpec = None,
    *,
    line: Mapping[str, Any] | None = None,
) -> ChartPayload:
    """Resolve columns for `chart_type` and run the matching dataset builder.

    Args:
        table: Input table.
        chart_type: Supported chart type.
        x: Optional label/x column.
        y: Optional value column spec (bubble mapping for bubble charts).
        line: `elements.line` options applied to line datasets.

    Returns:
        ChartPayload with Chart.js data and meta.
    """

    family = family_for(chart_type)
    columns = resolve_columns(table, chart_type, x, y)
    if family == "category":
        return build_category_payload(table, columns, chart_type, line=line)
    if family == "segment":
        return build_segment_payload(table, columns, chart_type)
    if chart_type == "scatter":
        return build_scatter_payload(table, columns)
    return build_bubble_payload(table, columns)


def line_element(options: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    """Return `options["elements"]["line"]` when present as a mapping."""

    elements = (options or {}).get("elements")
    line = elements.get("line") if isinstance(elements, Mapping) else None
    return line if isinstance(line, Mapping) else None


def _line_style(line: Mapping[str, Any] | None) -> dict[str, Any]:
    style = dict(LINE_STYLE_DEFAULTS)
    if line:
        style.update({key: line[key] for key in LINE_STYLE_DEFAULTS if key in line})
    return style
