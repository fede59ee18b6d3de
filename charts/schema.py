"""Schema types for table-driven Chart.js configuration.

Field names inside `ChartDataset`, `Point` and `ChartData` are the Chart.js
configuration schema and are emitted verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Final, Literal, TypedDict

from .errors import UnsupportedChartType

ChartType = Literal["bar", "line", "scatter", "bubble", "pie", "doughnut", "radar", "polarArea"]

ChartFamily = Literal["category", "segment", "point"]

CHART_TYPES: Final[tuple[str, ...]] = ("bar", "line", "scatter", "bubble", "pie", "doughnut", "radar", "polarArea")

_FAMILIES: Final[dict[str, ChartFamily]] = {
    "bar": "category",
    "line": "category",
    "radar": "category",
    "pie": "segment",
    "doughnut": "segment",
    "polarArea": "segment",
    "scatter": "point",
    "bubble": "point",
}


def family_for(chart_type: object) -> ChartFamily:
    """Return the dataset-builder family for a chart type.

    Raises:
        UnsupportedChartType: When `chart_type` is not supported.
    """

    if not isinstance(chart_type, str) or chart_type not in _FAMILIES:
        raise UnsupportedChartType(chart_type, supported=CHART_TYPES)
    return _FAMILIES[chart_type]


class Point(TypedDict, total=False):
    """A point-family datum; bubble points always carry `r`."""

    x: float | None
    y: float | None
    r: float | None


class ChartDataset(TypedDict, total=False):
    """A Chart.js dataset payload."""

    label: str
    data: list[Any]
    backgroundColor: str | list[str] | None
    borderColor: str | None
    borderWidth: int
    fill: bool
    tension: float
    pointRadius: int
    pointHoverRadius: int
    showLine: bool


class ChartData(TypedDict, total=False):
    """The `data` block of a Chart.js configuration; `labels` is absent for point charts."""

    labels: list[str]
    datasets: list[ChartDataset]


@dataclass(frozen=True, slots=True)
class ColumnRoleMapping:
    """Which table columns play which role in a chart.

    Args:
        label_column: Column providing category labels or the point x values.
        value_columns: Columns providing series values, in table order.
        radius_column: Bubble radius column.
        group_column: Column partitioning bubble points into datasets.
    """

    label_column: str | None = None
    value_columns: tuple[str, ...] = ()
    radius_column: str | None = None
    group_column: str | None = None


@dataclass(frozen=True, slots=True)
class ChartMeta:
    """Column mapping recorded with a chart so later updates can rebuild it.

    Args:
        chart_type: Chart type the mapping was resolved for.
        columns: Resolved column roles.
    """

    chart_type: ChartType
    columns: ColumnRoleMapping = field(default_factory=ColumnRoleMapping)

    @property
    def family(self) -> ChartFamily:
        return family_for(self.chart_type)


@dataclass(frozen=True, slots=True)
class ChartPayload:
    """Dataset-builder output: Chart.js `data` plus the meta that produced it."""

    data: ChartData
    meta: ChartMeta


@dataclass(frozen=True, slots=True)
class ChartConfiguration:
    """A complete configuration ready for the Chart.js constructor.

    Args:
        chart_type: Chart.js chart type.
        data: Labels and datasets.
        options: Merged options tree.
        meta: Column mapping for live updates.
    """

    chart_type: ChartType
    data: ChartData
    options: dict[str, Any]
    meta: ChartMeta
