"""Table-to-Chart.js configuration engine.

The engine turns tabular data into declarative Chart.js configurations:
column role resolution, deterministic colors, per-family dataset builders,
option merging and live-update message payloads. It must not import Django;
the `widgets` app embeds it in pages.
"""

from .builder import (
    bar_chart,
    bubble_chart,
    build_chart,
    doughnut_chart,
    line_chart,
    pie_chart,
    polar_area_chart,
    radar_chart,
    scatter_chart,
)
from .errors import (
    ChartError,
    ColumnNotFound,
    InvalidInput,
    InvalidProxyState,
    MissingRequiredColumn,
    NoNumericColumns,
    NonNumericColumn,
    UnsupportedChartType,
)
from .schema import ChartConfiguration, ChartMeta, ColumnRoleMapping
from .table import Table, as_table

__all__ = [
    "ChartConfiguration",
    "ChartError",
    "ChartMeta",
    "ColumnNotFound",
    "ColumnRoleMapping",
    "InvalidInput",
    "InvalidProxyState",
    "MissingRequiredColumn",
    "NoNumericColumns",
    "NonNumericColumn",
    "Table",
    "UnsupportedChartType",
    "as_table",
    "bar_chart",
    "bubble_chart",
    "build_chart",
    "doughnut_chart",
    "line_chart",
    "pie_chart",
    "polar_area_chart",
    "radar_chart",
    "scatter_chart",
]
