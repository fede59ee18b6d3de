"""Errors raised while turning tabular data into chart configurations.

Every failure is synchronous and reported before any configuration is
produced. Errors that concern several columns always name the whole set in a
single message.
"""

from __future__ import annotations

from collections.abc import Iterable


class ChartError(ValueError):
    """Base class for chart building and live-update failures."""


class InvalidInput(ChartError):
    """Raised when an argument is not shaped the way the engine expects."""


class UnsupportedChartType(ChartError):
    """Raised when a chart type is not one of the supported values."""

    def __init__(self, chart_type: object, *, supported: Iterable[str]) -> None:
        """Initialize the error.

        Args:
            chart_type: Offending chart type value.
            supported: Valid chart type values, in display order.
        """

        self.chart_type = chart_type
        self.supported = tuple(supported)
        super().__init__(f"Unsupported chart type {chart_type!r}: type must be one of: {', '.join(self.supported)}")


class _ColumnsError(ChartError):
    """Shared shape for errors naming one or more columns."""

    template = "{columns}"

    def __init__(self, columns: Iterable[object]) -> None:
        self.columns = tuple(map(str, columns))
        super().__init__(self.template.format(columns=", ".join(self.columns)))


class ColumnNotFound(_ColumnsError):
    """Raised when one or more named columns are absent from the table."""

    template = "Column(s) not found in data: {columns}"


class NonNumericColumn(_ColumnsError):
    """Raised when selected value columns hold non-numeric cells."""

    template = "Column(s) must be numeric: {columns}"


class NoNumericColumns(ChartError):
    """Raised when value columns are inferred but none of the candidates is numeric."""

    def __init__(self) -> None:
        super().__init__("Could not find numeric columns to plot")


class MissingRequiredColumn(ChartError):
    """Raised when a chart type needs a column role the caller did not supply."""

    def __init__(self, role: str, *, chart_type: str) -> None:
        """Initialize the error.

        Args:
            role: Missing role name ("x", "y", "value", "radius").
            chart_type: Chart type that requires the role.
        """

        self.role = role
        self.chart_type = chart_type
        super().__init__(f"{chart_type.capitalize()} charts require the {role!r} column")


class InvalidProxyState(ChartError):
    """Raised when a live-update call targets an unbound or foreign handle."""
