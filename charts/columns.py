"""Resolve which table columns serve as labels, values, radius and groups.

Resolution is computed once per build from explicit column names or, where a
chart family allows it, from the table's numeric/text column split.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from .errors import ColumnNotFound, InvalidInput, MissingRequiredColumn, NoNumericColumns, NonNumericColumn
from .schema import ColumnRoleMapping, family_for
from .table import Table

ValueSpec = str | Sequence[str] | Mapping[str, str | None] | None


def column_list(spec: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize a column name or list of names into a tuple.

    Raises:
        InvalidInput: When the selection is not made of strings.
    """

    if spec is None:
        return ()
    if isinstance(spec, str):
        return (spec,)
    if isinstance(spec, Mapping) or not isinstance(spec, Iterable):
        raise InvalidInput("Expected a column name or a list of column names for column selection.")
    names = tuple(spec)
    if not all(isinstance(name, str) for name in names):
        raise InvalidInput("Expected a column name or a list of column names for column selection.")
    return names


def require_columns(table: Table, names: Iterable[str | None]) -> None:
    """Fail with every absent column name at once.

    Raises:
        ColumnNotFound: When one or more names are not table columns.
    """

    missing = [name for name in names if name is not None and not table.has(name)]
    if missing:
        raise ColumnNotFound(missing)


def validate_numeric_columns(table: Table, names: Iterable[str]) -> None:
    """Fail with every selected column that holds non-numeric cells.

    Raises:
        NonNumericColumn: When any selected column is not numeric.
    """

    offending: list[str] = []
    for name in names:
        if name not in offending and not table.column(name).is_numeric:
            offending.append(name)
    if offending:
        raise NonNumericColumn(offending)


def resolve_labels(table: Table, x: str | None) -> list[str]:
    """Return category labels from column `x`, or the row indices as strings."""

    if x is None:
        return [str(idx) for idx in range(table.row_count)]
    require_columns(table, (x,))
    return [str(cell) for cell in table.column(x).values]


def resolve_value_columns(table: Table, y: str | Iterable[str] | None, *, exclude: str | None = None) -> tuple[str, ...]:
    """Return explicit value columns, or every numeric column except `exclude`.

    Raises:
        ColumnNotFound: When explicit names are absent (all reported together).
        NoNumericColumns: When inference finds no numeric column.
    """

    names = column_list(y)
    if names:
        require_columns(table, names)
        return names

    inferred = tuple(name for name in table.numeric_names() if name != exclude)
    if not inferred:
        raise NoNumericColumns()
    return inferred


def parse_bubble_mapping(table: Table, y: ValueSpec) -> ColumnRoleMapping:
    """Parse a bubble value spec into value, radius and group columns.

    Accepts `"value"`, `["value", "radius", "group"?]` or a mapping with
    `value` (or `y`), `radius` (or `r`) and optional `group` keys.

    Raises:
        MissingRequiredColumn: When the value or radius column is not given.
        ColumnNotFound: When any named column is absent.
    """

    if y is None:
        raise MissingRequiredColumn("value", chart_type="bubble")

    if isinstance(y, Mapping):
        value = y.get("value") or y.get("y")
        radius = y.get("radius") or y.get("r")
        group = y.get("group")
    else:
        names = column_list(y)
        value = names[0] if names else None
        radius = names[1] if len(names) >= 2 else None
        group = names[2] if len(names) >= 3 else None

    if value is None:
        raise MissingRequiredColumn("value", chart_type="bubble")
    if radius is None:
        raise MissingRequiredColumn("radius", chart_type="bubble")
    require_columns(table, (value, radius, group))
    return ColumnRoleMapping(value_columns=(value,), radius_column=radius, group_column=group)


def resolve_columns(table: Table, chart_type: str, x: str | None = None, y: ValueSpec = None) -> ColumnRoleMapping:
    """Resolve column roles for a chart type.

    Args:
        table: Input table.
        chart_type: Chart type; selects the family rules.
        x: Explicit label (category/segment) or x (point) column.
        y: Explicit value column(s); a bubble mapping for bubble charts.

    Returns:
        ColumnRoleMapping with every selected column validated.
    """

    family = family_for(chart_type)

    if family == "category":
        if isinstance(y, Mapping):
            raise InvalidInput(f"{chart_type} charts take a column name or list of names for 'y'.")
        if x is not None:
            require_columns(table, (x,))
        values = resolve_value_columns(table, y, exclude=x)
        validate_numeric_columns(table, values)
        return ColumnRoleMapping(label_column=x, value_columns=values)

    if family == "segment":
        if isinstance(y, Mapping):
            raise InvalidInput(f"{chart_type} charts take a single value column for 'y'.")
        label = x if x is not None else table.names[0]
        require_columns(table, (label,))
        explicit = column_list(y)
        if explicit:
            value = explicit[0]
            require_columns(table, (value,))
        else:
            candidates = [name for name in table.numeric_names() if name != label]
            if not candidates:
                raise NoNumericColumns()
            value = candidates[0]
        validate_numeric_columns(table, (value,))
        return ColumnRoleMapping(label_column=label, value_columns=(value,))

    if x is None:
        raise MissingRequiredColumn("x", chart_type=chart_type)
    require_columns(table, (x,))

    if chart_type == "bubble":
        mapping = parse_bubble_mapping(table, y)
        validate_numeric_columns(table, (x, *mapping.value_columns, mapping.radius_column))
        return ColumnRoleMapping(
            label_column=x,
            value_columns=mapping.value_columns,
            radius_column=mapping.radius_column,
            group_column=mapping.group_column,
        )

    if isinstance(y, Mapping):
        raise InvalidInput("Scatter charts take a column name or list of names for 'y'.")
    ys = column_list(y)
    if not ys:
        raise MissingRequiredColumn("y", chart_type=chart_type)
    require_columns(table, ys)
    validate_numeric_columns(table, (x, *ys))
    return ColumnRoleMapping(label_column=x, value_columns=ys)
