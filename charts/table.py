"""In-memory tables used as chart input.

A Table is an ordered set of named, equal-length columns. Each column is
classified once, at construction, as numeric or text so later resolution can
pattern-match on column kinds instead of probing values again.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from .errors import ColumnNotFound, InvalidInput

Scalar = int | float | Decimal | str | None
ColumnKind = Literal["numeric", "text"]


def is_number(value: object) -> bool:
    """Return True for numeric scalars (booleans are not numbers here)."""

    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _column_kind(values: tuple[Scalar, ...]) -> ColumnKind:
    """Classify a column from its cells."""

    present = [value for value in values if value is not None]
    if values and not present:
        return "text"
    if all(is_number(value) for value in present):
        return "numeric"
    return "text"


@dataclass(frozen=True, slots=True)
class Column:
    """A named column of scalar cells.

    Args:
        name: Column name, unique within its table.
        values: Cells in row order.
        kind: "numeric" when every non-null cell is a number, else "text".
    """

    name: str
    values: tuple[Scalar, ...]
    kind: ColumnKind

    @classmethod
    def of(cls, name: str, values: Iterable[Scalar]) -> Column:
        """Build a column and classify it."""

        cells = tuple(values)
        return cls(name=name, values=cells, kind=_column_kind(cells))

    @property
    def is_numeric(self) -> bool:
        return self.kind == "numeric"


@dataclass(frozen=True, slots=True)
class Table:
    """Ordered collection of equal-length columns."""

    columns: tuple[Column, ...]

    def __post_init__(self) -> None:
        if not self.columns:
            raise InvalidInput("data must be a table with at least one column.")
        names = [column.name for column in self.columns]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise InvalidInput(f"data must be a table with unique column names; duplicated: {', '.join(duplicates)}.")
        lengths = {len(column.values) for column in self.columns}
        if len(lengths) > 1:
            raise InvalidInput(f"data must be a table with equal-length columns; got lengths {sorted(lengths)}.")

    @classmethod
    def from_columns(cls, data: Mapping[str, Sequence[Scalar]]) -> Table:
        """Build a table from a mapping of column name to cells."""

        columns: list[Column] = []
        for name, values in data.items():
            if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
                raise InvalidInput(f"data must be a table; column {name!r} is not a sequence of values.")
            columns.append(Column.of(str(name), values))
        return cls(columns=tuple(columns))

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Scalar]]) -> Table:
        """Build a table from row mappings (lists of dicts, `QuerySet.values()`).

        Column order follows first appearance. Cells missing from a row are None.
        """

        rows = list(records)
        names: list[str] = []
        for row in rows:
            if not isinstance(row, Mapping):
                raise InvalidInput("data must be a table; every record must be a mapping.")
            for key in row:
                if key not in names:
                    names.append(key)
        return cls(columns=tuple(Column.of(str(name), (row.get(name) for row in rows)) for name in names))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(column.name for column in self.columns)

    @property
    def row_count(self) -> int:
        return len(self.columns[0].values)

    def has(self, name: str) -> bool:
        return name in self.names

    def column(self, name: str) -> Column:
        """Return the named column.

        Raises:
            ColumnNotFound: When the table has no such column.
        """

        for column in self.columns:
            if column.name == name:
                return column
        raise ColumnNotFound((name,))

    def numeric_names(self) -> tuple[str, ...]:
        """Return numeric column names in table order."""

        return tuple(column.name for column in self.columns if column.is_numeric)

    def rows_where(self, name: str, value: str) -> Table:
        """Return the rows whose `str()` cell in `name` equals `value`."""

        keep = [idx for idx, cell in enumerate(self.column(name).values) if str(cell) == value]
        return Table(
            columns=tuple(
                Column(name=column.name, values=tuple(column.values[idx] for idx in keep), kind=column.kind)
                for column in self.columns
            )
        )


def as_table(data: object) -> Table:
    """Coerce table-shaped input into a Table.

    Args:
        data: A Table, a mapping of column name to cells, or an iterable of row
            mappings.

    Returns:
        Table instance.

    Raises:
        InvalidInput: When `data` is not table-shaped.
    """

    if isinstance(data, Table):
        return data
    if isinstance(data, Mapping):
        return Table.from_columns(data)
    if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
        raise InvalidInput(f"data must be a table, got {type(data).__name__}.")
    return Table.from_records(data)
