"""Pytest fixtures shared across chart engine and Django tests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from charts.table import Table


class RecordingChannel:
    """MessageChannel that keeps every sent message in order."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, dict[str, Any]]] = []

    def send(self, kind: str, payload: dict[str, Any]) -> None:
        self.messages.append((kind, payload))


@pytest.fixture
def channel() -> RecordingChannel:
    """Return an empty recording channel."""

    return RecordingChannel()


@pytest.fixture
def sales_table() -> Table:
    """Return a small month/sales/costs table."""

    return Table.from_columns(
        {
            "month": ["Jan", "Feb", "Mar"],
            "sales": [10, 15, 12],
            "costs": [8, 12, 10],
        }
    )


@pytest.fixture
def bubble_table() -> Table:
    """Return a bubble table with a region grouping column."""

    return Table.from_columns(
        {
            "x": [20, 30, 25, 40],
            "y": [30, 50, 35, 45],
            "r": [10, 15, 8, 12],
            "region": ["north", "south", "north", "east"],
        }
    )


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, database, views or templates.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
