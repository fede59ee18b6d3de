"""Typed click events reported by a rendered chart."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import InvalidInput
from .table import is_number

PointValue = int | float | dict[str, Any] | None


@dataclass(frozen=True, slots=True)
class ClickEvent:
    """The data element nearest to a click on a rendered chart.

    Args:
        dataset_index: Index of the clicked dataset.
        index: Index of the clicked element within the dataset.
        value: The element's value (a number, a point object, or None).
        label: Category label at `index`, or None for point charts.
    """

    dataset_index: int
    index: int
    value: PointValue
    label: str | None = None

    def as_json(self) -> dict[str, Any]:
        return {"datasetIndex": self.dataset_index, "index": self.index, "value": self.value, "label": self.label}


def parse_click_event(payload: object) -> ClickEvent:
    """Parse a `{datasetIndex, index, value, label}` payload.

    Raises:
        InvalidInput: When a field is missing or has the wrong type.
    """

    if not isinstance(payload, Mapping):
        raise InvalidInput("Click payload must be an object.")

    indices: dict[str, int] = {}
    for key in ("datasetIndex", "index"):
        raw = payload.get(key)
        if not isinstance(raw, int) or isinstance(raw, bool) or raw < 0:
            raise InvalidInput(f"Click payload field {key!r} must be a non-negative integer, got {raw!r}.")
        indices[key] = raw

    value = payload.get("value")
    if isinstance(value, Mapping):
        if not all(is_number(value.get(axis)) or value.get(axis) is None for axis in ("x", "y")):
            raise InvalidInput("Click payload point values must be numeric.")
        value = dict(value)
    elif value is not None and not is_number(value):
        raise InvalidInput(f"Click payload field 'value' must be a number or point, got {value!r}.")

    label = payload.get("label")
    if label is not None and not isinstance(label, str):
        raise InvalidInput(f"Click payload field 'label' must be a string, got {label!r}.")

    return ClickEvent(dataset_index=indices["datasetIndex"], index=indices["index"], value=value, label=label)
