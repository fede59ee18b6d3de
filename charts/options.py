"""Default Chart.js options and the override merge.

`default_options` builds a fresh tree on every call, so callers may mutate the
result freely. `merge_options` never mutates its inputs.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidInput
from .schema import family_for


def default_options(chart_type: str) -> dict[str, Any]:
    """Return the default options tree for a chart type.

    Args:
        chart_type: Supported chart type.

    Returns:
        A new nested dict; never shared between calls.
    """

    family = family_for(chart_type)
    options: dict[str, Any] = {
        "responsive": True,
        "maintainAspectRatio": True,
        "plugins": {
            "legend": {"position": "top"},
            "title": {"display": False},
        },
    }

    if chart_type in ("bar", "line"):
        options["scales"] = {"y": {"beginAtZero": True, "ticks": {"precision": 0}}}

    if chart_type == "line":
        options["elements"] = {
            "line": {"fill": False, "tension": 0.3},
            "point": {"radius": 3, "hoverRadius": 5},
        }

    if chart_type == "scatter":
        options["interaction"] = {"mode": "nearest", "intersect": True}
        options["plugins"]["legend"]["position"] = "right"

    if family == "segment":
        options["plugins"]["legend"]["position"] = "right"
        options["animation"] = {"animateRotate": True, "animateScale": True}

    return options


def merge_options(
    defaults: Mapping[str, Any],
    overrides: Mapping[str, Any] | None,
    *,
    keep_null: bool = True,
) -> dict[str, Any]:
    """Deep-merge `overrides` into `defaults`.

    Mappings present on both sides are merged recursively; any other override
    value (lists included) replaces the default wholesale.

    Args:
        defaults: Base options tree.
        overrides: Caller options; None or empty returns a copy of `defaults`.
        keep_null: When True, an override of None is kept as an explicit null
            (suppressing the default). When False, it deletes the key.

    Returns:
        A new merged tree.
    """

    merged = copy.deepcopy(dict(defaults))
    if overrides is None:
        return merged
    if not isinstance(overrides, Mapping):
        raise InvalidInput(f"options must be a mapping, got {type(overrides).__name__}.")

    for key, value in overrides.items():
        if value is None:
            if keep_null:
                merged[key] = None
            else:
                merged.pop(key, None)
            continue
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_options(current, value, keep_null=keep_null)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_options_file(path: str | Path) -> dict[str, Any]:
    """Load an options override tree from a YAML file.

    An empty file yields an empty tree.

    Raises:
        InvalidInput: When the document is not a mapping.
    """

    raw = Path(path).read_text(encoding="utf-8")
    payload = yaml.safe_load(raw) or {}
    if not isinstance(payload, dict):
        raise InvalidInput(f"Options file {str(path)!r} must contain a mapping at the top level.")
    return payload
