"""Encoding helpers for the Chart.js hand-off and the recorded meta."""

from __future__ import annotations

import copy
import json
from typing import Any, cast

from .columns import column_list
from .errors import InvalidInput
from .schema import ChartConfiguration, ChartMeta, ColumnRoleMapping, family_for


def encode_meta(meta: ChartMeta) -> dict[str, Any]:
    """Encode chart meta into its wire shape.

    Category and scatter charts record `y` as a list; segment and bubble
    charts record the single value column as a string. Bubble meta also
    records `radius` and `group`.
    """

    columns = meta.columns
    payload: dict[str, Any] = {"type": meta.chart_type, "x": columns.label_column}
    if meta.family == "segment" or meta.chart_type == "bubble":
        payload["y"] = columns.value_columns[0] if columns.value_columns else None
    else:
        payload["y"] = list(columns.value_columns)
    if meta.chart_type == "bubble":
        payload["radius"] = columns.radius_column
        payload["group"] = columns.group_column
    return payload


def decode_meta(payload: dict[str, Any]) -> ChartMeta:
    """Decode meta previously produced by `encode_meta`.

    Raises:
        UnsupportedChartType: When the recorded type is unknown.
        InvalidInput: When column names are malformed.
    """

    if not isinstance(payload, dict):
        raise InvalidInput("Chart meta must be a mapping.")
    chart_type = payload.get("type")
    family_for(chart_type)
    return ChartMeta(
        chart_type=cast(Any, chart_type),
        columns=ColumnRoleMapping(
            label_column=_parse_name(payload.get("x"), key="x"),
            value_columns=column_list(payload.get("y")),
            radius_column=_parse_name(payload.get("radius"), key="radius"),
            group_column=_parse_name(payload.get("group"), key="group"),
        ),
    )


def encode_chart(config: ChartConfiguration) -> dict[str, Any]:
    """Encode a configuration as the `{type, data, options, meta}` hand-off dict.

    The result shares no structure with `config`.
    """

    return {
        "type": config.chart_type,
        "data": copy.deepcopy(dict(config.data)),
        "options": copy.deepcopy(config.options),
        "meta": encode_meta(config.meta),
    }


def chart_to_json(config: ChartConfiguration) -> str:
    """Serialize a configuration for the Chart.js constructor."""

    return json.dumps(encode_chart(config), separators=(",", ":"))


def _parse_name(value: object, *, key: str) -> str | None:
    """Return a column name or None, rejecting non-string values."""

    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise InvalidInput(f"Chart meta field {key!r} must be a column name, got {value!r}.")
    return value
