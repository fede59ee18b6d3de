"""Live updates for charts that are already rendered.

A ChartProxy addresses one rendered chart by its output id. It starts
unbound; `bind_chart` records the chart's meta and options, after which the
update operations build message payloads and hand them to a MessageChannel.
The remote side applies them; nothing here talks to a browser directly.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, Protocol

from .codec import encode_meta
from .columns import ValueSpec, column_list
from .datasets import build_payload, line_element
from .errors import InvalidInput, InvalidProxyState
from .options import merge_options
from .palette import default_colors
from .schema import ChartConfiguration, ChartMeta
from .table import as_table

logger = logging.getLogger(__name__)

UPDATE_DATA: Final[str] = "update-data"
UPDATE_OPTIONS: Final[str] = "update-options"
ADD_DATASET: Final[str] = "add-dataset"
REMOVE_DATASET: Final[str] = "remove-dataset"

MESSAGE_KINDS: Final[tuple[str, ...]] = (UPDATE_DATA, UPDATE_OPTIONS, ADD_DATASET, REMOVE_DATASET)


class MessageChannel(Protocol):
    """Transport that delivers update messages to the rendered chart."""

    def send(self, kind: str, payload: dict[str, Any]) -> None: ...


@dataclass(slots=True)
class ChartProxy:
    """Handle for a rendered chart.

    Args:
        output_id: Opaque id of the rendered chart instance.
        channel: Transport for update messages.
        meta: Column mapping of the rendered chart; None while unbound.
        options: Options tree last known to be applied remotely.
        keep_null: Merge mode used by `update_options`.
    """

    output_id: str
    channel: MessageChannel
    meta: ChartMeta | None = None
    options: dict[str, Any] | None = None
    keep_null: bool = True

    @property
    def bound(self) -> bool:
        return self.meta is not None


def chart_proxy(
    output_id: str,
    channel: MessageChannel,
    *,
    chart: ChartConfiguration | None = None,
    keep_null: bool = True,
) -> ChartProxy:
    """Create a proxy, bound immediately when `chart` is given."""

    if not isinstance(output_id, str) or not output_id.strip():
        raise InvalidInput("Chart output id must be a non-empty string.")
    proxy = ChartProxy(output_id=output_id, channel=channel, keep_null=keep_null)
    if chart is not None:
        bind_chart(proxy, chart)
    return proxy


def bind_chart(proxy: ChartProxy, chart: ChartConfiguration) -> ChartProxy:
    """Record the rendered chart's meta and options on the proxy."""

    if not isinstance(proxy, ChartProxy):
        raise InvalidProxyState("First argument must be a ChartProxy.")
    proxy.meta = chart.meta
    proxy.options = copy.deepcopy(chart.options)
    return proxy


def update_data(
    proxy: ChartProxy,
    data: object,
    *,
    x: str | None = None,
    y: ValueSpec = None,
) -> ChartProxy:
    """Rebuild the chart data from a new table and send it.

    The recorded meta supplies every column role the call does not override.

    Args:
        proxy: Bound proxy.
        data: New table-shaped data.
        x: Optional label/x column override.
        y: Optional value column override. For bubble charts a mapping or a
            `[value, radius, group]` list may also override `radius` and `group`.

    Returns:
        The proxy, for chaining.
    """

    meta = encode_meta(_require_bound(proxy).meta)  # type: ignore[arg-type]
    overrides: dict[str, Any] = {"x": x}
    if meta["type"] == "bubble":
        overrides.update(_bubble_overrides(y))
    elif isinstance(y, Mapping):
        raise InvalidInput(f"{meta['type']} charts take a column name or list of names for 'y'.")
    else:
        overrides["y"] = y
    for key, value in overrides.items():
        if value is not None:
            meta[key] = value

    chart_type = meta["type"]
    value_spec: ValueSpec = meta["y"]
    if chart_type == "bubble":
        value_spec = {"value": meta["y"], "radius": meta.get("radius"), "group": meta.get("group")}
    payload = build_payload(as_table(data), chart_type, meta["x"], value_spec, line=line_element(proxy.options))

    proxy.meta = payload.meta
    _send(proxy, UPDATE_DATA, {"id": proxy.output_id, "data": payload.data, "meta": encode_meta(payload.meta)})
    return proxy


def update_options(proxy: ChartProxy, options: Mapping[str, Any]) -> ChartProxy:
    """Send an options delta and fold it into the proxy's options."""

    _require_bound(proxy)
    if not isinstance(options, Mapping):
        raise InvalidInput(f"options must be a mapping, got {type(options).__name__}.")
    proxy.options = merge_options(proxy.options or {}, options, keep_null=proxy.keep_null)
    _send(proxy, UPDATE_OPTIONS, {"id": proxy.output_id, "options": copy.deepcopy(dict(options))})
    return proxy


def add_dataset(proxy: ChartProxy, data: Sequence[Any], label: str, color: str | None = None) -> ChartProxy:
    """Append a dataset to the rendered chart; color defaults to the first palette color."""

    _require_bound(proxy)
    if color is None:
        color = default_colors(1)[0]
    dataset = {"label": label, "data": list(data), "backgroundColor": color, "borderColor": color}
    _send(proxy, ADD_DATASET, {"id": proxy.output_id, "dataset": dataset})
    return proxy


def remove_dataset(proxy: ChartProxy, index: int) -> ChartProxy:
    """Remove the dataset at zero-based `index`.

    Out-of-range indices are sent as-is; the remote side ignores them.
    """

    _require_bound(proxy)
    if not isinstance(index, int) or isinstance(index, bool):
        raise InvalidInput(f"Dataset index must be an integer, got {index!r}.")
    _send(proxy, REMOVE_DATASET, {"id": proxy.output_id, "index": index})
    return proxy


def _bubble_overrides(y: ValueSpec) -> dict[str, Any]:
    """Fan a bubble value spec out to the `y`, `radius` and `group` meta keys."""

    if y is None:
        return {}
    if isinstance(y, Mapping):
        return {"y": y.get("value") or y.get("y"), "radius": y.get("radius") or y.get("r"), "group": y.get("group")}
    names = column_list(y)
    return dict(zip(("y", "radius", "group"), names))


def _require_bound(proxy: object) -> ChartProxy:
    """Return `proxy` when it is a bound ChartProxy.

    Raises:
        InvalidProxyState: For foreign objects and unbound proxies.
    """

    if not isinstance(proxy, ChartProxy):
        raise InvalidProxyState("First argument must be a ChartProxy.")
    if proxy.meta is None:
        raise InvalidProxyState(f"Chart {proxy.output_id!r} is not bound to a rendered chart; call bind_chart first.")
    return proxy


def _send(proxy: ChartProxy, kind: str, payload: dict[str, Any]) -> None:
    logger.debug("Sending %s to chart %r.", kind, proxy.output_id)
    proxy.channel.send(kind, payload)
