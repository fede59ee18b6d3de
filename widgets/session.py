"""Session-backed bridge between rendered charts and live updates.

Rendering a chart records its meta and options in the session; this is the
Bound state of the chart's proxy. Update messages are queued in the session
and collected by the page through `widgets.views.chart_messages`.
"""

from __future__ import annotations

from typing import Any, Final

from django.contrib.sessions.backends.base import SessionBase

from charts.codec import decode_meta, encode_meta
from charts.events import ClickEvent, parse_click_event
from charts.options import merge_options
from charts.proxy import UPDATE_DATA, UPDATE_OPTIONS, ChartProxy, chart_proxy
from charts.schema import ChartConfiguration

from .conf import widget_settings

SESSION_PREFIX: Final[str] = "chartjs"


def _key(output_id: str, suffix: str) -> str:
    return f"{SESSION_PREFIX}:{output_id}:{suffix}"


class SessionChannel:
    """MessageChannel that queues messages in a Django session."""

    def __init__(self, session: SessionBase, *, limit: int, keep_null: bool = True) -> None:
        self.session = session
        self.limit = limit
        self.keep_null = keep_null

    def send(self, kind: str, payload: dict[str, Any]) -> None:
        """Queue a message and mirror its effect on the stored chart record."""

        output_id = str(payload["id"])
        queue = list(self.session.get(_key(output_id, "messages"), []))
        queue.append({"kind": kind, "payload": payload})
        self.session[_key(output_id, "messages")] = queue[-self.limit :]

        record = self.session.get(_key(output_id, "chart"))
        if record is not None:
            if kind == UPDATE_DATA:
                record = {**record, "meta": payload["meta"]}
            elif kind == UPDATE_OPTIONS:
                merged = merge_options(record.get("options") or {}, payload["options"], keep_null=self.keep_null)
                record = {**record, "options": merged}
            self.session[_key(output_id, "chart")] = record
        self.session.modified = True


def remember_chart(session: SessionBase, output_id: str, chart: ChartConfiguration) -> None:
    """Record a rendered chart so later requests can bind a proxy to it.

    Re-rendering replaces the record and discards queued messages.
    """

    session[_key(output_id, "chart")] = {"meta": encode_meta(chart.meta), "options": chart.options}
    session.pop(_key(output_id, "messages"), None)
    session.modified = True


def is_rendered(session: SessionBase, output_id: str) -> bool:
    return _key(output_id, "chart") in session


def proxy_for(session: SessionBase, output_id: str) -> ChartProxy:
    """Return a proxy for `output_id`, bound when the chart was rendered in this session."""

    conf = widget_settings()
    channel = SessionChannel(session, limit=conf.message_queue_limit, keep_null=conf.keep_null_overrides)
    proxy = chart_proxy(output_id, channel, keep_null=conf.keep_null_overrides)
    record = session.get(_key(output_id, "chart"))
    if record is not None:
        proxy.meta = decode_meta(record["meta"])
        proxy.options = record.get("options") or {}
    return proxy


def drain_messages(session: SessionBase, output_id: str) -> list[dict[str, Any]]:
    """Return and clear the queued messages for a chart, oldest first."""

    messages = session.pop(_key(output_id, "messages"), [])
    session.modified = True
    return list(messages)


def record_click(session: SessionBase, output_id: str, payload: object) -> ClickEvent:
    """Parse and store the latest click on a chart.

    Raises:
        InvalidInput: When the payload is malformed.
    """

    event = parse_click_event(payload)
    session[_key(output_id, "click")] = event.as_json()
    session.modified = True
    return event


def last_click(session: SessionBase, output_id: str) -> ClickEvent | None:
    """Return the latest recorded click on a chart, if any."""

    payload = session.get(_key(output_id, "click"))
    if payload is None:
        return None
    return parse_click_event(payload)
