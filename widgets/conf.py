"""Site-level chart settings read from Django settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from django.conf import settings

from charts.builder import build_chart
from charts.columns import ValueSpec
from charts.options import load_options_file, merge_options
from charts.schema import ChartConfiguration


@dataclass(frozen=True, slots=True)
class WidgetSettings:
    """Chart settings for the current Django configuration.

    Args:
        keep_null_overrides: Merge mode for None option overrides.
        message_queue_limit: Maximum queued live-update messages per chart.
        options_file: Optional YAML file with site-wide option overrides.
    """

    keep_null_overrides: bool = True
    message_queue_limit: int = 100
    options_file: Path | None = None


def widget_settings() -> WidgetSettings:
    """Return the chart settings from `django.conf.settings`."""

    options_file = getattr(settings, "CHARTJS_OPTIONS_FILE", None)
    return WidgetSettings(
        keep_null_overrides=bool(getattr(settings, "CHARTJS_KEEP_NULL_OVERRIDES", True)),
        message_queue_limit=max(1, int(getattr(settings, "CHARTJS_MESSAGE_QUEUE_LIMIT", 100))),
        options_file=Path(options_file) if options_file else None,
    )


def site_options() -> dict[str, Any]:
    """Return the site-wide option overrides, or an empty tree when none are configured."""

    conf = widget_settings()
    if conf.options_file is None:
        return {}
    return load_options_file(conf.options_file)


def build_site_chart(
    data: object,
    chart_type: str = "bar",
    x: str | None = None,
    y: ValueSpec = None,
    options: Mapping[str, Any] | None = None,
) -> ChartConfiguration:
    """Build a chart with site-wide overrides applied beneath the caller's options."""

    conf = widget_settings()
    # Nulls survive this layer; the merge against the defaults applies the configured mode.
    merged = merge_options(site_options(), options, keep_null=True)
    return build_chart(data, chart_type, x, y, merged, keep_null=conf.keep_null_overrides)
