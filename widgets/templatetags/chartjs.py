"""Template tag that hands a built chart to the page.

Usage::

    {% load chartjs %}
    {% chartjs chart "sales" %}

renders a `<canvas>` container plus a JSON script element holding the Chart.js
configuration, and binds the chart to the current session for live updates.
"""

from __future__ import annotations

import logging

from django import template
from django.utils.html import format_html, json_script
from django.utils.safestring import SafeString

from charts.codec import encode_chart
from charts.schema import ChartConfiguration
from charts.validator import validate_chart_configuration

from ..session import remember_chart

logger = logging.getLogger(__name__)

register = template.Library()


@register.simple_tag(takes_context=True)
def chartjs(context: template.Context, chart: ChartConfiguration, element_id: str) -> SafeString:
    """Render the chart container and its configuration."""

    result = validate_chart_configuration(chart)
    for warning in result.warnings:
        logger.warning("Chart %r: %s", element_id, warning)
    if not result.is_valid:
        logger.warning("Chart %r was not rendered: %s", element_id, "; ".join(result.errors))
        return format_html('<div id="{}" class="chartjs-error">{}</div>', element_id, " ".join(result.errors))

    request = context.get("request")
    session = getattr(request, "session", None)
    if session is not None:
        remember_chart(session, element_id, chart)

    return format_html(
        '<div id="{}" class="chartjs-widget"><canvas></canvas></div>{}',
        element_id,
        json_script(encode_chart(chart), f"{element_id}-config"),
    )
