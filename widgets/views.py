"""JSON endpoints used by pages that display live charts."""

from __future__ import annotations

import json
import logging

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET, require_POST

from charts.errors import ChartError

from .session import drain_messages, is_rendered, record_click

logger = logging.getLogger(__name__)


@require_GET
def chart_messages(request: HttpRequest, output_id: str) -> JsonResponse:
    """Return and clear the queued update messages for a rendered chart."""

    if not is_rendered(request.session, output_id):
        return JsonResponse({"ok": False, "error": "Chart not found."}, status=404)
    return JsonResponse({"ok": True, "id": output_id, "messages": drain_messages(request.session, output_id)})


@require_POST
def chart_click(request: HttpRequest, output_id: str) -> JsonResponse:
    """Record a click reported by a rendered chart."""

    if not is_rendered(request.session, output_id):
        return JsonResponse({"ok": False, "error": "Chart not found."}, status=404)
    try:
        payload = json.loads(request.body or b"null")
    except ValueError:
        return JsonResponse({"ok": False, "error": "Request body must be JSON."}, status=400)
    try:
        event = record_click(request.session, output_id, payload)
    except ChartError as exc:
        logger.warning("Rejected click payload for chart %r: %s", output_id, exc)
        return JsonResponse({"ok": False, "error": str(exc)}, status=400)
    return JsonResponse({"ok": True, "click": event.as_json()})
