"""Smoke tests for the Django project configuration."""

from __future__ import annotations

import pytest
from django.apps import apps
from django.conf import settings
from django.urls import reverse

pytestmark = pytest.mark.integration


def test_widgets_app_is_installed() -> None:
    assert apps.is_installed("widgets")
    assert "django.contrib.sessions" in settings.INSTALLED_APPS


def test_chart_settings_have_defaults() -> None:
    assert settings.CHARTJS_MESSAGE_QUEUE_LIMIT == 100
    assert settings.CHARTJS_KEEP_NULL_OVERRIDES is True


def test_widget_urls_resolve() -> None:
    assert reverse("widgets:chart_messages", args=["sales"]) == "/charts/sales/messages/"
    assert reverse("widgets:chart_click", args=["sales"]) == "/charts/sales/click/"
