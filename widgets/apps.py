"""App configuration for the widgets Django app."""

from __future__ import annotations

from django.apps import AppConfig


class WidgetsConfig(AppConfig):
    """Configuration for the `widgets` app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "widgets"
