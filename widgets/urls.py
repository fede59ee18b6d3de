"""URL configuration for chart widget endpoints."""

from __future__ import annotations

from django.urls import path

from widgets import views

app_name = "widgets"

urlpatterns = [
    path("charts/<str:output_id>/messages/", views.chart_messages, name="chart_messages"),
    path("charts/<str:output_id>/click/", views.chart_click, name="chart_click"),
]
