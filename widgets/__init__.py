"""Django app that embeds `charts` configurations in pages.

It renders the Chart.js hand-off markup, binds rendered charts to the user
session, queues live-update messages for the page to collect, and receives
click events reported by the page.
"""
