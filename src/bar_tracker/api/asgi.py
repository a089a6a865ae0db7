"""ASGI entrypoint for the bar tracker API."""

from bar_tracker.api.app import create_app
from bar_tracker.containers import build_container

app = create_app(build_container())
