"""ASGI entrypoint for the slimming tracker API."""

from slimming_tracker.api.app import create_app
from slimming_tracker.containers import build_container

app = create_app(build_container())
