"""ASGI entrypoint for the tiffin planner API."""

from tiffin_planner.api.app import create_app
from tiffin_planner.containers import build_container

app = create_app(build_container())
