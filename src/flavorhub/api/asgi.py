"""ASGI entrypoint for the FlavorHub API."""

from flavorhub.api.app import create_app
from flavorhub.containers import build_container

app = create_app(build_container())
