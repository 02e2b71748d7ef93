"""ASGI entrypoint for the line protocol API."""

from nutrition_flux.api.app import create_app
from nutrition_flux.containers import build_container

app = create_app(build_container())
