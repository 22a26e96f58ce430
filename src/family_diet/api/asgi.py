"""ASGI entrypoint for the family diet API."""

from family_diet.api.app import create_app
from family_diet.containers import build_container

app = create_app(build_container())
