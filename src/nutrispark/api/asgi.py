"""ASGI entrypoint for NutriSpark."""

from nutrispark.api.app import create_app
from nutrispark.containers import build_container

app = create_app(build_container())
