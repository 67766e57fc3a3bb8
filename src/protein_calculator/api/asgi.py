"""ASGI entrypoint for the protein calculator API."""

from protein_calculator.api.app import create_app
from protein_calculator.containers import build_container

app = create_app(build_container())
