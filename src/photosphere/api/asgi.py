"""ASGI entrypoint for the PhotoSphere API."""

from photosphere.api.app import create_app
from photosphere.containers import build_container

app = create_app(build_container())
