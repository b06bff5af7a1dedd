"""ASGI entrypoint for the paired photos API."""

from paired_photos.api.app import create_app
from paired_photos.containers import build_container

app = create_app(build_container())
