"""ASGI application factory and dependencies for the keymask server."""

from keymask.server.app import app, create_app

__all__ = ["app", "create_app"]
