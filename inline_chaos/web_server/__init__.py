"""Web server for the inline-chaos demonstration pages."""

from .web_server import InlineChaosWebServer, create_app

__all__ = ["InlineChaosWebServer", "create_app"]
