"""HTTP host for the dispatch core."""

from restify.server.app import create_app

__all__ = ["create_app"]
