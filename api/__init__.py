"""HTTP surface for the trade log assistant."""

from .app import create_app

__all__ = ["create_app"]
