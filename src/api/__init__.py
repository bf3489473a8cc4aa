"""HTTP surface for Word Grid Studio."""

from .app import create_app

__all__ = ["create_app"]
