"""HTTP layer of the reading platform."""
from .app import create_app

__all__ = ["create_app"]
