"""
FastAPI application surface for the trading journal backend.
"""

from .app import create_app, app

__all__ = ["create_app", "app"]
