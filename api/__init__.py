"""
Catalog Accounts API package.

Provides the FastAPI application for accounts, sessions and profiles.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
