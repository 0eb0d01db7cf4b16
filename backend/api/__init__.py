"""
Jaothui ID-Trace API package.

Provides the FastAPI application for the livestock record keeping service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
