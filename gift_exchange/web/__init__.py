"""Simple Flask-based web interface for drawing gift exchange pairs."""
from __future__ import annotations

from .app import app, create_app

__all__ = ["app", "create_app"]
