"""Command-line interface for Parade."""

from .main import app, main

__all__ = ["app", "main"]
