"""
CLI package for roster_reconciler.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from roster_reconciler.cli.app import app, main

__all__ = [
    "app",
    "main",
]
