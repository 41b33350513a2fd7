
"""
CLI package for phosys_parser.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from phosys_parser.cli.app import app, main

__all__ = [
    "app",
    "main",
]
