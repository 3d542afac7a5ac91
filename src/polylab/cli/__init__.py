"""Command-line interface for polylab.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Property tables for any regular polygon
- Side length solving from perimeter, area or apothem
- Image output of labelled polygons and polygon art
"""

from polylab.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
