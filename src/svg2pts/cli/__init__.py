"""Command-line interface for svg2pts.

This module provides the CLI using Typer with rich error reporting on
stderr, keeping stdout free for point data.

Key features:
- stdin/stdout defaults for pipelines
- Distance, accuracy and point-count targets
- Optional parallel sampling
- Verbose summary and quiet modes
"""

from svg2pts.cli.app import cli, main

__all__ = ["cli", "main"]
