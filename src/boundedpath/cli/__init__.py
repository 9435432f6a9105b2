"""Command-line interface for boundedpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for multi-file builds
- Verbose/quiet output modes
- Mesh statistics without writing output (info command)
- Detailed error reporting
"""

from boundedpath.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
