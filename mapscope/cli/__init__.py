"""Command-line interface for Mapscope using Typer."""

from mapscope.cli.app import __version__, app, main
from mapscope.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main", "__version__"]
