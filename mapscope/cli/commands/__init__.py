"""CLI command modules."""

import typer

from mapscope.cli.commands.config import register_commands as register_config_commands
from mapscope.cli.commands.locate import locate
from mapscope.cli.commands.scan import scan


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    app.command()(locate)
    app.command()(scan)
    register_config_commands(app)
