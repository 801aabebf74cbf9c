"""Configuration CLI commands."""

from typing import Annotated, Any

import typer
from rich.console import Console

from mapscope.cli.app import AppContext
from mapscope.cli.decorators import handle_errors
from mapscope.cli.helpers import print_json
from mapscope.cli.helpers.parameters import OutputFormatOption
from mapscope.cli.helpers.theme import TableStyles


config_app = typer.Typer(
    name="config",
    help="Configuration management commands",
    no_args_is_help=True,
)


def _flatten(data: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, prefix=f"{full_key}."))
        else:
            flat[full_key] = value
    return flat


@config_app.command(name="show")
@handle_errors
def show_config(
    ctx: typer.Context,
    show_sources: Annotated[
        bool, typer.Option("--sources", help="Show configuration sources")
    ] = False,
    output_format: OutputFormatOption = "text",
) -> None:
    """Show the effective configuration.

    \b
    Examples:
        mapscope config show
        mapscope config show --sources
    """
    app_ctx: AppContext = ctx.obj
    user_config = app_ctx.user_config
    settings = _flatten(user_config.to_dict())

    if output_format == "json":
        print_json(settings)
        return

    table = TableStyles.create_config_table(app_ctx.icon_mode)
    if show_sources:
        table.add_column("Source", style="dim")

    for key, value in settings.items():
        display_value = "" if value is None else str(value)
        if show_sources:
            table.add_row(key, display_value, user_config.get_source(key))
        else:
            table.add_row(key, display_value)

    console = Console()
    console.print(table)
    if user_config.config_file_path is not None:
        console.print(f"Loaded from: {user_config.config_file_path}", style="dim")


def register_commands(app: typer.Typer) -> None:
    """Register config commands with the main app.

    Args:
        app: The main Typer app
    """
    app.add_typer(config_app, name="config")
