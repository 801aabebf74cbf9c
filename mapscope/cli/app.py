"""Main CLI application for Mapscope."""

import logging
import sys

# Import version from package metadata directly to avoid circular imports
from importlib.metadata import distribution
from typing import Annotated

import typer

from mapscope.cli.decorators.error_handling import print_stack_trace_if_verbose
from mapscope.config.user_config import UserConfig
from mapscope.core.errors import ConfigError
from mapscope.core.logging import setup_logging


__all__ = ["app", "main", "__version__", "AppContext"]


__version__ = distribution("mapscope").version

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
        no_emoji: bool = False,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            config_file: Path to configuration file
            no_emoji: Whether to disable emoji icons
        """
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self.no_emoji = no_emoji

        from mapscope.config.user_config import create_user_config

        self.user_config: UserConfig = create_user_config(cli_config_path=config_file)

    @property
    def icon_mode(self) -> str:
        """Icon mode string: "emoji" or "text"."""
        return "text" if self.no_emoji else "emoji"


app = typer.Typer(
    name="mapscope",
    help=f"""Mapscope build artifact locator v{__version__}

Finds the binary image and the matching linker map produced by a firmware
build, so that size and memory analyzers can consume them.

Common workflows:
  • Locate artifacts:   mapscope locate path/to/project
  • Use explicit files: mapscope locate --binary out/app.elf --map out/app.map
  • List every build:   mapscope scan path/to/project""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    no_emoji: Annotated[
        bool,
        typer.Option("--no-emoji", help="Disable emoji icons in output"),
    ] = False,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """Mapscope build artifact locator."""
    if version:
        print(f"Mapscope v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    try:
        app_context = AppContext(
            verbose=verbose,
            log_file=log_file,
            config_file=config_file,
            no_emoji=no_emoji,
        )
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        raise typer.Exit(1) from e
    ctx.obj = app_context

    # Set log level based on verbosity, debug flag, or config
    if debug or verbose >= 2:
        log_level_name = "DEBUG"
    elif verbose == 1:
        log_level_name = "INFO"
    else:
        log_level_name = app_context.user_config.log_level

    setup_logging(log_level_name=log_level_name, log_file=log_file)


def main() -> int:
    """Main CLI entry point."""
    exit_code = 0

    try:
        app()
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print_stack_trace_if_verbose()
        exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
