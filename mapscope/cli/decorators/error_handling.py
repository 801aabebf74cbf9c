"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from mapscope.cli.helpers.output import print_error_message
from mapscope.core.errors import (
    ConfigError,
    MapscopeError,
    ResolutionError,
    SelectionCancelledError,
)
from mapscope.core.logging import get_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_logger(__name__)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    This decorator catches common exceptions and provides appropriate
    error messages to the user before exiting with a non-zero status code.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except SelectionCancelledError as e:
            logger.info("selection_cancelled")
            print_error_message(str(e))
            raise typer.Exit(1) from e
        except ResolutionError as e:
            logger.error(
                "resolution_error",
                error=str(e),
                error_type=type(e).__name__,
                **e.context,
            )
            print_error_message(str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except ConfigError as e:
            logger.error("configuration_error", error=str(e))
            print_error_message(f"Configuration error: {e}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except MapscopeError as e:
            logger.error("mapscope_error", error=str(e), error_type=type(e).__name__)
            print_error_message(str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except Exception as e:
            exc_info = logging.getLogger(__name__).isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            print_error_message(f"Unexpected error: {e}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
