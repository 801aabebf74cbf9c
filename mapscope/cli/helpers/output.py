"""Helper functions for CLI output formatting with Rich integration."""

import json
from collections.abc import Sequence
from typing import Any

import typer
from rich.console import Console

from mapscope.cli.helpers.prompts import build_candidate_table
from mapscope.cli.helpers.theme import Icons, get_themed_console
from mapscope.models.artifacts import Candidate, ResolvedPaths


def print_json(data: Any) -> None:
    """Print JSON data on stdout."""
    typer.echo(json.dumps(data, indent=2))


def print_error_message(message: str, icon_mode: str = "emoji") -> None:
    """Print an error message with an X symbol."""
    get_themed_console(icon_mode).print_error(message)


def print_resolved_paths(
    result: ResolvedPaths, output_format: str = "text", icon_mode: str = "emoji"
) -> None:
    """Print the outcome of a resolution.

    Args:
        result: Resolved artifact paths
        output_format: "text" or "json"
        icon_mode: Icon mode for text output
    """
    if output_format == "json":
        print_json(result.to_dict_full())
        return

    console = Console()
    console.print(
        Icons.format_with_icon("BUILD", "Build artifacts", icon_mode), style="bold"
    )
    console.print(f"  Binary:    {result.binary_path}", soft_wrap=True)
    console.print(f"  Map:       {result.map_path}", soft_wrap=True)
    if result.toolchain_path is not None:
        console.print(f"  Toolchain: {result.toolchain_path}", soft_wrap=True)


def print_candidates(
    candidates: Sequence[Candidate],
    output_format: str = "text",
    icon_mode: str = "emoji",
) -> None:
    """Print every candidate found by a scan."""
    if output_format == "json":
        print_json([candidate.to_dict_full() for candidate in candidates])
        return

    Console().print(build_candidate_table(candidates, icon_mode))
