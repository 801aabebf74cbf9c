"""Shared parameter definitions for CLI commands."""

from pathlib import Path
from typing import Annotated

import typer


def complete_output_formats(incomplete: str) -> list[str]:
    """Tab completion for output formats."""
    return [fmt for fmt in ("text", "json") if fmt.startswith(incomplete)]


def complete_case_sensitivity(incomplete: str) -> list[str]:
    """Tab completion for case sensitivity modes."""
    return [
        mode
        for mode in ("auto", "sensitive", "insensitive")
        if mode.startswith(incomplete)
    ]


WorkspaceArgument = Annotated[
    Path | None,
    typer.Argument(
        help="Workspace root to search (default: current directory)",
        show_default=False,
    ),
]

OutputFormatOption = Annotated[
    str,
    typer.Option(
        "--output-format",
        "-o",
        help="Output format: text|json (default: text)",
        autocompletion=complete_output_formats,
    ),
]

BinaryExtensionOption = Annotated[
    str | None,
    typer.Option("--binary-ext", help="Binary artifact extension (default: .elf)"),
]

MapExtensionOption = Annotated[
    str | None,
    typer.Option("--map-ext", help="Map artifact extension (default: .map)"),
]

SearchFolderOption = Annotated[
    list[str] | None,
    typer.Option(
        "--search-folder",
        help="Folder searched first, relative to the workspace (repeatable, in priority order)",
    ),
]

CaseSensitivityOption = Annotated[
    str | None,
    typer.Option(
        "--case-sensitivity",
        help="Directory identity comparison: auto|sensitive|insensitive",
        autocompletion=complete_case_sensitivity,
    ),
]
