"""Interactive collaborators used by the CLI resolver."""

import logging
from collections.abc import Sequence

import click
import typer
from rich.table import Table

from mapscope.cli.helpers.theme import TableStyles, ThemedConsole
from mapscope.models.artifacts import Candidate


logger = logging.getLogger(__name__)


def build_candidate_table(
    candidates: Sequence[Candidate], icon_mode: str = "emoji"
) -> Table:
    """Rich table listing candidates, numbered from 1."""
    table = TableStyles.create_candidate_table(icon_mode)
    for index, candidate in enumerate(candidates, start=1):
        table.add_row(
            str(index),
            candidate.display_label,
            candidate.relative_folder,
            candidate.binary_path.name,
            candidate.map_path.name,
        )
    return table


class PromptChooser:
    """Ask the user to pick one candidate by number.

    Entering ``0``, Ctrl-C or end of input cancels and yields None.
    """

    def __init__(self, console: ThemedConsole) -> None:
        self.console = console

    def __call__(self, candidates: Sequence[Candidate]) -> Candidate | None:
        self.console.console.print(
            build_candidate_table(candidates, self.console.icon_mode)
        )
        try:
            choice = typer.prompt(
                "Select build artifact (0 to cancel)",
                type=click.IntRange(0, len(candidates)),
                err=True,
            )
        except click.exceptions.Abort:
            logger.debug("Candidate prompt aborted")
            return None

        if choice == 0:
            return None
        return candidates[choice - 1]


class ConsoleNotifier:
    """Show resolver notices on the themed console."""

    def __init__(self, console: ThemedConsole) -> None:
        self.console = console

    def info(self, message: str) -> None:
        self.console.print_info(message)

    def warning(self, message: str) -> None:
        self.console.print_warning(message)
