"""Helpers for CLI commands."""

from mapscope.cli.helpers.output import (
    print_candidates,
    print_error_message,
    print_json,
    print_resolved_paths,
)
from mapscope.cli.helpers.prompts import ConsoleNotifier, PromptChooser


__all__ = [
    "ConsoleNotifier",
    "PromptChooser",
    "print_candidates",
    "print_error_message",
    "print_json",
    "print_resolved_paths",
]
