"""Collaborator interfaces used by the build artifact resolver."""

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol, TypeAlias, runtime_checkable

from mapscope.models.artifacts import Candidate


# Returns the chosen candidate, or None when the user cancelled.
CandidateChooser: TypeAlias = Callable[[Sequence[Candidate]], Candidate | None]

# Returns the workspace root, or None when no workspace is open.
WorkspaceProvider: TypeAlias = Callable[[], Path | None]


@runtime_checkable
class NotifierProtocol(Protocol):
    """Fire-and-forget sink for user facing notices."""

    def info(self, message: str) -> None:
        """Show an informational notice."""
        ...

    def warning(self, message: str) -> None:
        """Show a warning notice."""
        ...
