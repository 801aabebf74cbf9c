"""Exception hierarchy for Mapscope."""

from typing import Any


class MapscopeError(Exception):
    """Base exception for all Mapscope errors.

    Args:
        message: Human readable description of the failure
        context: Optional structured details (paths, operation names, ...)
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        return self.message


class ConfigError(MapscopeError):
    """Raised when configuration cannot be loaded or is invalid."""


class FileSystemError(MapscopeError):
    """Raised when a file system operation fails."""


class ResolutionError(MapscopeError):
    """Base class for errors that terminate a build artifact resolution."""


class NoWorkspaceError(ResolutionError):
    """No workspace root is available and no valid override pair was given."""


class NoBuildFolderFoundError(ResolutionError):
    """The search found no directory holding both artifact extensions."""


class NoMatchingArtifactsError(ResolutionError):
    """Qualifying directories exist but none holds a binary/map stem pair."""


class SelectionCancelledError(ResolutionError):
    """The user dismissed the candidate prompt without choosing."""


class NoCandidatesError(ResolutionError):
    """Selector was handed an empty candidate list."""


__all__ = [
    "MapscopeError",
    "ConfigError",
    "FileSystemError",
    "ResolutionError",
    "NoWorkspaceError",
    "NoBuildFolderFoundError",
    "NoMatchingArtifactsError",
    "SelectionCancelledError",
    "NoCandidatesError",
]
