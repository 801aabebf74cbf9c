from .errors import (
    ConfigError,
    FileSystemError,
    MapscopeError,
    NoBuildFolderFoundError,
    NoCandidatesError,
    NoMatchingArtifactsError,
    NoWorkspaceError,
    ResolutionError,
    SelectionCancelledError,
)
from .logging import debug_verbosity, get_logger, setup_logging


__all__ = [
    "setup_logging",
    "debug_verbosity",
    "get_logger",
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
