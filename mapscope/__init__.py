"""Mapscope - locate firmware build binaries and their linker maps."""

from importlib.metadata import distribution

from .core.errors import MapscopeError, ResolutionError
from .discovery import ArtifactResolver, create_artifact_resolver
from .models import Candidate, ResolvedPaths


__version__ = distribution(__package__ or "mapscope").version

__all__ = [
    "ArtifactResolver",
    "Candidate",
    "MapscopeError",
    "ResolutionError",
    "ResolvedPaths",
    "create_artifact_resolver",
    "__version__",
]
