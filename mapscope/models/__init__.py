"""Core data models for Mapscope."""

from mapscope.models.artifacts import Candidate, CollectionResult, ResolvedPaths
from mapscope.models.base import MapscopeBaseModel


__all__ = [
    "MapscopeBaseModel",
    "Candidate",
    "CollectionResult",
    "ResolvedPaths",
]
