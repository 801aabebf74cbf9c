"""Configuration models for Mapscope."""

from .resolver import DEFAULT_SEARCH_FOLDERS, CaseSensitivity, ResolverConfig
from .user import UserConfigData


__all__ = [
    "DEFAULT_SEARCH_FOLDERS",
    "CaseSensitivity",
    "ResolverConfig",
    "UserConfigData",
]
