"""Configuration package for Mapscope."""

from mapscope.config.models import (
    DEFAULT_SEARCH_FOLDERS,
    CaseSensitivity,
    ResolverConfig,
    UserConfigData,
)
from mapscope.config.user_config import UserConfig, create_user_config


__all__ = [
    "DEFAULT_SEARCH_FOLDERS",
    "CaseSensitivity",
    "ResolverConfig",
    "UserConfigData",
    "UserConfig",
    "create_user_config",
]
