"""
User configuration management for Mapscope.

This module handles user-specific configuration settings with multiple sources:
1. Environment variables (highest precedence)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values (lowest precedence)
"""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mapscope.adapters.config_file_adapter import (
    ConfigFileAdapter,
    create_config_file_adapter,
)
from mapscope.config.models import ResolverConfig, UserConfigData
from mapscope.core.errors import ConfigError


logger = logging.getLogger(__name__)

# Environment variable prefixes
ENV_PREFIX = "MAPSCOPE_"


class UserConfig:
    """
    Manages user-specific configuration for Mapscope using Pydantic Settings.

    The configuration is loaded from multiple sources with the following precedence:
    1. Environment variables (highest precedence) - handled by Pydantic Settings
    2. Config files (YAML) - first one found on the search path
    3. Default values (lowest precedence) - defined in model
    """

    def __init__(
        self,
        cli_config_path: str | Path | None = None,
        config_adapter: ConfigFileAdapter | None = None,
    ):
        """
        Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI
            config_adapter: Optional adapter for file operations
        """
        self._adapter = config_adapter or create_config_file_adapter()
        self._config_sources: dict[str, str] = {}
        self._main_config_path: Path | None = None
        self._config_paths = self._generate_config_paths(cli_config_path)
        self._load_config()

    def _generate_config_paths(self, cli_config_path: str | Path | None) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if cli_config_path:
            config_paths.append(Path(cli_config_path).expanduser().resolve())

        config_paths.extend([Path.cwd() / "mapscope.yaml", Path.cwd() / ".mapscope.yml"])

        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        config_home = (
            Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
        )
        config_paths.extend(
            [
                config_home / "mapscope" / "config.yaml",
                config_home / "mapscope" / "config.yml",
            ]
        )

        return config_paths

    def _load_config(self) -> None:
        """Load configuration from config files and environment variables."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Config search paths: %s", [str(p) for p in self._config_paths]
            )

        config_data, found_path = self._adapter.search_config_files(self._config_paths)

        try:
            if found_path:
                logger.debug("Loaded user configuration from %s", found_path)
                self._main_config_path = found_path
                self._config = UserConfigData(**config_data)
                self._track_file_sources(config_data, found_path.name)
            else:
                logger.debug(
                    "No user configuration files found. Using defaults with environment variables."
                )
                self._config = UserConfigData()
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration: {e}",
                context={"path": str(found_path) if found_path else None},
            ) from e

        self._track_env_var_sources()

    def _track_file_sources(
        self, data: dict[str, Any], source: str, prefix: str = ""
    ) -> None:
        for key, value in data.items():
            full_key = f"{prefix}{key}"
            if isinstance(value, dict):
                self._track_file_sources(value, source, prefix=f"{full_key}.")
            else:
                self._config_sources[full_key] = f"file:{source}"

    def _track_env_var_sources(self) -> None:
        for env_name in os.environ:
            if not env_name.upper().startswith(ENV_PREFIX):
                continue
            key = env_name[len(ENV_PREFIX) :].lower().replace("__", ".")
            self._config_sources[key] = "environment"

    def get_source(self, key: str) -> str:
        """Return where a configuration key was set: file, environment or default."""
        return self._config_sources.get(key, "default")

    @property
    def config_file_path(self) -> Path | None:
        """Path of the configuration file that was loaded, if any."""
        return self._main_config_path

    @property
    def resolver(self) -> ResolverConfig:
        """Build artifact resolver settings."""
        return self._config.resolver

    @property
    def log_level(self) -> str:
        return self._config.log_level

    def get_log_level_int(self) -> int:
        """Return the configured log level as a ``logging`` constant."""
        return getattr(logging, self._config.log_level, logging.WARNING)

    def to_dict(self) -> dict[str, Any]:
        """Effective configuration as JSON compatible data."""
        return self._config.model_dump(mode="json")


def create_user_config(
    cli_config_path: str | Path | None = None,
    config_adapter: ConfigFileAdapter | None = None,
) -> UserConfig:
    """Create a UserConfig instance.

    Args:
        cli_config_path: Optional config file path provided via CLI
        config_adapter: Optional adapter for file operations

    Returns:
        Configured UserConfig instance
    """
    return UserConfig(cli_config_path=cli_config_path, config_adapter=config_adapter)
