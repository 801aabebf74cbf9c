"""Adapter for loading YAML configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from mapscope.core.errors import ConfigError


logger = logging.getLogger(__name__)


class ConfigFileAdapter:
    """Read configuration dictionaries from YAML files."""

    def load_config(self, file_path: Path) -> dict[str, Any]:
        """Load a YAML configuration file.

        Args:
            file_path: Path to the YAML file

        Returns:
            Parsed configuration, empty dict for an empty file

        Raises:
            ConfigError: If the file cannot be read or is not a YAML mapping
        """
        try:
            with file_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Error parsing configuration file {file_path}: {e}",
                context={"path": str(file_path)},
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Error reading configuration file {file_path}: {e}",
                context={"path": str(file_path)},
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Invalid configuration format in {file_path}: expected a mapping",
                context={"path": str(file_path)},
            )
        return data

    def search_config_files(
        self, config_paths: list[Path]
    ) -> tuple[dict[str, Any], Path | None]:
        """Load the first existing configuration file from ``config_paths``.

        Returns:
            Tuple of (configuration data, path it was loaded from). When no
            file exists the data is empty and the path is None.
        """
        for config_path in config_paths:
            if config_path.is_file():
                logger.debug("Found configuration file: %s", config_path)
                return self.load_config(config_path), config_path
        return {}, None


def create_config_file_adapter() -> ConfigFileAdapter:
    """Create a configuration file adapter."""
    return ConfigFileAdapter()
