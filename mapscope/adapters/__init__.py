"""Adapters package for external system interfaces."""

from mapscope.protocols import FileAdapterProtocol

from .config_file_adapter import ConfigFileAdapter, create_config_file_adapter
from .file_adapter import FileSystemAdapter, create_file_adapter


__all__ = [
    "ConfigFileAdapter",
    "create_config_file_adapter",
    "FileAdapterProtocol",
    "FileSystemAdapter",
    "create_file_adapter",
]
