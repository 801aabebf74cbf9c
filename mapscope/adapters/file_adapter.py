"""File adapter for abstracting file system operations."""

import logging
import os
from pathlib import Path

from mapscope.core.errors import FileSystemError
from mapscope.utils.error_utils import create_file_error


logger = logging.getLogger(__name__)


class FileSystemAdapter:
    """File system adapter implementation."""

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a file. Unreadable paths are not files."""
        try:
            return path.is_file()
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return False

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory. Unreadable paths are not directories."""
        try:
            return path.is_dir()
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return False

    def is_readable(self, path: Path) -> bool:
        """Check if a path exists and is readable by the current process."""
        try:
            return os.access(path, os.R_OK)
        except (OSError, ValueError) as e:
            logger.debug("Read access probe failed for %s: %s", path, e)
            return False

    def real_path(self, path: Path) -> Path:
        """Return the absolute path with symlinks resolved."""
        return Path(os.path.realpath(path))

    def list_directory(self, path: Path) -> list[Path]:
        """List all items in a directory, sorted by name."""
        try:
            logger.debug("Listing directory contents: %s", path)
            if not self.is_dir(path):
                error = create_file_error(
                    path, "list_directory", NotADirectoryError("Not a directory"), {}
                )
                logger.debug("Path is not a directory: %s", path)
                raise error

            items = sorted(path.iterdir(), key=lambda item: item.name)
            logger.debug("Found %d items in %s", len(items), path)
            return items
        except FileSystemError:
            # Let FileSystemError pass through
            raise
        except OSError as e:
            error = create_file_error(path, "list_directory", e, {})
            logger.debug("Error listing directory %s: %s", path, e)
            raise error from e

    def list_files(self, path: Path, pattern: str = "*") -> list[Path]:
        """List files in a directory matching a pattern, sorted by name."""
        try:
            logger.debug("Listing files in %s with pattern '%s'", path, pattern)
            if not self.is_dir(path):
                error = create_file_error(
                    path,
                    "list_files",
                    NotADirectoryError("Not a directory"),
                    {"pattern": pattern},
                )
                logger.debug("Path is not a directory: %s", path)
                raise error

            files = sorted(
                (f for f in path.glob(pattern) if f.is_file()), key=lambda f: f.name
            )
            logger.debug(
                "Found %d files matching pattern '%s' in %s", len(files), pattern, path
            )
            return files
        except FileSystemError:
            # Let FileSystemError pass through
            raise
        except OSError as e:
            error = create_file_error(path, "list_files", e, {"pattern": pattern})
            logger.debug("Error listing files in %s: %s", path, e)
            raise error from e


def create_file_adapter() -> FileSystemAdapter:
    """Create a file adapter instance.

    Returns:
        FileSystemAdapter: New file adapter instance
    """
    return FileSystemAdapter()
