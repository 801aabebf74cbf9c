"""Protocol definition for file system access."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileAdapterProtocol(Protocol):
    """Protocol for the file system operations used by artifact discovery."""

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a file."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory (symlinks are followed)."""
        ...

    def is_readable(self, path: Path) -> bool:
        """Check if a path exists and the current process may read it.

        Never raises; any failure of the access probe yields False.
        """
        ...

    def real_path(self, path: Path) -> Path:
        """Return the absolute path with symlinks resolved."""
        ...

    def list_directory(self, path: Path) -> list[Path]:
        """List all items in a directory, sorted by name.

        Raises:
            FileSystemError: If the directory cannot be listed
        """
        ...

    def list_files(self, path: Path, pattern: str = "*") -> list[Path]:
        """List files directly inside a directory matching a glob pattern.

        Raises:
            FileSystemError: If the directory cannot be listed
        """
        ...
