"""Existence and read access checks for configured paths."""

import logging
from pathlib import Path

from mapscope.adapters import create_file_adapter
from mapscope.protocols import FileAdapterProtocol


logger = logging.getLogger(__name__)


class PathValidator:
    """Check configured paths before they are handed out."""

    def __init__(self, file_adapter: FileAdapterProtocol | None = None) -> None:
        self.file_adapter = file_adapter or create_file_adapter()

    def exists_and_readable(self, path: Path | str | None) -> bool:
        """Return True when ``path`` exists and can be read.

        Missing files and permission failures both yield False; this never
        raises.
        """
        if path is None or str(path) == "":
            return False

        candidate = Path(path)
        if self.file_adapter.is_readable(candidate):
            return True

        logger.debug("Path not accessible: %s", candidate)
        return False


def create_path_validator(
    file_adapter: FileAdapterProtocol | None = None,
) -> PathValidator:
    """Create a path validator instance."""
    return PathValidator(file_adapter)
