"""Depth-first search for folders holding both build artifact kinds."""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import NamedTuple

from mapscope.adapters import create_file_adapter
from mapscope.core.errors import FileSystemError
from mapscope.protocols import FileAdapterProtocol


logger = logging.getLogger(__name__)


class _Frame(NamedTuple):
    """A directory whose subdirectories are still being walked."""

    directory: Path
    key: str
    subdirectories: Iterator[Path]
    qualifies: bool


class DirectoryWalker:
    """Depth-first walk that records folders directly containing both extensions.

    A folder qualifies only when a binary and a map file sit side by side in
    it; artifacts further down the subtree do not count for the parent. The
    walker keeps one visited set for its whole lifetime, so walking several
    roots that share directories (through symlinks or case aliases) never
    descends into the same directory twice and never records it twice.

    Args:
        binary_extension: Suffix of binary artifacts, e.g. ``.elf``
        map_extension: Suffix of map artifacts, e.g. ``.map``
        case_insensitive: Fold case when building directory identities
        file_adapter: File operations adapter
    """

    def __init__(
        self,
        binary_extension: str = ".elf",
        map_extension: str = ".map",
        case_insensitive: bool = False,
        file_adapter: FileAdapterProtocol | None = None,
    ) -> None:
        self.binary_extension = binary_extension
        self.map_extension = map_extension
        self.case_insensitive = case_insensitive
        self.file_adapter = file_adapter or create_file_adapter()
        self.visited: set[str] = set()
        self._found: dict[str, Path] = {}

    @property
    def found_folders(self) -> list[Path]:
        """All qualifying folders recorded so far, in encounter order."""
        return list(self._found.values())

    def identity_key(self, directory: Path) -> str:
        """Normalized identity of ``directory`` used for the visited set."""
        key = str(self.file_adapter.real_path(directory))
        return key.lower() if self.case_insensitive else key

    def find_matching_folders(self, root: Path) -> list[Path]:
        """Walk ``root`` and return the qualifying folders this walk added.

        Folders are returned in encounter order (a folder is recorded once its
        whole subtree has been processed). Folders already recorded by an
        earlier walk of this instance are not returned again.
        """
        already_found = len(self._found)
        logger.debug("Walking %s", root)
        self._walk(root)
        new_folders = list(self._found.values())[already_found:]
        logger.debug("Walk of %s found %d folder(s)", root, len(new_folders))
        return new_folders

    def _walk(self, root: Path) -> None:
        stack: list[_Frame] = []
        frame = self._enter(root)
        if frame is not None:
            stack.append(frame)

        while stack:
            frame = stack[-1]
            subdirectory = next(frame.subdirectories, None)
            if subdirectory is not None:
                child = self._enter(subdirectory)
                if child is not None:
                    stack.append(child)
                continue

            stack.pop()
            if frame.qualifies:
                logger.debug("Found build folder: %s", frame.directory)
                self._found.setdefault(frame.key, frame.directory)

    def _enter(self, directory: Path) -> _Frame | None:
        """Mark ``directory`` visited and classify its direct children."""
        key = self.identity_key(directory)
        if key in self.visited:
            logger.debug("Skipping already visited folder: %s", directory)
            return None
        self.visited.add(key)

        try:
            entries = self.file_adapter.list_directory(directory)
        except FileSystemError as e:
            logger.debug("Failed to access folder %s: %s", directory, e)
            return None

        subdirectories = []
        has_binary = False
        has_map = False
        for entry in entries:
            if self.file_adapter.is_dir(entry):
                subdirectories.append(entry)
            elif entry.name.endswith(self.binary_extension):
                has_binary = True
            elif entry.name.endswith(self.map_extension):
                has_map = True

        return _Frame(
            directory=directory,
            key=key,
            subdirectories=iter(subdirectories),
            qualifies=has_binary and has_map,
        )


def create_directory_walker(
    binary_extension: str = ".elf",
    map_extension: str = ".map",
    case_insensitive: bool = False,
    file_adapter: FileAdapterProtocol | None = None,
) -> DirectoryWalker:
    """Create a directory walker instance.

    Args:
        binary_extension: Suffix of binary artifacts
        map_extension: Suffix of map artifacts
        case_insensitive: Fold case when building directory identities
        file_adapter: File operations adapter

    Returns:
        DirectoryWalker: New walker with an empty visited set
    """
    return DirectoryWalker(
        binary_extension=binary_extension,
        map_extension=map_extension,
        case_insensitive=case_insensitive,
        file_adapter=file_adapter,
    )
