"""Pair binaries with their linker maps inside one folder."""

import logging
from pathlib import Path

from mapscope.adapters import create_file_adapter
from mapscope.core.errors import FileSystemError
from mapscope.models.artifacts import Candidate
from mapscope.protocols import FileAdapterProtocol


logger = logging.getLogger(__name__)


class ArtifactMatcher:
    """Correlate binary and map files by their exact stem.

    ``app.elf`` pairs with ``app.map`` and nothing else: stems are compared
    case-sensitively, and a binary without a map produces no candidate.
    """

    def __init__(
        self,
        workspace_root: Path,
        binary_extension: str = ".elf",
        map_extension: str = ".map",
        file_adapter: FileAdapterProtocol | None = None,
    ) -> None:
        self.workspace_root = workspace_root
        self.binary_extension = binary_extension
        self.map_extension = map_extension
        self.file_adapter = file_adapter or create_file_adapter()

    def pair_artifacts(self, directory: Path) -> list[Candidate]:
        """Return one candidate per binary in ``directory`` that has a map.

        Args:
            directory: Folder whose direct children are examined

        Returns:
            list[Candidate]: Pairs in binary file name order
        """
        try:
            files = self.file_adapter.list_files(directory)
        except FileSystemError as e:
            logger.debug("Failed to list files in %s: %s", directory, e)
            return []

        binaries = [f for f in files if f.name.endswith(self.binary_extension)]
        maps = {f.name: f for f in files if f.name.endswith(self.map_extension)}
        relative_folder = self.relative_folder(directory)

        candidates = []
        for binary in binaries:
            stem = binary.name[: -len(self.binary_extension)]
            map_file = maps.get(stem + self.map_extension)
            if map_file is None:
                logger.debug("No matching map for %s", binary)
                continue

            candidates.append(
                Candidate(
                    display_label=stem,
                    relative_folder=relative_folder,
                    binary_path=binary,
                    map_path=map_file,
                )
            )

        logger.debug("Paired %d artifact(s) in %s", len(candidates), directory)
        return candidates

    def relative_folder(self, directory: Path) -> str:
        """Path of ``directory`` relative to the workspace root."""
        try:
            return directory.relative_to(self.workspace_root).as_posix()
        except ValueError:
            return directory.as_posix()


def create_artifact_matcher(
    workspace_root: Path,
    binary_extension: str = ".elf",
    map_extension: str = ".map",
    file_adapter: FileAdapterProtocol | None = None,
) -> ArtifactMatcher:
    """Create an artifact matcher for folders under ``workspace_root``."""
    return ArtifactMatcher(
        workspace_root,
        binary_extension=binary_extension,
        map_extension=map_extension,
        file_adapter=file_adapter,
    )
