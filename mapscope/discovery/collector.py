"""Candidate collection across prioritized search roots."""

import logging
from pathlib import Path

from mapscope.adapters import create_file_adapter
from mapscope.config.models import ResolverConfig
from mapscope.core.errors import NoBuildFolderFoundError, NoMatchingArtifactsError
from mapscope.discovery.case_policy import is_case_insensitive
from mapscope.discovery.matcher import create_artifact_matcher
from mapscope.discovery.walker import create_directory_walker
from mapscope.models.artifacts import Candidate, CollectionResult
from mapscope.protocols import FileAdapterProtocol


logger = logging.getLogger(__name__)


class CandidateCollector:
    """Find every binary/map pair under a workspace.

    Conventional build output folders (``search_folders``) are walked first,
    in priority order. Only when none of them yields a qualifying folder is
    the whole workspace walked. Both passes share one visited set.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        file_adapter: FileAdapterProtocol | None = None,
    ) -> None:
        self.config = config or ResolverConfig()
        self.file_adapter = file_adapter or create_file_adapter()

    def search_roots(self, workspace_root: Path) -> list[Path]:
        """Prioritized search roots that exist under ``workspace_root``."""
        roots = []
        for folder_name in self.config.search_folders:
            candidate = workspace_root / folder_name
            if self.file_adapter.is_dir(candidate):
                roots.append(candidate)
            else:
                logger.debug("Search root not present: %s", candidate)
        return roots

    def find_build_folders(self, workspace_root: Path) -> list[Path]:
        """Folders holding both artifact kinds, deduplicated, in encounter order."""
        case_insensitive = is_case_insensitive(
            workspace_root, self.config.case_sensitivity
        )
        logger.debug(
            "Scanning workspace folder %s (case-insensitive=%s)",
            workspace_root,
            case_insensitive,
        )

        walker = create_directory_walker(
            binary_extension=self.config.binary_extension,
            map_extension=self.config.map_extension,
            case_insensitive=case_insensitive,
            file_adapter=self.file_adapter,
        )

        for root in self.search_roots(workspace_root):
            walker.find_matching_folders(root)

        if not walker.found_folders:
            logger.debug(
                "No build folders in prioritized roots, walking %s", workspace_root
            )
            walker.find_matching_folders(workspace_root)

        return walker.found_folders

    def collect(self, workspace_root: Path) -> CollectionResult:
        """Walk the workspace and pair artifacts in every qualifying folder."""
        folders = self.find_build_folders(workspace_root)

        matcher = create_artifact_matcher(
            workspace_root,
            binary_extension=self.config.binary_extension,
            map_extension=self.config.map_extension,
            file_adapter=self.file_adapter,
        )
        candidates = [
            candidate for folder in folders for candidate in matcher.pair_artifacts(folder)
        ]

        logger.debug(
            "Collected %d candidate(s) from %d folder(s)", len(candidates), len(folders)
        )
        return CollectionResult(folders=folders, candidates=candidates)

    def collect_candidates(self, workspace_root: Path) -> list[Candidate]:
        """Like :meth:`collect` but fail when nothing usable was found.

        Raises:
            NoBuildFolderFoundError: No folder holds both extensions
            NoMatchingArtifactsError: Folders were found but no stems match
        """
        result = self.collect(workspace_root)
        binary_ext = self.config.binary_extension
        map_ext = self.config.map_extension

        if not result.folders:
            raise NoBuildFolderFoundError(
                f"No build folders containing both {map_ext} and {binary_ext} found",
                context={"workspace_root": str(workspace_root)},
            )
        if not result.candidates:
            raise NoMatchingArtifactsError(
                f"No matching {binary_ext} and {map_ext} files found",
                context={
                    "workspace_root": str(workspace_root),
                    "folders": [str(folder) for folder in result.folders],
                },
            )
        return result.candidates


def create_candidate_collector(
    config: ResolverConfig | None = None,
    file_adapter: FileAdapterProtocol | None = None,
) -> CandidateCollector:
    """Create a candidate collector instance.

    Args:
        config: Resolver settings (extensions, search folders, case policy)
        file_adapter: File operations adapter

    Returns:
        CandidateCollector: New collector instance
    """
    return CandidateCollector(config, file_adapter)
