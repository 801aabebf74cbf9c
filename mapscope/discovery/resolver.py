"""Entry point for locating a binary and its linker map."""

import logging
from pathlib import Path

from mapscope.adapters import create_file_adapter
from mapscope.config.models import ResolverConfig
from mapscope.core.errors import NoWorkspaceError
from mapscope.core.logging import debug_verbosity
from mapscope.discovery.collector import create_candidate_collector
from mapscope.discovery.path_validator import create_path_validator
from mapscope.discovery.selector import create_selector
from mapscope.models.artifacts import ResolvedPaths
from mapscope.protocols import (
    CandidateChooser,
    FileAdapterProtocol,
    NotifierProtocol,
    WorkspaceProvider,
)


logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Notifier that routes notices to the log."""

    def info(self, message: str) -> None:
        logger.info(message)

    def warning(self, message: str) -> None:
        logger.warning(message)


def _no_workspace() -> Path | None:
    return None


class ArtifactResolver:
    """Resolve the build artifacts a downstream analyzer should consume.

    Explicitly configured binary and map paths win whenever both are
    readable; no directory is listed in that case. Otherwise the workspace
    is searched, and ties are settled by the chooser. An optional toolchain
    path is validated on its own and never fails the resolution.

    Each call to :meth:`resolve` is a fresh, synchronous search. Calls must
    not overlap.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        workspace_provider: WorkspaceProvider | None = None,
        chooser: CandidateChooser | None = None,
        notifier: NotifierProtocol | None = None,
        file_adapter: FileAdapterProtocol | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            config: Resolver settings, including the explicit overrides
            workspace_provider: Returns the workspace root or None
            chooser: Picks one of several candidates, None means cancelled
            notifier: Receives toolchain notices
            file_adapter: File operations adapter
        """
        self.config = config or ResolverConfig()
        self.workspace_provider = workspace_provider or _no_workspace
        self.notifier = notifier or LoggingNotifier()
        self.file_adapter = file_adapter or create_file_adapter()
        self.path_validator = create_path_validator(self.file_adapter)
        self.collector = create_candidate_collector(self.config, self.file_adapter)
        self.selector = create_selector(chooser)

    def resolve(self) -> ResolvedPaths:
        """Locate the binary/map pair to analyze.

        Returns:
            ResolvedPaths: Selected binary, map and optional toolchain

        Raises:
            NoWorkspaceError: No valid override pair and no workspace root
            NoBuildFolderFoundError: No folder holds both artifact kinds
            NoMatchingArtifactsError: No binary/map stem pair was found
            SelectionCancelledError: The user dismissed the selection
        """
        with debug_verbosity(self.config.debug):
            return self._resolve()

    def _resolve(self) -> ResolvedPaths:
        map_override = self.config.map_file_path
        binary_override = self.config.binary_file_path
        logger.debug("Resolving build paths...")
        logger.debug("Custom map: %s", map_override)
        logger.debug("Custom binary: %s", binary_override)

        if (
            map_override is not None
            and binary_override is not None
            and self.path_validator.exists_and_readable(map_override)
            and self.path_validator.exists_and_readable(binary_override)
        ):
            logger.debug("Using custom paths from settings")
            return ResolvedPaths(
                map_path=map_override,
                binary_path=binary_override,
                toolchain_path=self.resolve_toolchain(),
            )

        workspace_root = self.workspace_provider()
        if workspace_root is None:
            raise NoWorkspaceError("No workspace folder open")

        candidates = self.collector.collect_candidates(workspace_root)
        selected = self.selector.select(candidates)

        return ResolvedPaths(
            map_path=selected.map_path,
            binary_path=selected.binary_path,
            toolchain_path=self.resolve_toolchain(),
        )

    def resolve_toolchain(self) -> Path | None:
        """Return the configured toolchain path when it is usable."""
        toolchain = self.config.toolchain_path
        if toolchain is None:
            return None

        if self.path_validator.exists_and_readable(toolchain):
            logger.debug("Using toolchain: %s", toolchain)
            self.notifier.info(f"Using toolchain from {toolchain}")
            return toolchain

        logger.debug("Toolchain path not found: %s", toolchain)
        self.notifier.warning(f"toolchainPath not found: {toolchain}")
        return None


def create_artifact_resolver(
    config: ResolverConfig | None = None,
    workspace_provider: WorkspaceProvider | None = None,
    chooser: CandidateChooser | None = None,
    notifier: NotifierProtocol | None = None,
    file_adapter: FileAdapterProtocol | None = None,
) -> ArtifactResolver:
    """Create an artifact resolver instance.

    Args:
        config: Resolver settings
        workspace_provider: Returns the workspace root or None
        chooser: Picks one of several candidates
        notifier: Receives toolchain notices
        file_adapter: File operations adapter

    Returns:
        ArtifactResolver: New resolver instance
    """
    return ArtifactResolver(
        config=config,
        workspace_provider=workspace_provider,
        chooser=chooser,
        notifier=notifier,
        file_adapter=file_adapter,
    )
