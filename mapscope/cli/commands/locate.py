"""Locate command: resolve the binary and map to analyze."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from mapscope.cli.app import AppContext
from mapscope.cli.decorators import handle_errors
from mapscope.cli.helpers import ConsoleNotifier, PromptChooser, print_resolved_paths
from mapscope.cli.helpers.parameters import (
    BinaryExtensionOption,
    CaseSensitivityOption,
    MapExtensionOption,
    OutputFormatOption,
    SearchFolderOption,
    WorkspaceArgument,
)
from mapscope.cli.helpers.theme import get_themed_console
from mapscope.config.models import ResolverConfig
from mapscope.core.errors import ConfigError
from mapscope.discovery import create_artifact_resolver, first_candidate_chooser
from mapscope.protocols import WorkspaceProvider


logger = logging.getLogger(__name__)


def build_resolver_config(base: ResolverConfig, **overrides: Any) -> ResolverConfig:
    """Apply command line overrides on top of the configured resolver settings.

    Options left as None keep the configured value.

    Raises:
        ConfigError: If the combined settings are invalid
    """
    try:
        return base.with_overrides(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid option: {e}") from e


def workspace_provider_for(workspace: Path | None) -> WorkspaceProvider:
    """Workspace provider for the WORKSPACE argument (default: cwd)."""

    def provide() -> Path | None:
        root = (workspace or Path.cwd()).expanduser().resolve()
        if not root.is_dir():
            logger.warning("Workspace is not a directory: %s", root)
            return None
        return root

    return provide


@handle_errors
def locate(
    ctx: typer.Context,
    workspace: WorkspaceArgument = None,
    binary: Annotated[
        Path | None,
        typer.Option("--binary", "-b", help="Explicit binary file (needs --map too)"),
    ] = None,
    map_file: Annotated[
        Path | None,
        typer.Option("--map", "-m", help="Explicit map file (needs --binary too)"),
    ] = None,
    toolchain: Annotated[
        Path | None,
        typer.Option("--toolchain", "-t", help="Toolchain installation directory"),
    ] = None,
    binary_ext: BinaryExtensionOption = None,
    map_ext: MapExtensionOption = None,
    search_folder: SearchFolderOption = None,
    case_sensitivity: CaseSensitivityOption = None,
    first: Annotated[
        bool,
        typer.Option(
            "--first",
            help="Do not prompt; take the first build found when several exist",
        ),
    ] = False,
    output_format: OutputFormatOption = "text",
) -> None:
    """Locate the build binary and its linker map.

    \b
    Explicit --binary/--map paths (or mapFilePath/binaryFilePath in the
    configuration) are used as-is when both are readable. Otherwise the
    workspace is searched, conventional output folders first. When several
    builds are found you are asked to choose one.

    \b
    Examples:
        mapscope locate
        mapscope locate ~/src/firmware --output-format json
        mapscope locate --binary-ext .axf --first
    """
    app_ctx: AppContext = ctx.obj
    themed_console = get_themed_console(app_ctx.icon_mode)

    config = build_resolver_config(
        app_ctx.user_config.resolver,
        binary_file_path=binary,
        map_file_path=map_file,
        toolchain_path=toolchain,
        binary_extension=binary_ext,
        map_extension=map_ext,
        search_folders=search_folder or None,
        case_sensitivity=case_sensitivity,
    )

    resolver = create_artifact_resolver(
        config=config,
        workspace_provider=workspace_provider_for(workspace),
        chooser=first_candidate_chooser if first else PromptChooser(themed_console),
        notifier=ConsoleNotifier(themed_console),
    )
    result = resolver.resolve()

    print_resolved_paths(result, output_format, app_ctx.icon_mode)
