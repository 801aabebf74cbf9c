"""Scan command: list every build artifact pair in a workspace."""

import typer

from mapscope.cli.app import AppContext
from mapscope.cli.commands.locate import build_resolver_config, workspace_provider_for
from mapscope.cli.decorators import handle_errors
from mapscope.cli.helpers import print_candidates
from mapscope.cli.helpers.parameters import (
    BinaryExtensionOption,
    CaseSensitivityOption,
    MapExtensionOption,
    OutputFormatOption,
    SearchFolderOption,
    WorkspaceArgument,
)
from mapscope.core.errors import NoWorkspaceError
from mapscope.discovery import create_candidate_collector


@handle_errors
def scan(
    ctx: typer.Context,
    workspace: WorkspaceArgument = None,
    binary_ext: BinaryExtensionOption = None,
    map_ext: MapExtensionOption = None,
    search_folder: SearchFolderOption = None,
    case_sensitivity: CaseSensitivityOption = None,
    output_format: OutputFormatOption = "text",
) -> None:
    """List every binary/map pair the locate command would offer.

    Explicit override paths are ignored; this always searches the workspace.

    \b
    Examples:
        mapscope scan
        mapscope scan ~/src/firmware --output-format json
    """
    app_ctx: AppContext = ctx.obj

    config = build_resolver_config(
        app_ctx.user_config.resolver,
        binary_extension=binary_ext,
        map_extension=map_ext,
        search_folders=search_folder or None,
        case_sensitivity=case_sensitivity,
    )

    workspace_root = workspace_provider_for(workspace)()
    if workspace_root is None:
        raise NoWorkspaceError("No workspace folder open")

    collector = create_candidate_collector(config)
    candidates = collector.collect_candidates(workspace_root)

    print_candidates(candidates, output_format, app_ctx.icon_mode)
