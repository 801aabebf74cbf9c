"""Core test fixtures for the mapscope project."""

import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner

from mapscope.adapters import FileSystemAdapter
from mapscope.core.errors import FileSystemError
from mapscope.core.logging import DISCOVERY_LOGGER_NAME
from mapscope.models.artifacts import Candidate
from mapscope.protocols import FileAdapterProtocol


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_file_adapter() -> Mock:
    """Create a mock file adapter for testing."""
    adapter = Mock(spec=FileAdapterProtocol)
    return adapter


@pytest.fixture
def mock_config_adapter() -> Mock:
    """Create a mock config file adapter that finds no file."""
    adapter = Mock()
    adapter.search_config_files.return_value = ({}, None)
    return adapter


# ---- Test Isolation Fixtures ----


@pytest.fixture
def clean_environment() -> Generator[None, None, None]:
    """Remove MAPSCOPE_ environment variables for the duration of a test."""
    clean_env = {k: v for k, v in os.environ.items() if not k.startswith("MAPSCOPE_")}
    with patch.dict(os.environ, clean_env, clear=True):
        yield


@pytest.fixture
def host_discovery_level() -> Generator[logging.Logger, None, None]:
    """Set the discovery logger to ERROR as a host application would."""
    discovery_logger = logging.getLogger(DISCOVERY_LOGGER_NAME)
    level = discovery_logger.level
    discovery_logger.setLevel(logging.ERROR)
    yield discovery_logger
    discovery_logger.setLevel(level)


@pytest.fixture
def isolated_cli_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run CLI tests from an empty directory with no user configuration."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    for key in list(os.environ):
        if key.startswith("MAPSCOPE_"):
            monkeypatch.delenv(key)

    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    yield cwd

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.WARNING)


# ---- Build Tree Fixtures ----


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create files under a fresh workspace from relative paths.

    Usage:
        def test_walk(make_tree):
            workspace = make_tree("build/app.elf", "build/app.map")
    """

    def _make_tree(*relative_paths: str) -> Path:
        workspace = tmp_path / "workspace"
        workspace.mkdir(exist_ok=True)
        for relative_path in relative_paths:
            file_path = workspace / relative_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text("")
        return workspace

    return _make_tree


@pytest.fixture
def make_candidate() -> Callable[..., Candidate]:
    """Factory for Candidate instances."""

    def _make_candidate(label: str = "app", folder: str = "build") -> Candidate:
        return Candidate(
            display_label=label,
            relative_folder=folder,
            binary_path=Path("/ws") / folder / f"{label}.elf",
            map_path=Path("/ws") / folder / f"{label}.map",
        )

    return _make_candidate


class RecordingFileAdapter(FileSystemAdapter):
    """Real file adapter that records listings and can deny chosen folders."""

    def __init__(self, denied: set[Path] | None = None) -> None:
        self.denied = {Path(os.path.realpath(p)) for p in denied or set()}
        self.listed: list[Path] = []

    def list_directory(self, path: Path) -> list[Path]:
        self.listed.append(path)
        if Path(os.path.realpath(path)) in self.denied:
            raise FileSystemError(
                f"Permission denied: {path}", context={"file_path": str(path)}
            )
        return super().list_directory(path)


@pytest.fixture
def recording_file_adapter() -> Callable[..., RecordingFileAdapter]:
    """Factory for a file adapter that records and optionally denies listings."""

    def _factory(denied: set[Path] | None = None) -> RecordingFileAdapter:
        return RecordingFileAdapter(denied)

    return _factory
