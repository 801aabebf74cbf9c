"""Tests for ResolverConfig model validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mapscope.config.models import DEFAULT_SEARCH_FOLDERS, ResolverConfig


class TestResolverConfig:
    def test_defaults(self):
        config = ResolverConfig()

        assert config.binary_extension == ".elf"
        assert config.map_extension == ".map"
        assert config.search_folders == DEFAULT_SEARCH_FOLDERS
        assert config.search_folders == [
            "build",
            "Build",
            "Release",
            "Debug",
            "out",
            "output",
        ]
        assert config.debug is False
        assert config.case_sensitivity == "auto"

    def test_camel_case_aliases(self):
        config = ResolverConfig.model_validate(
            {
                "mapFilePath": "/fw/app.map",
                "binaryFilePath": "/fw/app.elf",
                "toolchainPath": "/opt/gcc",
            }
        )

        assert config.map_file_path == Path("/fw/app.map")
        assert config.binary_file_path == Path("/fw/app.elf")
        assert config.toolchain_path == Path("/opt/gcc")

    def test_elf_file_path_alias(self):
        config = ResolverConfig.model_validate({"elfFilePath": "/fw/app.elf"})

        assert config.binary_file_path == Path("/fw/app.elf")

    def test_empty_override_is_unset(self):
        config = ResolverConfig(map_file_path="", binary_file_path="   ")

        assert config.map_file_path is None
        assert config.binary_file_path is None

    def test_home_is_expanded(self):
        config = ResolverConfig(toolchain_path="~/toolchains/gcc")

        assert config.toolchain_path == Path.home() / "toolchains" / "gcc"

    def test_relative_override_is_kept_verbatim(self):
        config = ResolverConfig(map_file_path="build/app.map")

        assert config.map_file_path == Path("build/app.map")

    def test_extension_requires_leading_dot(self):
        with pytest.raises(ValidationError, match="Extension must start with"):
            ResolverConfig(binary_extension="elf")

    def test_extensions_must_differ(self):
        with pytest.raises(ValidationError, match="must differ"):
            ResolverConfig(binary_extension=".map")

    def test_overlapping_extensions_rejected(self):
        with pytest.raises(ValidationError, match="neither may end with the other"):
            ResolverConfig(binary_extension=".bin", map_extension=".map.bin")

    def test_search_folders_from_comma_string(self):
        config = ResolverConfig(search_folders="dist, bin ,")

        assert config.search_folders == ["dist", "bin"]

    def test_invalid_case_sensitivity(self):
        with pytest.raises(ValidationError):
            ResolverConfig(case_sensitivity="sometimes")


class TestWithOverrides:
    def test_none_keeps_configured_value(self):
        base = ResolverConfig(binary_extension=".axf")

        updated = base.with_overrides(binary_extension=None, map_extension=".lst")

        assert updated.binary_extension == ".axf"
        assert updated.map_extension == ".lst"
        assert base.map_extension == ".map"

    def test_invalid_override_raises(self):
        with pytest.raises(ValidationError):
            ResolverConfig().with_overrides(map_extension=".elf")
