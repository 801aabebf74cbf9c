"""Tests for DirectoryWalker."""

import os
import sys
from pathlib import Path

import pytest

from mapscope.discovery.walker import DirectoryWalker, create_directory_walker


class TestDirectoryWalker:
    """Test folder qualification and traversal order."""

    def test_folder_with_both_extensions_qualifies(self, make_tree):
        workspace = make_tree("build/app.elf", "build/app.map")

        walker = create_directory_walker()
        found = walker.find_matching_folders(workspace)

        assert found == [workspace / "build"]

    def test_folder_with_only_one_extension_does_not_qualify(self, make_tree):
        workspace = make_tree("bin/app.elf", "maps/app.map")

        walker = create_directory_walker()

        assert walker.find_matching_folders(workspace) == []

    def test_parent_does_not_inherit_child_artifacts(self, make_tree):
        """Artifacts deeper in the tree never qualify an ancestor."""
        workspace = make_tree("out/app.elf", "out/sub/app.map", "out/sub/app.elf")

        walker = create_directory_walker()
        found = walker.find_matching_folders(workspace)

        assert found == [workspace / "out" / "sub"]

    def test_map_only_in_subdirectory_does_not_qualify(self, make_tree):
        workspace = make_tree("build/app.elf", "build/sub/app.map")

        walker = create_directory_walker()

        assert walker.find_matching_folders(workspace) == []

    def test_mismatched_stems_still_qualify_folder(self, make_tree):
        workspace = make_tree("build/a.elf", "build/b.map")

        walker = create_directory_walker()

        assert walker.find_matching_folders(workspace) == [workspace / "build"]

    def test_folders_recorded_after_their_subtree(self, make_tree):
        workspace = make_tree(
            "build/app.elf",
            "build/app.map",
            "build/zephyr/zephyr.elf",
            "build/zephyr/zephyr.map",
            "build/alpha/boot.elf",
            "build/alpha/boot.map",
        )

        walker = create_directory_walker()
        found = walker.find_matching_folders(workspace / "build")

        assert found == [
            workspace / "build" / "alpha",
            workspace / "build" / "zephyr",
            workspace / "build",
        ]

    def test_custom_extensions(self, make_tree):
        workspace = make_tree("build/app.axf", "build/app.lst", "other/app.elf")
        (workspace / "other" / "app.map").write_text("")

        walker = create_directory_walker(binary_extension=".axf", map_extension=".lst")

        assert walker.find_matching_folders(workspace) == [workspace / "build"]

    def test_file_counts_as_one_artifact_kind_only(self, make_tree):
        workspace = make_tree("build/app.map.bin")

        walker = create_directory_walker(
            binary_extension=".bin", map_extension=".map.bin"
        )

        assert walker.find_matching_folders(workspace) == []

    def test_walk_of_missing_root_finds_nothing(self, tmp_path: Path):
        walker = create_directory_walker()

        assert walker.find_matching_folders(tmp_path / "missing") == []


class TestDirectoryWalkerVisitedSet:
    """Test that aliased directories are walked and recorded once."""

    def test_second_walk_of_same_root_adds_nothing(self, make_tree):
        workspace = make_tree("build/app.elf", "build/app.map")
        walker = create_directory_walker()

        first = walker.find_matching_folders(workspace)
        second = walker.find_matching_folders(workspace)

        assert first == [workspace / "build"]
        assert second == []
        assert walker.found_folders == [workspace / "build"]

    def test_nested_roots_do_not_duplicate(self, make_tree):
        workspace = make_tree("build/app.elf", "build/app.map")
        walker = create_directory_walker()

        walker.find_matching_folders(workspace / "build")
        walker.find_matching_folders(workspace)

        assert walker.found_folders == [workspace / "build"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinked_directory_is_visited_once(
        self, make_tree, recording_file_adapter
    ):
        workspace = make_tree("build/app.elf", "build/app.map")
        (workspace / "link").symlink_to(workspace / "build", target_is_directory=True)
        adapter = recording_file_adapter()

        walker = DirectoryWalker(file_adapter=adapter)
        found = walker.find_matching_folders(workspace)

        assert len(found) == 1
        real_build = Path(os.path.realpath(workspace / "build"))
        listed_real = [Path(os.path.realpath(p)) for p in adapter.listed]
        assert listed_real.count(real_build) == 1

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_cycle_terminates(self, make_tree):
        workspace = make_tree("build/app.elf", "build/app.map")
        (workspace / "build" / "loop").symlink_to(
            workspace, target_is_directory=True
        )

        walker = create_directory_walker()
        found = walker.find_matching_folders(workspace)

        assert found == [workspace / "build"]

    def test_case_insensitive_identity_folds_case(self, make_tree):
        workspace = make_tree("build/app.elf", "build/app.map")
        walker = create_directory_walker(case_insensitive=True)

        key = walker.identity_key(workspace / "build")

        assert key == key.lower()
        assert key == walker.identity_key(workspace / "build")

    def test_case_sensitive_identity_keeps_case(self, tmp_path: Path):
        directory = tmp_path / "Build"
        directory.mkdir()
        walker = create_directory_walker(case_insensitive=False)

        assert walker.identity_key(directory).endswith("Build")


class TestDirectoryWalkerAccessFailures:
    """Test that unreadable folders are skipped silently."""

    def test_unlistable_folder_is_skipped(self, make_tree, recording_file_adapter):
        workspace = make_tree(
            "locked/app.elf",
            "locked/app.map",
            "open/app.elf",
            "open/app.map",
        )
        adapter = recording_file_adapter(denied={workspace / "locked"})

        walker = DirectoryWalker(file_adapter=adapter)
        found = walker.find_matching_folders(workspace)

        assert found == [workspace / "open"]

    def test_unlistable_root_yields_nothing(self, make_tree, recording_file_adapter):
        workspace = make_tree("app.elf", "app.map")
        adapter = recording_file_adapter(denied={workspace})

        walker = DirectoryWalker(file_adapter=adapter)

        assert walker.find_matching_folders(workspace) == []


class DeepTreeAdapter:
    """Serve a single chain of nested ``d`` folders without touching disk."""

    def __init__(self, root: Path, depth: int) -> None:
        self.root = root
        self.depth = depth

    def real_path(self, path: Path) -> Path:
        return path

    def is_dir(self, path: Path) -> bool:
        return path == self.root or path.name == "d"

    def list_directory(self, path: Path) -> list[Path]:
        if len(path.parts) - len(self.root.parts) < self.depth:
            return [path / "d"]
        return [path / "app.elf", path / "app.map"]


class TestDirectoryWalkerDepth:
    def test_very_deep_tree_is_walked(self):
        root = Path("/ws")
        depth = sys.getrecursionlimit() + 500
        adapter = DeepTreeAdapter(root, depth)

        walker = DirectoryWalker(file_adapter=adapter)  # type: ignore[arg-type]
        found = walker.find_matching_folders(root)

        assert len(found) == 1
        assert len(found[0].parts) - len(root.parts) == depth
        assert found[0].name == "d"
