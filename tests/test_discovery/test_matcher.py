"""Tests for ArtifactMatcher."""

from pathlib import Path
from unittest.mock import Mock

from mapscope.core.errors import FileSystemError
from mapscope.discovery.matcher import ArtifactMatcher, create_artifact_matcher


class TestArtifactMatcher:
    """Test binary/map pairing within one folder."""

    def test_pairs_by_exact_stem(self, make_tree):
        workspace = make_tree(
            "build/app.elf", "build/app.map", "build/boot.elf", "build/boot.map"
        )

        matcher = create_artifact_matcher(workspace)
        candidates = matcher.pair_artifacts(workspace / "build")

        assert [c.display_label for c in candidates] == ["app", "boot"]
        assert candidates[0].binary_path == workspace / "build" / "app.elf"
        assert candidates[0].map_path == workspace / "build" / "app.map"
        assert all(c.relative_folder == "build" for c in candidates)

    def test_binary_without_map_is_dropped(self, make_tree):
        workspace = make_tree("build/a.elf", "build/b.map")

        matcher = create_artifact_matcher(workspace)

        assert matcher.pair_artifacts(workspace / "build") == []

    def test_stem_match_is_case_sensitive(self, make_tree):
        workspace = make_tree("build/App.elf", "build/app.map")

        matcher = create_artifact_matcher(workspace)

        assert matcher.pair_artifacts(workspace / "build") == []

    def test_multi_dot_stem(self, make_tree):
        workspace = make_tree("out/zmk.left.elf", "out/zmk.left.map")

        matcher = create_artifact_matcher(workspace)
        candidates = matcher.pair_artifacts(workspace / "out")

        assert len(candidates) == 1
        assert candidates[0].display_label == "zmk.left"

    def test_nested_relative_folder_uses_forward_slashes(self, make_tree):
        workspace = make_tree("build/zephyr/zephyr.elf", "build/zephyr/zephyr.map")

        matcher = create_artifact_matcher(workspace)
        candidates = matcher.pair_artifacts(workspace / "build" / "zephyr")

        assert candidates[0].relative_folder == "build/zephyr"
        assert str(candidates[0]) == "zephyr (build/zephyr)"

    def test_folder_outside_workspace_keeps_absolute_path(self, tmp_path: Path):
        matcher = ArtifactMatcher(tmp_path / "workspace")

        assert matcher.relative_folder(Path("/elsewhere/build")) == "/elsewhere/build"

    def test_listing_failure_yields_no_candidates(self, mock_file_adapter: Mock):
        mock_file_adapter.list_files.side_effect = FileSystemError("denied")

        matcher = ArtifactMatcher(Path("/ws"), file_adapter=mock_file_adapter)

        assert matcher.pair_artifacts(Path("/ws/build")) == []
        mock_file_adapter.list_files.assert_called_once_with(Path("/ws/build"))

    def test_extra_map_contributes_no_candidate(self, make_tree):
        workspace = make_tree("build/app.elf", "build/app.map", "build/other.map")

        matcher = create_artifact_matcher(workspace)
        candidates = matcher.pair_artifacts(workspace / "build")

        assert [c.display_label for c in candidates] == ["app"]

    def test_whitespace_in_names_is_preserved(self, make_tree):
        workspace = make_tree("build / app .elf", "build / app .map")

        matcher = create_artifact_matcher(workspace)
        candidates = matcher.pair_artifacts(workspace / "build ")

        assert len(candidates) == 1
        assert candidates[0].display_label == " app "
        assert candidates[0].relative_folder == "build "
        assert candidates[0].binary_path == workspace / "build " / " app .elf"
