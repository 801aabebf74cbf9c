"""Tests for PathValidator."""

from pathlib import Path
from unittest.mock import Mock

from mapscope.discovery.path_validator import PathValidator, create_path_validator


class TestPathValidator:
    def test_existing_file_is_readable(self, tmp_path: Path):
        target = tmp_path / "app.elf"
        target.write_text("")

        assert create_path_validator().exists_and_readable(target) is True

    def test_existing_directory_is_readable(self, tmp_path: Path):
        assert create_path_validator().exists_and_readable(tmp_path) is True

    def test_missing_path_is_not_readable(self, tmp_path: Path):
        assert create_path_validator().exists_and_readable(tmp_path / "nope") is False

    def test_none_and_empty_are_not_readable(self):
        validator = create_path_validator()

        assert validator.exists_and_readable(None) is False
        assert validator.exists_and_readable("") is False

    def test_access_denied_is_not_readable(self, mock_file_adapter: Mock):
        mock_file_adapter.is_readable.return_value = False

        validator = PathValidator(mock_file_adapter)

        assert validator.exists_and_readable("/secret/app.map") is False
        mock_file_adapter.is_readable.assert_called_once_with(Path("/secret/app.map"))
