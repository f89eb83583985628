"""Tests for the file backend."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from shardcache.errors.exceptions import (
    CacheIOError,
    PathDerivationError,
    ProvisioningError,
)
from shardcache.storage.paths import FilePath, FolderPath, StoragePath


class TestStoragePath:
    def test_folder_shape(self):
        assert StoragePath("/a/b/").is_folder
        assert not StoragePath("/a/b").is_folder

    def test_with_appended_is_verbatim(self):
        path = StoragePath("/cache/").with_appended("ab/cd.cache")
        assert path.as_str == "/cache/ab/cd.cache"

    def test_to_file(self):
        file = StoragePath("/nowhere/x.cache").to_file()
        assert isinstance(file, FilePath)
        assert file.as_str == "/nowhere/x.cache"

    def test_to_file_rejects_folder_shape(self):
        with pytest.raises(PathDerivationError) as exc_info:
            StoragePath("/cache/").to_file()
        assert exc_info.value.path == "/cache/"

    def test_to_file_rejects_existing_dir(self, tmp_path):
        with pytest.raises(PathDerivationError):
            StoragePath(str(tmp_path)).to_file()

    def test_to_file_rejects_file_ancestor(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"")
        with pytest.raises(PathDerivationError):
            StoragePath(f"{blocker}/abcd/rest.cache").to_file()

    def test_fspath(self, tmp_path):
        assert os.fspath(StoragePath(str(tmp_path))) == str(tmp_path)


class TestFolderPath:
    def test_of_adds_separator(self):
        assert FolderPath.of("/cache/folder").as_str == "/cache/folder/"

    def test_of_keeps_separator(self):
        assert FolderPath.of("/cache/folder/").as_str == "/cache/folder/"

    def test_of_empty_is_current_dir(self):
        assert FolderPath.of("").as_str == "./"
        assert FolderPath.of("") == FolderPath.of(Path(""))

    def test_requires_folder_shape(self):
        with pytest.raises(ValueError):
            FolderPath(StoragePath("/cache/folder"))

    def test_temp(self):
        folder = FolderPath.temp()
        assert folder.path.is_folder
        assert os.path.isdir(folder.as_str)

    def test_temp_failure(self):
        with patch("tempfile.mkdtemp", side_effect=PermissionError("read-only")):
            with pytest.raises(ProvisioningError) as exc_info:
                FolderPath.temp()
        assert isinstance(exc_info.value.original, PermissionError)
        assert isinstance(exc_info.value, CacheIOError)


class TestFilePath:
    def _file(self, tmp_path, name="sub/dir/entry.cache"):
        return StoragePath(f"{tmp_path}/{name}").to_file()

    def test_read_missing_returns_none(self, tmp_path):
        assert self._file(tmp_path).read_if_exists() is None

    def test_write_creates_parents(self, tmp_path):
        file = self._file(tmp_path)
        file.write_data(b"payload")
        assert (tmp_path / "sub" / "dir" / "entry.cache").read_bytes() == b"payload"
        assert file.read_if_exists() == b"payload"

    def test_write_replaces(self, tmp_path):
        file = self._file(tmp_path)
        file.write_data(b"long original content")
        file.write_data(b"short")
        assert file.read_if_exists() == b"short"

    def test_delete_if_exists(self, tmp_path):
        file = self._file(tmp_path)
        file.write_data(b"x")
        file.delete_if_exists()
        assert file.read_if_exists() is None

    def test_delete_missing_is_noop(self, tmp_path):
        self._file(tmp_path).delete_if_exists()

    def test_write_failure_wraps_os_error(self, tmp_path):
        file = self._file(tmp_path)
        with patch("builtins.open", side_effect=OSError(28, "No space left on device")):
            with pytest.raises(CacheIOError) as exc_info:
                file.write_data(b"x")
        assert exc_info.value.path == file.as_str
        assert exc_info.value.__cause__ is exc_info.value.original

    def test_read_directory_is_io_error(self, tmp_path):
        file = self._file(tmp_path)
        os.makedirs(file.as_str)
        with pytest.raises(CacheIOError):
            file.read_if_exists()
