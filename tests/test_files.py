"""
Tests for directory creation and atomic writes.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from stickersync.exceptions import FileSystemError
from stickersync.sync.files import ensure_parent_dirs_exist, write_bytes_atomic

pytestmark = pytest.mark.unit


class TestEnsureParentDirsExist:
    """Test ensure_parent_dirs_exist."""

    def test_creates_deep_chain(self, tmp_path):
        target = tmp_path / "a" / "b" / "c" / "d" / "file.png"

        ensure_parent_dirs_exist(target)

        assert (tmp_path / "a" / "b" / "c" / "d").is_dir()
        assert not target.exists()

    def test_noop_when_parent_exists(self, tmp_path):
        target = tmp_path / "file.png"
        with patch.object(Path, "mkdir") as mock_mkdir:
            ensure_parent_dirs_exist(target)
        mock_mkdir.assert_not_called()

    def test_idempotent(self, tmp_path):
        target = tmp_path / "x" / "y" / "file.png"
        ensure_parent_dirs_exist(target)
        ensure_parent_dirs_exist(target)
        assert target.parent.is_dir()

    def test_accepts_string_paths(self, tmp_path):
        target = os.path.join(str(tmp_path), "s", "file.png")
        ensure_parent_dirs_exist(target)
        assert os.path.isdir(os.path.join(str(tmp_path), "s"))

    def test_deep_chain_does_not_recurse(self, tmp_path):
        parts = [f"d{i}" for i in range(200)]
        target = tmp_path.joinpath(*parts, "file.png")

        ensure_parent_dirs_exist(target)

        assert target.parent.is_dir()

    def test_file_in_ancestor_chain_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(FileSystemError) as exc_info:
            ensure_parent_dirs_exist(blocker / "child" / "file.png")

        assert exc_info.value.path == str(blocker)

    def test_parent_is_file_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(FileSystemError):
            ensure_parent_dirs_exist(blocker / "file.png")

    def test_mkdir_failure_wrapped(self, tmp_path):
        target = tmp_path / "denied" / "file.png"
        with patch.object(Path, "mkdir", side_effect=PermissionError("denied")):
            with pytest.raises(FileSystemError) as exc_info:
                ensure_parent_dirs_exist(target)
        assert "denied" in str(exc_info.value)

    def test_concurrently_created_directory_is_fine(self, tmp_path):
        target = tmp_path / "race" / "file.png"
        real_mkdir = Path.mkdir

        def mkdir_then_conflict(self, *args, **kwargs):
            real_mkdir(self, *args, **kwargs)
            raise FileExistsError(str(self))

        with patch.object(Path, "mkdir", mkdir_then_conflict):
            ensure_parent_dirs_exist(target)

        assert target.parent.is_dir()


@pytest.mark.asyncio
class TestWriteBytesAtomic:
    """Test write_bytes_atomic."""

    async def test_writes_new_file(self, tmp_path):
        target = tmp_path / "aqua.png"

        await write_bytes_atomic(target, b"image")

        assert target.read_bytes() == b"image"

    async def test_replaces_existing_file(self, tmp_path):
        target = tmp_path / "aqua.png"
        target.write_bytes(b"old")

        await write_bytes_atomic(str(target), b"new")

        assert target.read_bytes() == b"new"

    async def test_leaves_no_temp_files(self, tmp_path):
        target = tmp_path / "aqua.png"

        await write_bytes_atomic(target, b"image")

        assert [p.name for p in tmp_path.iterdir()] == ["aqua.png"]

    async def test_failed_replace_keeps_previous_content(self, tmp_path):
        target = tmp_path / "aqua.png"
        target.write_bytes(b"old")

        with patch.object(Path, "replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                await write_bytes_atomic(target, b"new")

        assert target.read_bytes() == b"old"
        assert [p.name for p in tmp_path.iterdir()] == ["aqua.png"]

    async def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(OSError):
            await write_bytes_atomic(tmp_path / "missing" / "aqua.png", b"x")
