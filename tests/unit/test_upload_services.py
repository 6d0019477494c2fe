"""Tests for upload services."""
import io
import os

import pytest

from cldpy.core.exceptions import PathError
from cldpy.core.upload.services import (
    FileValidator,
    FileReader,
    AsyncFileReader,
    discover_files,
)


class TestDiscoverFiles:
    """Test suite for discover_files."""

    def test_yields_every_file_once(self, asset_tree):
        """Test all files are found, directories are not."""
        found = list(discover_files(asset_tree))
        relative = [os.path.relpath(p, asset_tree) for p in found]

        assert sorted(relative) == sorted([
            'empty.txt',
            os.path.join('css', 'default.css'),
            os.path.join('images', 'logo.png'),
            os.path.join('images', 'icons', 'a.png'),
        ])
        assert len(set(found)) == len(found)

    def test_order_is_stable(self, asset_tree):
        """Test two walks yield the same sequence."""
        assert list(discover_files(asset_tree)) == list(discover_files(str(asset_tree)))

    def test_depth_first_sorted(self, asset_tree):
        relative = [os.path.relpath(p, asset_tree) for p in discover_files(asset_tree)]

        assert relative == [
            'empty.txt',
            os.path.join('css', 'default.css'),
            os.path.join('images', 'logo.png'),
            os.path.join('images', 'icons', 'a.png'),
        ]

    def test_lazy(self, asset_tree):
        """Test discovery is a generator."""
        walker = discover_files(asset_tree)

        assert next(walker).endswith('empty.txt')

    def test_empty_directory(self, tmp_path):
        assert list(discover_files(tmp_path)) == []

    def test_missing_directory(self, tmp_path):
        """Test unreadable roots raise PathError."""
        with pytest.raises(PathError):
            list(discover_files(tmp_path / "missing"))


class TestFileValidator:
    """Test suite for FileValidator."""

    @pytest.fixture
    def validator(self):
        """Create validator instance."""
        return FileValidator()

    def test_is_dir(self, validator, asset_tree):
        assert validator.is_dir(asset_tree)
        assert not validator.is_dir(asset_tree / "css" / "default.css")

    def test_missing_path(self, validator, tmp_path):
        """Test missing path raises PathError with the path."""
        missing = tmp_path / "nope.png"

        with pytest.raises(PathError) as exc_info:
            validator.is_dir(missing)

        assert exc_info.value.path == str(missing)

    def test_is_empty(self, validator, asset_tree):
        assert validator.is_empty(asset_tree / "empty.txt")
        assert not validator.is_empty(asset_tree / "images" / "logo.png")

    def test_missing_is_not_empty(self, validator, tmp_path):
        """Test missing paths are not treated as empty files."""
        assert not validator.is_empty(tmp_path / "virtual.png")


class TestFileReader:
    """Test suite for FileReader."""

    @pytest.fixture
    def reader(self):
        return FileReader()

    def test_read_file(self, reader, asset_tree):
        assert reader.read_payload(asset_tree / "css" / "default.css") == b"body { color: red; }"

    def test_read_bytes(self, reader):
        """Test given data wins over the path."""
        assert reader.read_payload("/does/not/exist", b"payload") == b"payload"

    def test_read_bytearray(self, reader):
        assert reader.read_payload("x", bytearray(b"abc")) == b"abc"

    def test_read_stream(self, reader):
        assert reader.read_payload("x", io.BytesIO(b"stream")) == b"stream"

    def test_text_stream_rejected(self, reader):
        with pytest.raises(PathError):
            reader.read_payload("x", io.StringIO("text"))

    def test_missing_file(self, reader, tmp_path):
        with pytest.raises(PathError):
            reader.read_payload(tmp_path / "missing.png")


class TestAsyncFileReader:
    """Test suite for AsyncFileReader."""

    @pytest.fixture
    def reader(self):
        """Create reader instance."""
        return AsyncFileReader()

    @pytest.mark.asyncio
    async def test_read_file(self, reader, asset_tree):
        """Test reading file content."""
        content = await reader.read_payload_async(asset_tree / "images" / "logo.png")

        assert content == b"\x89PNG fake logo"

    @pytest.mark.asyncio
    async def test_read_stream(self, reader):
        content = await reader.read_payload_async("x", io.BytesIO(b"stream"))

        assert content == b"stream"

    @pytest.mark.asyncio
    async def test_missing_file(self, reader, tmp_path):
        with pytest.raises(PathError):
            await reader.read_payload_async(tmp_path / "missing.png")
