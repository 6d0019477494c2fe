"""
File discovery, validation and reading services.

Single Responsibility: Each class handles one specific task.
"""
import os
import stat
from pathlib import Path
from typing import Iterator, Optional, Union, BinaryIO

import aiofiles

from ...exceptions import PathError
from ...logging import get_logger


Payload = Union[bytes, bytearray, memoryview, BinaryIO]


def discover_files(root: Union[str, Path]) -> Iterator[str]:
    """
    Lazily yield every file below a directory.

    Depth first, files only. Directory entries are not yielded themselves
    and symlinked directories are not followed. Names are visited in
    sorted order so that each call yields the same sequence.

    Args:
        root: Directory to walk

    Yields:
        File paths (joined onto root)

    Raises:
        PathError: If a directory cannot be listed
    """
    def _raise(error: OSError):
        raise PathError(f"Cannot walk {error.filename}: {error.strerror}", path=error.filename) from error

    for dirpath, dirnames, filenames in os.walk(os.fspath(root), onerror=_raise):
        dirnames.sort()
        for filename in sorted(filenames):
            yield os.path.join(dirpath, filename)


class FileValidator:
    """
    Validates local paths before upload.

    Responsibilities:
    - Check path existence
    - Tell files from directories
    - Get file size
    """

    def stat(self, file_path: Union[str, Path]) -> os.stat_result:
        """
        Stat a path.

        Raises:
            PathError: If the path does not exist or cannot be accessed
        """
        try:
            return os.stat(file_path)
        except OSError as e:
            raise PathError(f"Cannot access {file_path}: {e.strerror}", path=os.fspath(file_path)) from e

    def is_dir(self, file_path: Union[str, Path]) -> bool:
        """True if path is a directory."""
        return stat.S_ISDIR(self.stat(file_path).st_mode)

    def is_empty(self, file_path: Union[str, Path]) -> bool:
        """
        True if path is an existing zero-byte file.

        Missing paths are not empty: content may come from a stream.
        """
        try:
            return os.path.getsize(file_path) == 0
        except OSError:
            return False


class FileReader:
    """Reads whole payloads into memory."""

    def __init__(self):
        """Initialize file reader."""
        self._logger = get_logger('cldpy.upload.file')

    def read_payload(self, file_path: Union[str, Path], data: Optional[Payload] = None) -> bytes:
        """
        Read upload content.

        Args:
            file_path: Path to read when no data is given
            data: Bytes or a binary file object to read instead

        Returns:
            Content bytes

        Raises:
            PathError: If the file cannot be read
        """
        if data is not None:
            return self._read_stream(data)
        try:
            with open(file_path, 'rb') as f:
                content = f.read()
        except OSError as e:
            raise PathError(f"Cannot read {file_path}: {e.strerror}", path=os.fspath(file_path)) from e
        self._logger.debug(f"Read {file_path} ({len(content)} bytes)")
        return content

    @staticmethod
    def _read_stream(data: Payload) -> bytes:
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        content = data.read()
        if isinstance(content, str):
            raise PathError("Stream must be opened in binary mode")
        return content


class AsyncFileReader(FileReader):
    """
    Asynchronous file reader.

    Uses aiofiles for non-blocking I/O operations.
    """

    async def read_payload_async(self, file_path: Union[str, Path], data: Optional[Payload] = None) -> bytes:
        """
        Read upload content without blocking the event loop.

        Args:
            file_path: Path to read when no data is given
            data: Bytes or a binary file object to read instead

        Returns:
            Content bytes

        Raises:
            PathError: If the file cannot be read
        """
        if data is not None:
            return self._read_stream(data)
        try:
            async with aiofiles.open(file_path, 'rb') as f:
                content = await f.read()
        except OSError as e:
            raise PathError(f"Cannot read {file_path}: {e.strerror}", path=os.fspath(file_path)) from e
        self._logger.debug(f"Read {file_path} ({len(content)} bytes)")
        return content
