"""Concrete implementation of the FileSystem interface for the local disk.

Uses `pathlib` for path checks and `aiofiles` for async I/O.
"""

import logging
from pathlib import Path

import aiofiles

from petcli.domain.interfaces.file_system import FileSystem
from petcli.domain.models.common import FileContent, FilePath

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystem):
    """Implementation of FileSystem for the local disk."""

    def __init__(self, encoding: str = "utf-8"):
        """Initializes the LocalFileSystem adapter.

        Args:
            encoding: Text encoding used when reading files.
        """
        self.encoding = encoding
        logger.debug("LocalFileSystem initialized.")

    async def read_file(self, file_path: FilePath) -> FileContent:
        """Reads file content asynchronously using aiofiles."""
        path = Path(file_path)
        logger.debug(f"Attempting to read file: {path}")
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            async with aiofiles.open(path, mode='r', encoding=self.encoding) as f:
                content = await f.read()
            logger.debug(f"Successfully read {len(content)} characters from {path}")
            return FileContent(content)
        except PermissionError as e:
            logger.error(f"Permission denied reading file: {path}")
            raise PermissionError(f"Permission denied: {file_path}") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading file {path}: {e}", exc_info=True)
            raise IOError(f"Failed to read file {file_path}: {e}") from e
