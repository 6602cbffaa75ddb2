"""Interface for reading from the file system.

Keeps the record loader independent of where and how the data file is read.
"""

import abc

from petcli.domain.models.common import FileContent, FilePath


class FileSystem(abc.ABC):
    """Abstract Base Class for file system operations."""

    @abc.abstractmethod
    async def read_file(self, file_path: FilePath) -> FileContent:
        """Reads the entire content of a file asynchronously.

        The underlying handle is released before returning, on both the
        success and failure paths.

        Args:
            file_path: The path to the file to read.

        Returns:
            The content of the file as a string.

        Raises:
            FileNotFoundError: If the file does not exist.
            PermissionError: If read permissions are denied.
            IOError: For other file system errors.
        """
        pass
