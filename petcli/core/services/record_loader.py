"""Builds a Dog record from the first line of a data file.

The expected line format is ``name,age,breed`` (e.g. ``Rex,5,Labrador``).
Fields are not trimmed or validated beyond what is needed to construct the
record: the age must parse as an integer and there must be at least three
fields. Anything after the third field is ignored.
"""

import asyncio
import logging

from petcli.domain.exceptions import FormatError
from petcli.domain.interfaces.file_system import FileSystem
from petcli.domain.models.animal import Dog
from petcli.domain.models.common import FileContent, FilePath

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
REQUIRED_FIELDS = 3


class RecordLoader:
    """Reads a data file through the FileSystem port and parses it into a Dog."""

    def __init__(self, file_system: FileSystem):
        """Initializes the RecordLoader.

        Args:
            file_system: An instance implementing the FileSystem interface.
        """
        self.file_system = file_system

    async def load_record(self, file_path: FilePath) -> Dog:
        """Reads ``file_path`` and returns the Dog described by its first line.

        Args:
            file_path: Path to the data file.

        Returns:
            The constructed Dog.

        Raises:
            FileNotFoundError: If the file does not exist.
            IOError: If the file cannot be read.
            FormatError: If the first line is missing or malformed.
        """
        logger.debug(f"Loading record from: {file_path}")
        content = await self.file_system.read_file(file_path)
        dog = parse_record(content)
        logger.info(f"Loaded record for '{dog.name}' from {file_path}")
        return dog

    def load_record_sync(self, file_path: FilePath) -> Dog:
        """Blocking variant of load_record for callers without an event loop."""
        return asyncio.run(self.load_record(file_path))


def parse_record(content: FileContent) -> Dog:
    """Parses the first line of ``content`` into a Dog.

    Raises:
        FormatError: If there is no first line, it has fewer than three
            comma-separated fields, or the age is not an integer.
    """
    lines = content.splitlines()
    if not lines:
        raise FormatError("Data file is empty; expected 'name,age,breed'")
    line = lines[0]

    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < REQUIRED_FIELDS:
        raise FormatError(
            f"Expected {REQUIRED_FIELDS} comma-separated fields 'name,age,breed', "
            f"got {len(parts)}: {line!r}",
            line=line,
        )

    name, age_text, breed = parts[:REQUIRED_FIELDS]
    try:
        age = int(age_text)
    except ValueError as e:
        raise FormatError(f"Age is not an integer: {age_text!r}", line=line) from e

    return Dog(name, age, breed)
