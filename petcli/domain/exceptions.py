"""Errors raised by the petcli domain.

File access problems are reported with the builtin FileNotFoundError,
PermissionError and IOError, raised by the file system adapter.
"""

from typing import Optional


class PetCliError(Exception):
    """Base class for petcli's own errors."""


class FormatError(PetCliError, ValueError):
    """The data file's first line is not a valid `name,age,breed` record."""

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line
