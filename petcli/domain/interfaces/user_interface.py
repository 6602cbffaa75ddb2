"""Interface for writing program output to the user.

Defines the contract the records and services use to emit their lines,
allowing different UI implementations (e.g., console, captured for tests).
"""

import abc
from typing import Any

from petcli.domain.models.common import OutputLine


class UserInterface(abc.ABC):
    """Abstract Base Class for user-facing output."""

    @abc.abstractmethod
    def display_output(self, output: OutputLine, **kwargs: Any) -> None:
        """Writes a single line of output to the user, verbatim.

        Args:
            output: The line to display (without trailing newline).
            **kwargs: Additional arguments for formatting.
        """
        pass
