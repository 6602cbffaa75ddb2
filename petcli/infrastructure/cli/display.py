import logging
from typing import Any, Optional

from rich.console import Console

from petcli.domain.interfaces.user_interface import UserInterface
from petcli.domain.models.common import OutputLine

logger = logging.getLogger(__name__)


class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface backed by a rich Console."""

    def __init__(self, console: Optional[Console] = None):
        """Initializes the rich Console.

        Args:
            console: Console to write to. Defaults to one on standard output.
        """
        self._console = console or Console()

    @property
    def console(self) -> Console:
        """Get the Rich console instance for direct operations."""
        return self._console

    @console.setter
    def console(self, console: Console) -> None:
        self._console = console

    def display_output(self, output: OutputLine, **kwargs: Any) -> None:
        """Writes one line to the console's file exactly as given.

        Bypasses rich rendering, which would expand tabs and drop control
        characters from record fields.

        Args:
            output: The line to display.
            **kwargs: Accepted for interface compatibility; ignored.
        """
        stream = self.console.file
        stream.write(f"{output}\n")
        stream.flush()
