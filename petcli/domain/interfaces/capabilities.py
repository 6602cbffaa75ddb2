"""Capability interfaces a record may implement.

Callers check for a capability (``isinstance(record, Feedable)``) rather than
for a concrete record type, so new variants need no change at the call sites.
Every capability writes its lines through the UserInterface it is given.
"""

import abc

from petcli.domain.interfaces.user_interface import UserInterface


class Describable(abc.ABC):
    """A record that can describe itself."""

    @abc.abstractmethod
    def describe(self, ui: UserInterface) -> None:
        """Writes a human readable description, one line per display_output call."""
        pass


class Feedable(abc.ABC):
    """A record that can be fed."""

    @abc.abstractmethod
    def feed(self, ui: UserInterface) -> None:
        """Writes the feeding action line."""
        pass


class Barking(abc.ABC):
    """A record that can bark."""

    @abc.abstractmethod
    def bark_n_times(self, n: int, ui: UserInterface) -> None:
        """Writes ``Bark!`` exactly ``max(n, 0)`` times.

        Args:
            n: Number of barks. Zero or negative writes nothing.
            ui: Where the lines go.
        """
        pass
