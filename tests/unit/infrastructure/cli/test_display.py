import io
import pytest
from unittest.mock import MagicMock

from rich.console import Console

from petcli.infrastructure.cli.display import ConsoleDisplay


@pytest.fixture
def mock_console():
    """Fixture to create a mock rich Console object."""
    return MagicMock()


@pytest.fixture
def console_display(mock_console: MagicMock):
    """Fixture to create a ConsoleDisplay instance with a mocked console."""
    display = ConsoleDisplay()
    display.console = mock_console
    return display


@pytest.fixture
def buffer_display():
    """A ConsoleDisplay writing into an in-memory buffer."""
    buffer = io.StringIO()
    display = ConsoleDisplay(console=Console(file=buffer, force_terminal=False, color_system=None))
    return display, buffer


def test_display_output_writes_to_console_file(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.display_output("Bark!")
    mock_console.file.write.assert_called_once_with("Bark!\n")
    mock_console.file.flush.assert_called_once()
    mock_console.print.assert_not_called()


def test_display_output_keeps_markup_characters(buffer_display):
    """Text that looks like rich markup is written as-is."""
    display, buffer = buffer_display

    display.display_output("I am [bold]Rex[/bold] and I am 5 years old.")
    display.display_output("Breed: :dog:")

    assert buffer.getvalue() == "I am [bold]Rex[/bold] and I am 5 years old.\nBreed: :dog:\n"


@pytest.mark.parametrize("breed", ["Lab\trador", "Lab\x07rador", "Lab\x1b[31mrador"])
def test_display_output_keeps_tabs_and_control_characters(buffer_display, breed: str):
    display, buffer = buffer_display

    display.display_output(f"Breed: {breed}")

    assert buffer.getvalue() == f"Breed: {breed}\n"


def test_display_output_writes_to_stdout(capsys):
    display = ConsoleDisplay()
    display.display_output("Rex is now eating.")
    assert capsys.readouterr().out == "Rex is now eating.\n"
