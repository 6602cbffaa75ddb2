import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock

from petcli.core.command_handler import CommandHandler
from petcli.core.services.presentation_service import PresentationService
from petcli.core.services.record_loader import RecordLoader
from petcli.domain.exceptions import FormatError
from petcli.domain.models.animal import Dog
from petcli.domain.models.common import BarkCount, FilePath


@pytest.fixture
def mock_record_loader():
    loader = MagicMock(spec=RecordLoader)
    loader.load_record = AsyncMock()
    return loader


@pytest.fixture
def mock_presentation_service():
    return MagicMock(spec=PresentationService)


@pytest.fixture
def command_handler(mock_record_loader, mock_presentation_service):
    """Fixture to create CommandHandler with mocked services."""
    return CommandHandler(
        record_loader=mock_record_loader,
        presentation_service=mock_presentation_service,
    )


def test_handle_run(command_handler: CommandHandler, mock_record_loader: MagicMock, mock_presentation_service: MagicMock):
    dog = Dog("Rex", 5, "Labrador")
    mock_record_loader.load_record.return_value = dog

    asyncio.run(command_handler.handle_run(FilePath("dog_data.txt"), BarkCount(3)))

    mock_record_loader.load_record.assert_awaited_once_with("dog_data.txt")
    mock_presentation_service.present.assert_called_once_with(dog, 3)


@pytest.mark.parametrize("error", [FileNotFoundError("missing"), FormatError("bad line")])
def test_handle_run_propagates_errors(command_handler: CommandHandler, mock_record_loader: MagicMock, mock_presentation_service: MagicMock, error: Exception):
    mock_record_loader.load_record.side_effect = error

    with pytest.raises(type(error)):
        asyncio.run(command_handler.handle_run(FilePath("dog_data.txt"), BarkCount(3)))

    mock_presentation_service.present.assert_not_called()
