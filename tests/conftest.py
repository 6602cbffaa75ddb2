import pytest
from typer.testing import CliRunner
from unittest.mock import MagicMock
from pathlib import Path

from petcli.domain.interfaces.user_interface import UserInterface
from petcli.infrastructure.config import settings

CONFIG_ENV_VARS = ("DATA_FILE", "BARK_COUNT", "LOGGING_LEVEL", "LOGGING_FILE", "LOGGING_FORMAT")


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture
def mock_ui():
    """A UserInterface mock; lines written are in display_output.call_args_list."""
    return MagicMock(spec=UserInterface)


@pytest.fixture
def displayed_lines():
    """Returns a helper listing the lines passed to ui.display_output, in order."""
    def _lines(ui: MagicMock) -> list:
        return [c.args[0] for c in ui.display_output.call_args_list]
    return _lines


@pytest.fixture
def write_data_file(tmp_path: Path):
    """Factory writing `content` to a data file under tmp_path and returning its path."""
    def _write(content: str, name: str = "dog_data.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keeps the developer's environment and earlier tests out of the configuration."""
    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    settings.reset_configuration()
    settings.clear_test_config()
    yield
    settings.reset_configuration()
    settings.clear_test_config()
