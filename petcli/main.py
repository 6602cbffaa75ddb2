"""Main entry point for the petcli application.

Sets up the Typer CLI application, performs dependency injection (Composition Root),
defines the CLI command, and delegates execution to the CommandHandler.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Coroutine, Dict, Optional

import typer
from typing_extensions import Annotated

# --- Core Layer ---
from petcli.core.command_handler import CommandHandler
from petcli.core.services.presentation_service import PresentationService
from petcli.core.services.record_loader import RecordLoader

# --- Domain Layer ---
from petcli.domain.models.common import BarkCount, FilePath

# --- Infrastructure Layer ---
from petcli.infrastructure.cli.display import ConsoleDisplay
from petcli.infrastructure.config.settings import (
    get_bark_count,
    get_config,
    get_data_file,
    get_log_level,
    load_configuration,
)
from petcli.infrastructure.filesystem.local_fs import LocalFileSystem
from petcli.infrastructure.monitoring.logger_setup import parse_log_level, setup_logging

logger = logging.getLogger(__name__)


# --- Dependency Injection Container (Manual) ---

def create_dependencies() -> Dict[str, Any]:
    """Creates and wires up all dependencies for the application.

    This acts as the Composition Root.
    """
    # 1. Load Configuration First, then logging from it
    load_configuration()
    setup_logging(
        log_level=parse_log_level(get_log_level()),
        log_file=get_config('logging.file'),
        log_format=get_config('logging.format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
    )
    logger.info("Configuration and logging initialized.")

    dependencies: Dict[str, Any] = {}

    # 2. Infrastructure Adapters
    dependencies['ui'] = ConsoleDisplay()
    dependencies['file_system'] = LocalFileSystem()

    # 3. Core Services
    dependencies['record_loader'] = RecordLoader(file_system=dependencies['file_system'])
    dependencies['presentation_service'] = PresentationService(ui=dependencies['ui'])
    dependencies['command_handler'] = CommandHandler(
        record_loader=dependencies['record_loader'],
        presentation_service=dependencies['presentation_service'],
    )

    logger.info("All dependencies initialized successfully.")
    return dependencies


# --- Typer App Definition ---
app = typer.Typer(
    name="petcli",
    help="Loads a dog from a 'name,age,breed' data file, describes it, feeds it and makes it bark.",
    add_completion=False,
)


def run_async(coro: Coroutine[Any, Any, None]) -> None:
    """Runs an async command to completion from a sync Typer command.

    Exceptions propagate to Typer unchanged.
    """
    asyncio.run(coro)


@app.command()
def run(
    data_file: Annotated[
        Optional[Path],
        typer.Argument(help="Data file whose first line is 'name,age,breed'. Defaults to the configured data_file.")
    ] = None,
    barks: Annotated[
        Optional[int],
        typer.Option("--barks", "-b", help="How many times the dog barks. Defaults to the configured bark_count.")
    ] = None,
):
    """Load the dog in DATA_FILE, describe it, feed it and make it bark."""
    dependencies = create_dependencies()
    handler: CommandHandler = dependencies['command_handler']

    file_path = FilePath(str(data_file)) if data_file is not None else get_data_file()
    bark_count = BarkCount(barks) if barks is not None else get_bark_count()
    run_async(handler.handle_run(file_path, bark_count))


# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()


if __name__ == "__main__":
    cli_entry_point()
