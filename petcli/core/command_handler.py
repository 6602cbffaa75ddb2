"""Command Handler: Orchestrates CLI command execution.

Receives commands from the main entry point (main.py) and delegates
the work to the application services (RecordLoader, PresentationService).
"""

import logging

from petcli.core.services.presentation_service import PresentationService
from petcli.core.services.record_loader import RecordLoader
from petcli.domain.models.common import BarkCount, FilePath

logger = logging.getLogger(__name__)


class CommandHandler:
    """Handles incoming commands and delegates to appropriate services."""

    def __init__(
        self,
        record_loader: RecordLoader,
        presentation_service: PresentationService,
    ):
        """Initializes the CommandHandler with required services."""
        self.record_loader = record_loader
        self.presentation_service = presentation_service

    async def handle_run(self, file_path: FilePath, bark_count: BarkCount) -> None:
        """Loads the record in ``file_path`` and presents it.

        Load and format errors are not caught here; they reach the CLI.

        Args:
            file_path: The data file to read.
            bark_count: How many times the loaded dog should bark.
        """
        logger.info(f"Handling run: file={file_path}, barks={bark_count}")
        record = await self.record_loader.load_record(file_path)
        self.presentation_service.present(record, bark_count)
