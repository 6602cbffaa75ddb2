import logging

from petcli.domain.interfaces.capabilities import Barking, Describable, Feedable
from petcli.domain.interfaces.user_interface import UserInterface
from petcli.domain.models.common import BarkCount

logger = logging.getLogger(__name__)


class PresentationService:
    """Runs every capability a record supports, in a fixed order."""

    def __init__(self, ui: UserInterface):
        self.ui = ui

    def present(self, record: object, bark_count: BarkCount) -> None:
        """Describes, feeds and makes ``record`` bark, as far as it is able to.

        Args:
            record: Any record; capabilities it lacks are skipped.
            bark_count: Number of barks for records that can bark.
        """
        if isinstance(record, Describable):
            record.describe(self.ui)
        if isinstance(record, Feedable):
            record.feed(self.ui)
        if isinstance(record, Barking):
            record.bark_n_times(bark_count, self.ui)
        else:
            logger.debug(f"{type(record).__name__} cannot bark; skipping {bark_count} bark(s)")
