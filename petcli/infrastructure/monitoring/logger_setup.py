"""Logging configuration for petcli.

Standard output carries only the dog's lines (description, feeding, barks),
so every log record is sent to standard error, plus an optional log file
named by the ``logging.file`` setting. The level comes from ``logging.level``
and defaults to WARNING, which keeps a normal run silent.
"""

import logging
import sys
from typing import Optional

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    log_level: int = DEFAULT_LOG_LEVEL,
    log_format: str = DEFAULT_LOG_FORMAT,
    log_file: Optional[str] = None
) -> None:
    """Points the root logger at stderr (and ``log_file`` when given).

    Any handlers already on the root logger are replaced, so calling this
    twice does not duplicate records.

    Args:
        log_level: Minimum level for petcli's records (e.g., logging.INFO).
        log_format: Format string shared by all handlers.
        log_file: Optional path that also receives every record.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format)

    def _attach(handler: logging.Handler) -> None:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # stderr first, so a file handler failure below is reported through it
    _attach(logging.StreamHandler(sys.stderr))
    if log_file:
        try:
            _attach(logging.FileHandler(log_file, encoding='utf-8'))
        except OSError as e:
            logging.error(f"Failed to set up file logging to {log_file}: {e}", exc_info=True)

    logging.debug(f"petcli logging ready: level={logging.getLevelName(log_level)}, file={log_file}")


def parse_log_level(level_name: str, default: int = DEFAULT_LOG_LEVEL) -> int:
    """Maps a ``logging.level`` setting such as 'info' to its logging constant.

    Unknown names fall back to ``default``.
    """
    level = getattr(logging, str(level_name).upper(), None)
    return level if isinstance(level, int) else default
