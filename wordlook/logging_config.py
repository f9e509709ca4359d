"""Logging setup for the CLI: stderr always, a rotating log file on request."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from wordlook.config import Settings, settings as default_settings

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"


def _file_handler(settings: Settings) -> RotatingFileHandler:
    log_path = settings.resolved_log_file_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=log_path,
        maxBytes=settings.log_file_max_bytes,
        backupCount=settings.log_file_backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(settings: Settings | None = None) -> None:
    """Install the wordlook handlers on the root logger.

    Diagnostics go to stderr so stdout holds nothing but the lookup output.
    Calling this again swaps the handlers instead of adding more.
    """
    settings = settings or default_settings
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(stderr_handler)

    if settings.log_file_enabled:
        root_logger.addHandler(_file_handler(settings))

    # httpx logs every request URL at INFO, and Wordnik URLs carry api_key
    logging.getLogger("httpx").setLevel(logging.WARNING)
