"""Logging setup for the unbackslash command line."""

import logging
import sys
from typing import TextIO

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level_name: str = "WARNING", stream: TextIO | None = None) -> None:
    """
    Configures the root logger with a single stream handler (stderr by default).
    """
    log_level = getattr(logging, level_name.upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers (e.g., from basicConfig in imports)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)-25s %(message)s", datefmt="%H:%M:%S"
        )
    )
    root_logger.addHandler(handler)

    logging.getLogger("unbackslash").debug(
        "Logging configured at level %s.", logging.getLevelName(log_level)
    )
