"""Logging setup shared by the karaoke modules."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Return the module logger; handlers live on the root logger."""
    return logging.getLogger(name)


def setup_logging(level: str = "WARNING", stream=None) -> None:
    """Configure the root logger with a single stream handler.

    Diagnostics go to stderr so they never mix with the menu on stdout.

    Args:
        level: Logging level name
        stream: Output stream, defaults to sys.stderr
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    root_logger.setLevel(getattr(logging, level.upper()))

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(stream_handler)
