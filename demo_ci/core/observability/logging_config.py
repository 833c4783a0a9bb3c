"""
Logging setup for the demo-ci command.

Only the ``demo_ci`` logger tree is configured; records never reach the
root logger.  Console output goes to stderr so that it never mixes with
the messages and JSON the CLI prints on stdout.

Console format depends on the level:

* WARNING and above (the default): the bare message.
* INFO (``-v``): prefixed with the level name.
* DEBUG (``--debug``): level and module, which is where the walk
  reports every pruned directory and every unreadable directory or
  entry it skipped.

``DEMO_CI_LOG_FILE`` adds a timestamped file log; its level comes from
``DEMO_CI_LOG_FILE_LEVEL`` and falls back to the console level.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "demo_ci"

_CONSOLE_FORMATS = {
    logging.DEBUG: "%(levelname)s %(name)s: %(message)s",
    logging.INFO: "%(levelname)s: %(message)s",
}
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Attach handlers to the ``demo_ci`` logger, replacing any earlier ones.

    Returns the configured package logger.
    """
    console_level = _parse_level(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_console_format(console_level)))
    logger.addHandler(console)

    lowest = console_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
        lowest = min(lowest, file_level)

    logger.setLevel(lowest)
    return logger


def _console_format(level: int) -> str:
    if level <= logging.DEBUG:
        return _CONSOLE_FORMATS[logging.DEBUG]
    if level <= logging.INFO:
        return _CONSOLE_FORMATS[logging.INFO]
    return "%(message)s"


def _parse_level(level: str | None) -> int:
    """Level name to number; unknown or empty names mean WARNING."""
    if not level:
        return logging.WARNING
    return logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
