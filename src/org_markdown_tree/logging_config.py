"""Logging configuration for org-markdown-tree."""

import sys

from loguru import logger

QUIET_FORMAT = "{level.icon} {message}"
VERBOSE_FORMAT = "{level.icon} <dim>{name}:{line}</dim> {message}"


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr.

    Verbose mode shows debug records (parse summaries, state changes, diff
    sizes) tagged with the emitting module.
    """
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format=VERBOSE_FORMAT)
    else:
        logger.add(sys.stderr, level="INFO", format=QUIET_FORMAT)
