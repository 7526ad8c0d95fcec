"""Logging configuration for docs-corpus."""

import sys

from loguru import logger

_FORMAT = "{level.icon} {message}"
_VERBOSE_FORMAT = "{level.icon} <dim>{name}:{line}</dim> {message}"


def configure_logging(*, verbose: bool = False) -> None:
    """Send corpus logs to stderr; verbose adds debug output and source locations."""
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format=_VERBOSE_FORMAT)
    else:
        logger.add(sys.stderr, level="INFO", format=_FORMAT)
