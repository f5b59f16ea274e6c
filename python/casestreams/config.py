"""Configuration types for case streams."""

import logging
from dataclasses import dataclass
from enum import IntEnum

PACKAGE_LOGGER = "casestreams"


class LogLevel(IntEnum):
    """Log levels mirroring Python's logging module."""

    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


@dataclass(frozen=True)
class SharingStrategy:
    """How a SharedSequence shares its single upstream subscription.

    Attributes:
        replay: Number of latest elements replayed to late subscribers (0 = none)
    """

    replay: int = 1


# Presets for common use cases
DRIVER = SharingStrategy(replay=1)
SIGNAL = SharingStrategy(replay=0)


def configure_logging(level: LogLevel = LogLevel.WARNING) -> logging.Logger:
    """Set the level of the package logger and return it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    return logger
