"""
Logging setup for the CLI.

Records go to stderr through rich; the active API key is scrubbed from every
message before it is emitted.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "leaseweb"

_redaction_key: str | None = None


def set_redaction_api_key(api_key: str | None) -> None:
    global _redaction_key
    _redaction_key = api_key or None


class RedactingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        key = _redaction_key
        if key:
            message = record.getMessage()
            if key in message:
                record.msg = message.replace(key, "***")
                record.args = None
        return True


@dataclass(frozen=True, slots=True)
class PreviousLoggingState:
    level: int
    propagate: bool
    handlers: list[logging.Handler]


def _level_for(verbosity: int, debug: bool) -> int:
    if debug or verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(*, verbosity: int, debug: bool) -> PreviousLoggingState:
    logger = logging.getLogger(LOGGER_NAME)
    previous = PreviousLoggingState(
        level=logger.level, propagate=logger.propagate, handlers=list(logger.handlers)
    )

    handler = RichHandler(
        console=Console(file=sys.stderr),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.addFilter(RedactingFilter())

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(_level_for(verbosity, debug))
    logger.propagate = False
    return previous


def restore_logging(previous: PreviousLoggingState) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    for handler in previous.handlers:
        logger.addHandler(handler)
    logger.setLevel(previous.level)
    logger.propagate = previous.propagate
