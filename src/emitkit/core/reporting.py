"""Diagnostics for listeners that fail during dispatch."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Hashable

from .types import FailureReporter

if TYPE_CHECKING:
    from ..config.settings import EmitterConfig

logger = logging.getLogger(__name__)


def format_failure(name: Hashable, error: BaseException) -> str:
    return f'Error in listener for event "{name}": {error}'


def log_listener_failure(name: Hashable, error: BaseException) -> None:
    """Default reporter: one ERROR record per failing listener, traceback attached."""
    logger.error(format_failure(name, error), exc_info=error, extra={"event": str(name)})


def make_failure_reporter(config: "EmitterConfig") -> FailureReporter:
    """Build a reporter that honours ``config.logger_name`` and ``config.include_traceback``."""
    target = logging.getLogger(config.logger_name)
    include_traceback = config.include_traceback

    def _report(name: Hashable, error: BaseException) -> None:
        target.error(
            format_failure(name, error),
            exc_info=error if include_traceback else None,
            extra={"event": str(name)},
        )

    return _report
