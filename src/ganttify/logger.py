"""Verbosity-driven logging for schedule resolution.

Resolution output has three tiers: the dates each task ends up with
(``changes``), the per-task rule evaluation that produced them (``checks``),
and calendar and graph internals (``debug``). The CLI ``-v`` count selects
the tier.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

CHANGES_LEVEL = 25  # Resolved task dates
CHECKS_LEVEL = 15  # Conflict checks and dependency shifts

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

# Indexed by the -v count; anything past the end means full debug output
_VERBOSITY_LEVELS = (logging.ERROR, CHANGES_LEVEL, CHECKS_LEVEL, logging.DEBUG)


class GanttifyLogger(logging.Logger):
    """Logger with one method per resolution output tier."""

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Report a date assigned to a task."""
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Report a resolution step for a task."""
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> GanttifyLogger:
    """Return the shared ``ganttify`` logger."""
    logging.setLoggerClass(GanttifyLogger)
    logger = logging.getLogger("ganttify")
    assert isinstance(logger, GanttifyLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Route ganttify log records to ``stream`` at the given verbosity.

    Replaces any handler installed by an earlier call.

    Args:
        verbosity: Number of ``-v`` flags; 0 prints errors only
        stream: Destination for log lines (sys.stderr when omitted)
    """
    logger = get_logger()
    logger.handlers.clear()

    if verbosity <= 0:
        level = logging.ERROR
    else:
        level = _VERBOSITY_LEVELS[min(verbosity, len(_VERBOSITY_LEVELS) - 1)]
    logger.setLevel(level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and go back to errors only."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def checks_enabled() -> bool:
    """True when resolution steps are being logged."""
    return get_logger().isEnabledFor(CHECKS_LEVEL)


def debug_enabled() -> bool:
    """True when calendar and graph internals are being logged."""
    return get_logger().isEnabledFor(logging.DEBUG)
