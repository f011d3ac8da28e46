"""Prepare task definitions for the actual-progress resolution pass."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace

from ganttify.logger import get_logger
from ganttify.workdays import parse_date

from .core import TaskDefinition, TaskId, TaskProgress

logger = get_logger()


def apply_actuals(task: TaskDefinition, progress: TaskProgress | None) -> TaskDefinition:
    """Return a copy of ``task`` with recorded actual dates applied.

    - No valid actual date: the task is copied unchanged.
    - Both actual dates: they replace the plan; duration and dependencies go.
    - One actual date on a task planned with both fixed dates: the start is
      adjusted if it does not pass the planned end, then the end if it does not
      precede the (possibly adjusted) start.
    - One actual date otherwise: it replaces the planned dates, the other date
      becomes unknown and dependencies are dropped; the duration stays so the
      missing date can still be derived.
    """
    actual = replace(task)
    if progress is None:
        return actual

    actual_start = parse_date(progress.actual_start)
    actual_end = parse_date(progress.actual_end)

    if actual_start is None and actual_end is None:
        return actual

    if actual_start is not None and actual_end is not None:
        logger.checks("Task %s: actual dates %s - %s", task.id, actual_start, actual_end)
        return replace(
            actual,
            start_date=actual_start,
            end_date=actual_end,
            duration=None,
            starts_after=frozenset(),
            ends_before=frozenset(),
        )

    if actual.start_date is not None and actual.end_date is not None:
        if actual_start is not None and actual_start <= actual.end_date:
            actual.start_date = actual_start
        if actual_end is not None and actual_end >= actual.start_date:
            actual.end_date = actual_end
        return actual

    return replace(
        actual,
        start_date=actual_start,
        end_date=actual_end,
        starts_after=frozenset(),
        ends_before=frozenset(),
    )


def prepare_actual_tasks(
    tasks: Iterable[TaskDefinition], progress: Mapping[TaskId, TaskProgress]
) -> list[TaskDefinition]:
    """Apply recorded progress to every task, preserving order.

    Args:
        tasks: Planned task definitions
        progress: Recorded progress keyed by task id

    Returns:
        New task definitions for the actual pass
    """
    return [apply_actuals(task, progress.get(task.id)) for task in tasks]
