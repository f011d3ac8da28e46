"""Task status derived from planned and actual schedules."""

from __future__ import annotations

from enum import Enum

from .core import TaskDefinition, TaskProgress


class TaskStatus(str, Enum):
    """Progress status of a task relative to its plan."""

    DONE = "done"
    DELAYED = "delayed"
    IN_PROGRESS = "in_progress"
    NEED_START = "need_start"  # Start date reached but not started
    NOT_STARTED = "not_started"
    NEED_REVIEW = "need_review"  # Past its actual end but not complete


def compute_status(
    planned: TaskDefinition | None,
    actual: TaskDefinition | None,
    progress: TaskProgress | None,
    today: str,
) -> TaskStatus | None:
    """Compute the status of one task.

    Later rules override earlier ones; 100% progress always means DONE.

    Args:
        planned: Resolved planned task (None if the task was not scheduled)
        actual: Resolved actual-pass task (None if the task was not scheduled)
        progress: Recorded progress, if any
        today: Reference date in ``YYYY/MM/DD`` form

    Returns:
        The task status, or None for an unscheduled task without progress
    """
    progress = progress or TaskProgress()
    status: TaskStatus | None = None

    if progress.started:
        status = TaskStatus.IN_PROGRESS

    if (
        planned is not None
        and actual is not None
        and actual.end_date is not None
        and planned.end_date is not None
        and actual.end_date > planned.end_date
    ):
        status = TaskStatus.DELAYED

    if actual is not None and actual.start_date is not None and not progress.started:
        status = TaskStatus.NEED_START if today >= actual.start_date else TaskStatus.NOT_STARTED

    if (
        progress.started
        and not progress.done
        and actual is not None
        and actual.end_date is not None
        and actual.end_date < today
    ):
        status = TaskStatus.NEED_REVIEW

    if progress.done:
        status = TaskStatus.DONE

    return status
