"""High-level scheduling service: planned and actual passes plus status."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date

from ganttify.logger import get_logger
from ganttify.workdays import WorkdayCalendar, format_date

from .actuals import prepare_actual_tasks
from .core import TaskDefinition, TaskId, TaskProgress
from .resolver import resolve_schedule
from .status import TaskStatus, compute_status

logger = get_logger()


def _default_ids() -> list[TaskId]:
    return []


@dataclass
class PlanSchedule:
    """Planned and actual schedules for one plan."""

    planned: dict[TaskId, TaskDefinition]
    actual: dict[TaskId, TaskDefinition]
    statuses: dict[TaskId, TaskStatus | None]
    skipped: list[TaskId] = field(default_factory=_default_ids)  # No dates and no duration


def schedulable_tasks(tasks: Sequence[TaskDefinition]) -> list[TaskDefinition]:
    """Tasks that carry a start date, an end date or a duration."""
    return [task for task in tasks if task.is_schedulable]


class SchedulingService:
    """Runs the planned and actual resolution passes against one calendar.

    The calendar is read-only, so both passes (and any number of services)
    can share it.
    """

    def __init__(self, calendar: WorkdayCalendar, today: date | str | None = None):
        """Initialize the service.

        Args:
            calendar: Workday calendar used by both passes
            today: Reference date for status computation (defaults to today)
        """
        self.calendar = calendar
        if today is None:
            today = date.today()  # noqa: DTZ011
        self.today = today if isinstance(today, str) else format_date(today)

    def schedule(
        self,
        tasks: Sequence[TaskDefinition],
        progress: Mapping[TaskId, TaskProgress] | None = None,
    ) -> PlanSchedule:
        """Resolve planned and actual schedules and compute task statuses.

        Args:
            tasks: Planned task definitions
            progress: Recorded progress keyed by task id

        Returns:
            PlanSchedule for all tasks

        Raises:
            ScheduleError: If either pass cannot be resolved
        """
        progress = progress or {}
        schedulable = schedulable_tasks(tasks)
        skipped = [task.id for task in tasks if not task.is_schedulable]
        if skipped:
            logger.checks("Skipping tasks without dates or duration: %s", skipped)

        logger.checks("Resolving planned schedule")
        planned = resolve_schedule(schedulable, self.calendar)

        logger.checks("Resolving actual schedule")
        actual = resolve_schedule(prepare_actual_tasks(schedulable, progress), self.calendar)

        statuses = {
            task.id: compute_status(
                planned.by_id.get(task.id),
                actual.by_id.get(task.id),
                progress.get(task.id),
                self.today,
            )
            for task in tasks
        }

        return PlanSchedule(
            planned=planned.by_id,
            actual=actual.by_id,
            statuses=statuses,
            skipped=skipped,
        )
