"""Ganttify - workday-aware task schedule resolution."""

from .exceptions import (
    ConflictingConstraintsError,
    CycleDetectedError,
    GanttifyError,
    IncompleteScheduleError,
    InvertedRangeError,
    ScheduleError,
    UnknownTaskError,
    UnresolvableDateError,
)
from .scheduler import SchedulingService, TaskDefinition, TaskProgress, resolve_schedule
from .workdays import WorkdayCalendar, make_workday_predicate

__all__ = [
    "GanttifyError",
    "ScheduleError",
    "CycleDetectedError",
    "ConflictingConstraintsError",
    "UnresolvableDateError",
    "IncompleteScheduleError",
    "InvertedRangeError",
    "UnknownTaskError",
    "TaskDefinition",
    "TaskProgress",
    "resolve_schedule",
    "SchedulingService",
    "WorkdayCalendar",
    "make_workday_predicate",
]
