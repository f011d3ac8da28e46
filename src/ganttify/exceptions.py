"""Custom exceptions for Ganttify."""

from __future__ import annotations

from collections.abc import Iterable


class GanttifyError(Exception):
    """Base exception for all Ganttify errors."""

    pass


class ConfigError(GanttifyError):
    """Raised when calendar or plan configuration is invalid."""

    pass


class ParseError(GanttifyError):
    """Raised when a plan file cannot be read or parsed."""

    pass


class ScheduleError(GanttifyError):
    """Base class for fatal schedule resolution failures.

    Every schedule error names the task it failed on. ``task_id`` is ``None``
    only for conditions that belong to the graph as a whole.
    """

    def __init__(self, message: str, task_id: int | None = None):
        self.task_id = task_id
        super().__init__(f"[ScheduleError] {message}")


class CycleDetectedError(ScheduleError):
    """Raised when the dependency graph is not a DAG."""

    def __init__(self, unresolved_ids: Iterable[int]):
        self.unresolved_ids = sorted(unresolved_ids)
        first = self.unresolved_ids[0] if self.unresolved_ids else None
        ids = ", ".join(str(task_id) for task_id in self.unresolved_ids)
        super().__init__(f"Cycle detected in task graph (tasks: {ids})", first)


class ConflictingConstraintsError(ScheduleError):
    """Raised when a task mixes a fixed date with an incompatible dependency."""

    pass


class UnresolvableDateError(ScheduleError):
    """Raised when a calendar query falls outside the calendar window."""

    pass


class IncompleteScheduleError(ScheduleError):
    """Raised when a task still lacks a start or end date after propagation."""

    pass


class InvertedRangeError(ScheduleError):
    """Raised when a resolved end date precedes the resolved start date."""

    pass


class UnknownTaskError(ScheduleError):
    """Raised when a dependency references a task that is not being resolved."""

    pass
