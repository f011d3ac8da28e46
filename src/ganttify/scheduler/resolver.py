"""Schedule resolution: fill in missing task dates in dependency order."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from ganttify.exceptions import (
    ConflictingConstraintsError,
    IncompleteScheduleError,
    InvertedRangeError,
    UnknownTaskError,
    UnresolvableDateError,
)
from ganttify.logger import checks_enabled, get_logger
from ganttify.workdays import WorkdayCalendar

from .core import DependencyType, ScheduleResolution, TaskDefinition, TaskGraph, TaskId
from .graph import build_dependency_graph
from .sorting import topological_sort

logger = get_logger()


def resolve_schedule(
    tasks: Iterable[TaskDefinition], calendar: WorkdayCalendar
) -> ScheduleResolution:
    """Compute start and end dates for every task.

    The input records are copied, never modified. Tasks are visited in
    topological order; each one gets its dates from dependency bounds first,
    then from its duration, and is validated before and after.

    Args:
        tasks: Tasks with partial date information
        calendar: Workday calendar used for all date shifts

    Returns:
        ScheduleResolution with fully dated copies of the tasks

    Raises:
        ScheduleError: On the first task that cannot be resolved consistently
    """
    scheduled = [replace(task) for task in tasks]
    graph = build_dependency_graph(scheduled)
    order = topological_sort(graph)

    for task_id in order:
        _resolve_task(graph.tasks[task_id], graph, calendar)

    return ScheduleResolution(tasks=scheduled, by_id=graph.tasks, order=order)


def _resolve_task(task: TaskDefinition, graph: TaskGraph, calendar: WorkdayCalendar) -> None:
    trace = checks_enabled()
    if trace:
        logger.checks(f"Resolving task {task.id}")
    _check_conflicts(task)
    forward_filled = False

    if task.starts_after:
        latest_end = max(_dependency_dates(graph, task, DependencyType.START_AFTER_END))
        task.start_date = calendar.next_workday(latest_end)
        if task.start_date is None:
            raise UnresolvableDateError(f"Failed to shift start date for task {task.id}", task.id)
        if trace:
            logger.checks(f"  Task {task.id} starts after {latest_end} -> {task.start_date}")

    if task.ends_before:
        earliest_start = min(_dependency_dates(graph, task, DependencyType.END_BEFORE_START))
        task.end_date = calendar.previous_workday(earliest_start)
        if task.end_date is None:
            raise UnresolvableDateError(f"Failed to shift end date for task {task.id}", task.id)
        if trace:
            logger.checks(f"  Task {task.id} ends before {earliest_start} -> {task.end_date}")

    if task.start_date is not None and task.duration is not None:
        task.end_date = calendar.workday_at_offset(task.start_date, task.duration - 1)
        if task.end_date is None:
            raise UnresolvableDateError(f"Failed to compute end date for task {task.id}", task.id)
        forward_filled = True

    # Skipped after a forward fill, so a start on a non-workday is kept as given
    if task.end_date is not None and task.duration is not None and not forward_filled:
        task.start_date = calendar.workday_at_offset(task.end_date, -(task.duration - 1))
        if task.start_date is None:
            raise UnresolvableDateError(
                f"Failed to compute start date for task {task.id}", task.id
            )

    if task.start_date is None:
        raise IncompleteScheduleError(
            f"Failed to compute start date for task {task.id}: insufficient information", task.id
        )
    if task.end_date is None:
        raise IncompleteScheduleError(
            f"Failed to compute end date for task {task.id}: insufficient information", task.id
        )
    if task.end_date < task.start_date:
        raise InvertedRangeError(
            f"Invalid schedule for task {task.id}: end date ({task.end_date}) "
            f"is earlier than start date ({task.start_date})",
            task.id,
        )

    logger.changes("Task %s: %s - %s", task.id, task.start_date, task.end_date)


def _check_conflicts(task: TaskDefinition) -> None:
    if task.start_date is not None and task.ends_before:
        raise ConflictingConstraintsError(
            f"Invalid schedule for task {task.id}: both startDate and endsBefore are specified",
            task.id,
        )
    if task.end_date is not None and task.starts_after:
        raise ConflictingConstraintsError(
            f"Invalid schedule for task {task.id}: both endDate and startsAfter are specified",
            task.id,
        )
    if task.starts_after and task.ends_before:
        raise ConflictingConstraintsError(
            f"Invalid schedule for task {task.id}: both startsAfter and endsBefore are specified",
            task.id,
        )


def _dependency_dates(
    graph: TaskGraph, task: TaskDefinition, edge_type: DependencyType
) -> list[str]:
    """End dates (START_AFTER_END) or start dates (END_BEFORE_START) of referenced tasks."""
    dates: list[str] = []
    for edge in graph.incoming(task.id, edge_type):
        ref = _referenced_task(graph, edge.from_id, task.id)
        value = ref.end_date if edge_type == DependencyType.START_AFTER_END else ref.start_date
        # Referenced tasks are resolved first, so their dates are always set here
        assert value is not None
        dates.append(value)
    return dates


def _referenced_task(graph: TaskGraph, ref_id: TaskId, task_id: TaskId) -> TaskDefinition:
    ref = graph.tasks.get(ref_id)
    if ref is None:
        raise UnknownTaskError(f"Task {task_id} references unknown task {ref_id}", task_id)
    return ref
