"""Core dataclasses for the scheduling system."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

TaskId = int


def _freeze_ids(ids: Iterable[TaskId]) -> frozenset[TaskId]:
    return ids if isinstance(ids, frozenset) else frozenset(ids)


@dataclass
class TaskDefinition:
    """A task with partially known dates.

    Dates are ``YYYY/MM/DD`` strings; ``None`` means unknown. ``duration`` is a
    positive count of workdays.
    """

    id: TaskId
    start_date: str | None = None
    end_date: str | None = None
    duration: int | None = None
    starts_after: frozenset[TaskId] = field(default_factory=frozenset)  # Start after these end
    ends_before: frozenset[TaskId] = field(default_factory=frozenset)  # End before these start

    def __post_init__(self) -> None:
        self.starts_after = _freeze_ids(self.starts_after)
        self.ends_before = _freeze_ids(self.ends_before)

    @property
    def is_schedulable(self) -> bool:
        """True if the task carries any date or duration information."""
        return bool(self.start_date or self.end_date or self.duration)


class DependencyType(str, Enum):
    """Kinds of dependency edges between tasks."""

    START_AFTER_END = "startAfterEnd"  # `to` starts after `from` ends
    END_BEFORE_START = "endBeforeStart"  # `to` ends before `from` starts


@dataclass(frozen=True)
class DependencyEdge:
    """A directed dependency derived from a task record."""

    from_id: TaskId
    to_id: TaskId
    type: DependencyType


@dataclass
class TaskGraph:
    """Tasks keyed by id plus every dependency edge between them.

    Edges are also indexed by target and kind, so looking up the incoming
    edges of a task does not scan the edge list.
    """

    tasks: dict[TaskId, TaskDefinition] = field(default_factory=dict)
    edges: list[DependencyEdge] = field(default_factory=list)
    _incoming: dict[tuple[TaskId, DependencyType], list[DependencyEdge]] = field(
        default_factory=dict, repr=False
    )

    def add_edge(self, edge: DependencyEdge) -> None:
        """Record an edge and index it under its target."""
        self.edges.append(edge)
        self._incoming.setdefault((edge.to_id, edge.type), []).append(edge)

    def incoming(self, task_id: TaskId, edge_type: DependencyType) -> list[DependencyEdge]:
        """Edges of ``edge_type`` that point at ``task_id``."""
        return self._incoming.get((task_id, edge_type), [])


@dataclass
class ScheduleResolution:
    """Result of one resolution run.

    ``tasks`` preserves input order; ``by_id`` indexes the same records.
    """

    tasks: list[TaskDefinition]
    by_id: dict[TaskId, TaskDefinition]
    order: list[TaskId]  # Topological order the tasks were resolved in


@dataclass
class TaskProgress:
    """Recorded progress of a task: actual dates and percent complete."""

    actual_start: str | None = None
    actual_end: str | None = None
    progress: int | None = None  # Percent complete, 0-100

    @property
    def started(self) -> bool:
        return self.actual_start is not None

    @property
    def done(self) -> bool:
        return self.progress == 100  # noqa: PLR2004
