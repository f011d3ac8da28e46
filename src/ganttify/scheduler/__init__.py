"""Scheduler package - dependency-driven task date resolution.

This package provides:
- Dependency graph construction and topological ordering
- Schedule resolution filling in missing dates with workday arithmetic
- Actual-progress preparation and task status derivation
- SchedulingService running the planned and actual passes

Main entry points:
- resolve_schedule: Resolve one list of tasks against a calendar
- SchedulingService: Planned + actual passes with per-task status
"""

from .actuals import apply_actuals, prepare_actual_tasks
from .core import (
    DependencyEdge,
    DependencyType,
    ScheduleResolution,
    TaskDefinition,
    TaskGraph,
    TaskId,
    TaskProgress,
)
from .graph import build_dependency_graph
from .resolver import resolve_schedule
from .service import PlanSchedule, SchedulingService, schedulable_tasks
from .sorting import topological_sort
from .status import TaskStatus, compute_status

__all__ = [
    # Core dataclasses
    "TaskId",
    "TaskDefinition",
    "TaskProgress",
    "DependencyType",
    "DependencyEdge",
    "TaskGraph",
    "ScheduleResolution",
    # Graph and ordering
    "build_dependency_graph",
    "topological_sort",
    # Resolution
    "resolve_schedule",
    # Actual pass and status
    "apply_actuals",
    "prepare_actual_tasks",
    "TaskStatus",
    "compute_status",
    # High-level service
    "SchedulingService",
    "PlanSchedule",
    "schedulable_tasks",
]
