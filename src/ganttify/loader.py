"""Plan file loading: YAML to task definitions and recorded progress."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .config import CalendarConfig
from .exceptions import ConfigError, ParseError
from .scheduler.core import TaskDefinition, TaskId, TaskProgress
from .schemas import PlanSchema, TaskEntrySchema
from .workdays import parse_date

DURATION_PATTERN = re.compile(r"^([0-9]+)d$")


def _default_names() -> dict[TaskId, str]:
    return {}


def _default_progress() -> dict[TaskId, TaskProgress]:
    return {}


@dataclass
class Plan:
    """A loaded plan: calendar settings, tasks and their recorded progress."""

    calendar: CalendarConfig
    tasks: list[TaskDefinition]
    names: dict[TaskId, str] = field(default_factory=_default_names)
    progress: dict[TaskId, TaskProgress] = field(default_factory=_default_progress)


def parse_duration(value: object) -> int | None:
    """Parse a duration written as ``"<n>d"``; anything else is None."""
    if not isinstance(value, str):
        return None
    match = DURATION_PATTERN.match(value)
    return int(match.group(1)) if match else None


def entry_to_task(entry: TaskEntrySchema) -> TaskDefinition:
    """Convert a plan entry to a task definition.

    A duration given in ``start`` takes precedence over one given in ``end``.
    """
    task = TaskDefinition(id=entry.id)

    if isinstance(entry.start, list):
        task.starts_after = frozenset(entry.start)
    elif entry.start:
        duration = parse_duration(entry.start)
        if duration is not None:
            task.duration = duration
        else:
            task.start_date = parse_date(entry.start)

    if isinstance(entry.end, list):
        task.ends_before = frozenset(entry.end)
    elif entry.end:
        duration = parse_duration(entry.end)
        if duration is not None:
            if task.duration is None:
                task.duration = duration
        else:
            task.end_date = parse_date(entry.end)

    return task


def parse_plan(data: dict[str, Any]) -> Plan:
    """Validate raw plan data and convert it to a Plan."""
    try:
        schema = PlanSchema(**data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid plan structure: {e}") from e

    plan = Plan(calendar=schema.calendar, tasks=[])
    for entry in schema.tasks:
        plan.tasks.append(entry_to_task(entry))
        plan.names[entry.id] = entry.name
        if entry.actual_start or entry.actual_end or entry.progress is not None:
            plan.progress[entry.id] = TaskProgress(
                actual_start=entry.actual_start,
                actual_end=entry.actual_end,
                progress=entry.progress,
            )
    return plan


def load_plan(path: Path | str) -> Plan:
    """Load a plan YAML file.

    Raises:
        ParseError: If the file is missing or is not valid YAML
        ConfigError: If the YAML does not describe a valid plan
    """
    path = Path(path)
    if not path.exists():
        raise ParseError(f"File not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse YAML: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("YAML must contain a dictionary at the root level")

    return parse_plan(data)  # type: ignore[arg-type]
