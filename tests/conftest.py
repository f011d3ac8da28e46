"""Pytest configuration and fixtures for ganttify tests."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from ganttify.logger import reset_logger
from ganttify.scheduler.core import TaskDefinition
from ganttify.workdays import WorkdayCalendar, make_workday_predicate

JUNE_2025_HOLIDAYS = {"2025/06/06", "2025/06/12", "2025/06/18", "2025/06/24", "2025/06/30"}


@pytest.fixture(autouse=True)
def clean_logger() -> None:
    """Reset logger state before each test for isolation."""
    reset_logger()


@pytest.fixture
def every_day_calendar() -> WorkdayCalendar:
    """Calendar from 2024/07/01 over 365 days where every day is a workday."""
    return WorkdayCalendar("2024/07/01", 365)


@pytest.fixture
def weekday_calendar() -> WorkdayCalendar:
    """Calendar from 2024/07/01 over 365 days excluding weekends."""
    return WorkdayCalendar("2024/07/01", 365, make_workday_predicate())


@pytest.fixture
def june_calendar() -> WorkdayCalendar:
    """June 2025 excluding weekends and five holidays."""
    return WorkdayCalendar("2025/06/01", 30, make_workday_predicate(JUNE_2025_HOLIDAYS))


def task(  # noqa: PLR0913 - mirrors TaskDefinition fields
    task_id: int,
    start: str | None = None,
    end: str | None = None,
    duration: int | None = None,
    starts_after: Iterable[int] = (),
    ends_before: Iterable[int] = (),
) -> TaskDefinition:
    """Create a TaskDefinition with positional shorthand.

    Example:
        task(1, duration=3, ends_before=[0])
    """
    return TaskDefinition(
        id=task_id,
        start_date=start,
        end_date=end,
        duration=duration,
        starts_after=frozenset(starts_after),
        ends_before=frozenset(ends_before),
    )


def scenario_tasks() -> list[TaskDefinition]:
    """Four tasks chained around a fixed task starting 2025/01/01."""
    return [
        task(0, start="2025/01/01", duration=3),
        task(1, duration=3, ends_before=[0]),
        task(2, duration=1, ends_before=[1]),
        task(3, duration=1, starts_after=[0]),
    ]
