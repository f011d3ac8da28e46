"""Tests for logging verbosity."""

import logging
from io import StringIO

import pytest

from ganttify.logger import CHANGES_LEVEL, CHECKS_LEVEL, get_logger, setup_logger
from ganttify.scheduler import resolver
from ganttify.scheduler.core import TaskProgress
from ganttify.scheduler.resolver import resolve_schedule
from ganttify.scheduler.service import SchedulingService
from ganttify.workdays import WorkdayCalendar
from tests.conftest import scenario_tasks, task


class TestSetupLogger:
    """Test verbosity to level mapping."""

    @pytest.mark.parametrize(
        ("verbosity", "level"),
        [
            (0, logging.ERROR),
            (1, CHANGES_LEVEL),
            (2, CHECKS_LEVEL),
            (3, logging.DEBUG),
            (7, logging.DEBUG),
            (-1, logging.ERROR),
        ],
    )
    def test_levels(self, verbosity: int, level: int) -> None:
        setup_logger(verbosity, StringIO())
        assert get_logger().level == level

    def test_reconfigure_replaces_handler(self) -> None:
        setup_logger(1, StringIO())
        setup_logger(2, StringIO())
        assert len(get_logger().handlers) == 1


class TestResolverLogging:
    """Logging reflects verbosity and never changes results."""

    def test_silent_by_default(self, every_day_calendar: WorkdayCalendar) -> None:
        stream = StringIO()
        setup_logger(0, stream)

        resolve_schedule(scenario_tasks(), every_day_calendar)

        assert stream.getvalue() == ""

    def test_changes(self, every_day_calendar: WorkdayCalendar) -> None:
        stream = StringIO()
        setup_logger(1, stream)

        resolve_schedule(scenario_tasks(), every_day_calendar)

        output = stream.getvalue()
        assert "Task 3: 2025/01/04 - 2025/01/04" in output
        assert "Resolving task" not in output

    def test_checks(self, every_day_calendar: WorkdayCalendar) -> None:
        stream = StringIO()
        setup_logger(2, stream)

        resolve_schedule(scenario_tasks(), every_day_calendar)

        output = stream.getvalue()
        assert "Topological order: [0, 1, 3, 2]" in output
        assert "Task 1 ends before 2025/01/01 -> 2024/12/31" in output

    def test_debug_calendar(self) -> None:
        stream = StringIO()
        setup_logger(3, stream)

        WorkdayCalendar("2025/06/01", 7)

        assert "Calendar 2025/06/01 x 7 days: 7 workdays" in stream.getvalue()

    def test_step_messages_not_built_below_checks(
        self, every_day_calendar: WorkdayCalendar, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Per-step messages are skipped entirely unless checks output is on."""
        setup_logger(1, StringIO())
        calls: list[str] = []
        monkeypatch.setattr(resolver.logger, "checks", lambda msg, *args: calls.append(msg))

        resolve_schedule(scenario_tasks(), every_day_calendar)

        assert calls == []


class TestServiceLogging:
    """Service-level messages follow the same tiers."""

    def _schedule(self, calendar: WorkdayCalendar) -> None:
        tasks = [task(0, start="2025/01/06", duration=2), task(1)]
        progress = {0: TaskProgress(actual_start="2025/01/06", actual_end="2025/01/08")}
        SchedulingService(calendar, today="2025/01/07").schedule(tasks, progress)

    def test_checks(self, weekday_calendar: WorkdayCalendar) -> None:
        stream = StringIO()
        setup_logger(2, stream)

        self._schedule(weekday_calendar)

        output = stream.getvalue()
        assert "Skipping tasks without dates or duration: [1]" in output
        assert "Task 0: actual dates 2025/01/06 - 2025/01/08" in output
        assert "Resolving actual schedule" in output

    def test_changes_only(self, weekday_calendar: WorkdayCalendar) -> None:
        stream = StringIO()
        setup_logger(1, stream)

        self._schedule(weekday_calendar)

        output = stream.getvalue()
        assert "Skipping" not in output
        assert "Task 0: 2025/01/06 - 2025/01/08" in output
