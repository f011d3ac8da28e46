"""Workday calendar: workday arithmetic over a fixed window of calendar days."""

from __future__ import annotations

import bisect
import re
from collections.abc import Callable, Collection
from datetime import date, datetime, timedelta

from .logger import debug_enabled, get_logger

logger = get_logger()

DATE_FORMAT = "%Y/%m/%d"
DATE_PATTERN = re.compile(r"^\d{4}/\d{2}/\d{2}$")
SATURDAY = 5
SUNDAY = 6

WorkdayPredicate = Callable[[date, str], bool]
"""Decides whether a day is a workday. Receives the day and its ``YYYY/MM/DD`` form."""


def format_date(day: date) -> str:
    """Format a date as ``YYYY/MM/DD``."""
    return day.strftime(DATE_FORMAT)


def to_date(value: str | date) -> date:
    """Convert a ``YYYY/MM/DD`` string (or a date) to a date."""
    if isinstance(value, date):
        return value
    return datetime.strptime(value, DATE_FORMAT).date()


def every_day(_day: date, _formatted: str) -> bool:
    """Default predicate: every calendar day is a workday."""
    return True


def make_workday_predicate(
    holidays: Collection[str] = (), *, exclude_weekends: bool = True
) -> WorkdayPredicate:
    """Build a predicate excluding weekends and an exact-match set of holidays.

    Args:
        holidays: Holiday dates in ``YYYY/MM/DD`` form
        exclude_weekends: Treat Saturday and Sunday as non-workdays

    Returns:
        Predicate suitable for WorkdayCalendar
    """
    holiday_set = frozenset(holidays)

    def is_workday(day: date, formatted: str) -> bool:
        if exclude_weekends and day.weekday() in (SATURDAY, SUNDAY):
            return False
        return formatted not in holiday_set

    return is_workday


class WorkdayCalendar:
    """Workday lookups over ``[start_date, start_date + total_days - 1]``.

    The workday list is built once and never mutated, so a single calendar can
    be shared by any number of resolution runs.

    ``YYYY/MM/DD`` strings sort lexicographically in chronological order, which
    lets nearest-workday queries use a binary search over the workday list.
    """

    def __init__(
        self,
        start_date: str | date,
        total_days: int,
        is_workday: WorkdayPredicate | None = None,
    ):
        """Enumerate the calendar window.

        Args:
            start_date: First day of the window (``YYYY/MM/DD`` or a date)
            total_days: Number of consecutive calendar days in the window
            is_workday: Workday predicate, called once per day in date order.
                Defaults to treating every day as a workday.
        """
        predicate = is_workday or every_day
        first_day = to_date(start_date)

        self.start_date = format_date(first_day)
        self.total_days = total_days
        self._workdays: list[str] = []
        self._index: dict[str, int] = {}

        for offset in range(total_days):
            day = first_day + timedelta(days=offset)
            formatted = format_date(day)
            if predicate(day, formatted):
                self._index[formatted] = len(self._workdays)
                self._workdays.append(formatted)

        if debug_enabled():
            logger.debug(
                f"Calendar {self.start_date} x {total_days} days: {len(self._workdays)} workdays"
            )

    @property
    def end_date(self) -> str:
        """Last calendar day covered by the window."""
        return format_date(to_date(self.start_date) + timedelta(days=self.total_days - 1))

    @property
    def workdays(self) -> tuple[str, ...]:
        """All workdays in the window, in chronological order."""
        return tuple(self._workdays)

    def __len__(self) -> int:
        return len(self._workdays)

    def __contains__(self, day: object) -> bool:
        return day in self._index

    def is_workday(self, day: str) -> bool:
        """Check whether ``day`` is a workday inside the window."""
        return day in self._index

    def index_of(self, day: str) -> int | None:
        """Zero-based position of ``day`` in the workday list, if it is a workday."""
        return self._index.get(day)

    def workday_at_offset(self, base_date: str, offset: int) -> str | None:
        """Return the workday ``offset`` workdays away from ``base_date``.

        A ``base_date`` that is not a workday is first moved to the nearest
        workday in the direction of ``offset``; with ``offset == 0`` there is
        no direction and the result is ``None``.

        Args:
            base_date: Date in ``YYYY/MM/DD`` form
            offset: Workdays to move (positive = forward, negative = backward)

        Returns:
            The resulting workday, or None if it falls outside the window
        """
        base_index = self._index.get(base_date)
        if base_index is None:
            base_index = self._nearest_workday_index(base_date, offset)
            if base_index is None:
                return None

        target = base_index + offset
        if target < 0 or target >= len(self._workdays):
            return None
        return self._workdays[target]

    def next_workday(self, base_date: str) -> str | None:
        """Return the closest workday strictly after ``base_date``."""
        if base_date in self._index:
            return self.workday_at_offset(base_date, 1)
        index = self._nearest_workday_index(base_date, 1)
        return self._workdays[index] if index is not None else None

    def previous_workday(self, base_date: str) -> str | None:
        """Return the closest workday strictly before ``base_date``."""
        if base_date in self._index:
            return self.workday_at_offset(base_date, -1)
        index = self._nearest_workday_index(base_date, -1)
        return self._workdays[index] if index is not None else None

    def _nearest_workday_index(self, base_date: str, direction: int) -> int | None:
        """Index of the nearest workday after (direction > 0) or before (< 0) a non-workday."""
        insertion = bisect.bisect_left(self._workdays, base_date)
        if direction > 0:
            return insertion if insertion < len(self._workdays) else None
        if direction < 0:
            return insertion - 1 if insertion > 0 else None
        return None


def parse_date(value: object) -> str | None:
    """Return ``value`` if it is a valid ``YYYY/MM/DD`` date string, else None.

    Dates are passed through untouched so they stay comparable as strings.
    """
    if isinstance(value, date):
        return format_date(value)
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        return None
    try:
        to_date(value)
    except ValueError:
        return None
    return value
