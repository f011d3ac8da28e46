"""Calendar configuration and workday calendar construction."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .workdays import WorkdayCalendar, format_date, make_workday_predicate, to_date


def _coerce_date(value: Any) -> Any:
    """Accept ``YYYY/MM/DD`` strings alongside pydantic's own date formats."""
    if isinstance(value, str) and "/" in value:
        return to_date(value.strip())
    return value


class CalendarConfig(BaseModel):
    """Calendar window and non-working days."""

    start: date
    end: date
    exclude_weekends: bool = True
    national_holidays: list[date] = Field(default_factory=list)
    user_holidays: list[date] = Field(default_factory=list)  # Team-specific days off

    @field_validator("start", "end", mode="before")
    @classmethod
    def parse_slash_date(cls, v: Any) -> Any:
        """Allow dates written as YYYY/MM/DD."""
        return _coerce_date(v)

    @field_validator("national_holidays", "user_holidays", mode="before")
    @classmethod
    def parse_slash_dates(cls, v: Any) -> Any:
        """Allow holiday lists written as YYYY/MM/DD; None means no holidays."""
        if v is None:
            return []
        if isinstance(v, list):
            return [_coerce_date(item) for item in v]  # type: ignore[misc]
        return v

    @model_validator(mode="after")
    def check_window(self) -> CalendarConfig:
        """The calendar must not end before it starts."""
        if self.start > self.end:
            raise ValueError(
                f"calendar start ({format_date(self.start)}) is after end ({format_date(self.end)})"
            )
        return self

    @property
    def total_days(self) -> int:
        """Number of calendar days in the window, both ends included."""
        return (self.end - self.start).days + 1

    @property
    def holidays(self) -> set[str]:
        """National and user holidays as ``YYYY/MM/DD`` strings."""
        return {format_date(d) for d in [*self.national_holidays, *self.user_holidays]}


def build_calendar(config: CalendarConfig) -> WorkdayCalendar:
    """Create the workday calendar described by ``config``."""
    predicate = make_workday_predicate(config.holidays, exclude_weekends=config.exclude_weekends)
    return WorkdayCalendar(config.start, config.total_days, predicate)
