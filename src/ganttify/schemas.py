"""Pydantic schemas for plan YAML data validation."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .config import CalendarConfig
from .workdays import format_date


class TaskEntrySchema(BaseModel):
    """Schema for one task in a plan file.

    ``start`` and ``end`` each hold a ``YYYY/MM/DD`` date, a duration such as
    ``"3d"``, or a list of task ids (start after those end / end before those
    start).
    """

    id: int = Field(ge=0)
    name: str = ""
    start: str | list[int] | None = None
    end: str | list[int] | None = None
    actual_start: str | None = None
    actual_end: str | None = None
    progress: int | None = Field(default=None, ge=0, le=100)

    @field_validator("start", "end", "actual_start", "actual_end", mode="before")
    @classmethod
    def coerce_date_to_string(cls, v: Any) -> Any:
        """Convert YAML date objects to YYYY/MM/DD strings."""
        if isinstance(v, date):
            return format_date(v)
        return v


class PlanSchema(BaseModel):
    """Schema for the entire plan YAML data."""

    calendar: CalendarConfig
    tasks: list[TaskEntrySchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_ids(self) -> PlanSchema:
        """Task ids must be unique within a plan."""
        seen: set[int] = set()
        for entry in self.tasks:
            if entry.id in seen:
                raise ValueError(f"Duplicate task id: {entry.id}")
            seen.add(entry.id)
        return self
