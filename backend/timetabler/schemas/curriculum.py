from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from timetabler.schemas.conflict import Conflict
from timetabler.schemas.timetable import ScheduledSession

MAX_COURSE_CREDITS = 20
MAX_SESSIONS_PER_WEEK = 5
INVALID_CREDITS = -1


class CurriculumCourse(BaseModel):
    # Extractor output is taken as-is; the placer skips entries that fail its checks.
    name: str | None = None
    credits: int | None = None

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("credits", mode="before")
    @classmethod
    def coerce_credits(cls, value: Any) -> int | None:
        if value is None:
            return None
        if isinstance(value, bool):
            return INVALID_CREDITS
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if value.is_integer() else INVALID_CREDITS
        if isinstance(value, str) and value.strip().lstrip("-").isdigit():
            return int(value.strip())
        return INVALID_CREDITS


class CurriculumRequest(BaseModel):
    title: str = Field(default="", max_length=500)
    courses: list[CurriculumCourse] = Field(default_factory=list)
    seed: int | None = Field(default=None, ge=0, le=2_000_000_000)


class CurriculumResult(BaseModel):
    title: str
    seed: int
    sessions: list[ScheduledSession] = Field(default_factory=list)
    conflicts: list[Conflict] = Field(default_factory=list)
    skipped_courses: list[str] = Field(default_factory=list)
