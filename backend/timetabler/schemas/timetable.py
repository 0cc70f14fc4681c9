from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator, model_validator

DAY_NAMES = {
    0: "Sunday",
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
}

WORKING_DAYS: tuple[int, ...] = (1, 2, 3, 4, 5)

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def parse_time_to_minutes(value: str) -> int:
    if not TIME_PATTERN.match(value):
        raise ValueError("Time must be in HH:MM 24-hour format")
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(value: int) -> str:
    hours = value // 60
    minutes = value % 60
    return f"{hours:02d}:{minutes:02d}"


class ScheduledSession(BaseModel):
    """One placed occurrence of a subject in the weekly grid.

    Sessions produced by the constrained allocator always carry a teacher and a
    room. Sessions produced from a curriculum have neither, and carry the
    ``topic``/``week``/``credits`` metadata instead.
    """

    id: str = Field(min_length=1, max_length=64)
    day_of_week: int = Field(ge=0, le=6)
    start_time: str
    end_time: str
    subject_id: str | None = None
    subject_name: str = Field(min_length=1, max_length=200)
    teacher_id: str | None = None
    room_id: str | None = None
    class_name: str = Field(min_length=1, max_length=200)
    topic: str | None = None
    week: int | None = Field(default=None, ge=1, le=53)
    credits: int | None = Field(default=None, ge=0, le=20)

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, value: str) -> str:
        if not TIME_PATTERN.match(value):
            raise ValueError("Time must be in HH:MM 24-hour format")
        return value

    @model_validator(mode="after")
    def validate_time_order(self) -> "ScheduledSession":
        if parse_time_to_minutes(self.end_time) <= parse_time_to_minutes(self.start_time):
            raise ValueError("end_time must be after start_time")
        return self

    @property
    def day(self) -> int:
        return self.day_of_week

    @property
    def start_minute(self) -> int:
        return parse_time_to_minutes(self.start_time)

    @property
    def end_minute(self) -> int:
        return parse_time_to_minutes(self.end_time)

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_of_week]


class GenerationSummary(BaseModel):
    total_sessions: int = 0
    required_sessions: int = 0
    coverage: float = 100.0
    conflict_count: int = 0
