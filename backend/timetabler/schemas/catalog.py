from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from timetabler.schemas.timetable import TIME_PATTERN, parse_time_to_minutes


def _clean_names(values: list[str]) -> list[str]:
    cleaned: list[str] = []
    for value in values:
        item = value.strip()
        if item and item not in cleaned:
            cleaned.append(item)
    return cleaned


class AvailabilityWindow(BaseModel):
    model_config = {"frozen": True}

    day_of_week: int = Field(ge=0, le=6)
    start_time: str
    end_time: str

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, value: str) -> str:
        if not TIME_PATTERN.match(value):
            raise ValueError("Time must be in HH:MM 24-hour format")
        return value

    @model_validator(mode="after")
    def validate_time_order(self) -> "AvailabilityWindow":
        if parse_time_to_minutes(self.end_time) <= parse_time_to_minutes(self.start_time):
            raise ValueError("end_time must be after start_time")
        return self

    @property
    def start_minute(self) -> int:
        return parse_time_to_minutes(self.start_time)

    @property
    def end_minute(self) -> int:
        return parse_time_to_minutes(self.end_time)


class Subject(BaseModel):
    model_config = {"frozen": True}

    id: str = Field(min_length=1, max_length=36)
    name: str = Field(min_length=1, max_length=200)
    code: str | None = Field(default=None, max_length=50)
    duration: int = Field(default=60, ge=0, le=24 * 60)
    room_requirements: list[str] = Field(default_factory=list)
    prerequisites: list[str] = Field(default_factory=list)

    @field_validator("room_requirements", "prerequisites")
    @classmethod
    def normalize_names(cls, value: list[str]) -> list[str]:
        return _clean_names(value)


class Teacher(BaseModel):
    model_config = {"frozen": True}

    id: str = Field(min_length=1, max_length=36)
    name: str = Field(min_length=1, max_length=200)
    subjects: list[str] = Field(default_factory=list)
    availability: list[AvailabilityWindow] = Field(default_factory=list)
    max_hours_per_day: int = Field(default=8, ge=0, le=24)
    max_hours_per_week: int = Field(default=40, ge=0, le=168)

    @field_validator("subjects")
    @classmethod
    def normalize_subjects(cls, value: list[str]) -> list[str]:
        return _clean_names(value)


class Room(BaseModel):
    model_config = {"frozen": True}

    id: str = Field(min_length=1, max_length=36)
    name: str = Field(min_length=1, max_length=100)
    capacity: int = Field(default=30, ge=0, le=5000)
    equipment: list[str] = Field(default_factory=list)
    location: str | None = Field(default=None, max_length=200)

    @field_validator("equipment")
    @classmethod
    def normalize_equipment(cls, value: list[str]) -> list[str]:
        return _clean_names(value)


class Student(BaseModel):
    model_config = {"frozen": True}

    id: str = Field(min_length=1, max_length=36)
    name: str = Field(min_length=1, max_length=200)
    class_name: str = Field(min_length=1, max_length=200)
    subjects: list[str] = Field(default_factory=list)

    @field_validator("subjects")
    @classmethod
    def normalize_subjects(cls, value: list[str]) -> list[str]:
        return _clean_names(value)


class Catalog(BaseModel):
    """Read-only snapshot of the entity store taken at the start of a run."""

    model_config = {"frozen": True}

    subjects: list[Subject] = Field(default_factory=list)
    teachers: list[Teacher] = Field(default_factory=list)
    rooms: list[Room] = Field(default_factory=list)
    students: list[Student] = Field(default_factory=list)
