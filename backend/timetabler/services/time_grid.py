from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from timetabler.core.exceptions import GridConfigurationError
from timetabler.schemas.generator import GridConfig
from timetabler.schemas.timetable import TIME_PATTERN, WORKING_DAYS, minutes_to_time, parse_time_to_minutes

CURRICULUM_START_HOUR = 9
CURRICULUM_END_HOUR = 16


@dataclass(frozen=True)
class TimeSlot:
    day: int
    start_minute: int
    end_minute: int

    @property
    def start_time(self) -> str:
        return minutes_to_time(self.start_minute)

    @property
    def end_time(self) -> str:
        return minutes_to_time(self.end_minute)

    @property
    def duration(self) -> int:
        return self.end_minute - self.start_minute


def validate_grid_config(config: GridConfig) -> None:
    """Reject a grid configuration before any run is started with it."""
    details = config.model_dump()
    # Session times are HH:MM with hours 00-23, so the last slot must end by 23:00.
    if not 0 <= config.start_hour <= 23 or not 0 <= config.end_hour <= 23:
        raise GridConfigurationError("Working hours must lie between 0 and 23", details=details)
    if config.start_hour >= config.end_hour:
        raise GridConfigurationError("Start hour must be before end hour", details=details)
    if config.session_minutes <= 0:
        raise GridConfigurationError("Session length must be a positive number of minutes", details=details)
    for value in (config.lunch_start, config.lunch_end):
        if not TIME_PATTERN.match(value):
            raise GridConfigurationError("Lunch times must be in HH:MM 24-hour format", details=details)
    if parse_time_to_minutes(config.lunch_end) <= parse_time_to_minutes(config.lunch_start):
        raise GridConfigurationError("Lunch end must be after lunch start", details=details)


def build_time_grid(
    start_hour: int,
    end_hour: int,
    session_minutes: int = 60,
    lunch_start: str = "12:00",
    lunch_end: str = "13:00",
    days: Iterable[int] = WORKING_DAYS,
) -> list[TimeSlot]:
    """Enumerate the bookable intervals of a working week.

    Slots are ordered day-major and then by start time; that order is the walk
    order of the allocator and so determines its output. A slot touching the
    lunch interval is dropped and the cursor resumes at the end of lunch.
    """
    if start_hour >= end_hour or session_minutes <= 0:
        return []

    lunch_from = parse_time_to_minutes(lunch_start)
    lunch_to = parse_time_to_minutes(lunch_end)
    day_start = start_hour * 60
    day_end = end_hour * 60

    slots: list[TimeSlot] = []
    for day in days:
        cursor = day_start
        while cursor + session_minutes <= day_end:
            end = cursor + session_minutes
            if cursor < lunch_to and end > lunch_from:
                cursor = max(cursor + 1, lunch_to)
                continue
            slots.append(TimeSlot(day=day, start_minute=cursor, end_minute=end))
            cursor = end
    return slots


def build_grid_from_config(config: GridConfig) -> list[TimeSlot]:
    validate_grid_config(config)
    return build_time_grid(
        config.start_hour,
        config.end_hour,
        session_minutes=config.session_minutes,
        lunch_start=config.lunch_start,
        lunch_end=config.lunch_end,
    )


def curriculum_slot_grid() -> list[TimeSlot]:
    # 09-10, 10-11, 11-12, 13-14, 14-15, 15-16 for Monday..Friday
    return build_time_grid(CURRICULUM_START_HOUR, CURRICULUM_END_HOUR)
