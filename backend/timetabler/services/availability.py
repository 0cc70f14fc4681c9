from __future__ import annotations

from typing import Protocol

from timetabler.schemas.catalog import Teacher


class Interval(Protocol):
    """Anything placed on the weekly grid: a TimeSlot or a ScheduledSession."""

    @property
    def day(self) -> int: ...

    @property
    def start_minute(self) -> int: ...

    @property
    def end_minute(self) -> int: ...


def overlaps(first: Interval, second: Interval) -> bool:
    # Half-open: 09:00-10:00 and 10:00-11:00 do not overlap.
    if first.day != second.day:
        return False
    return first.start_minute < second.end_minute and second.start_minute < first.end_minute


def within_availability(teacher: Teacher, slot: Interval) -> bool:
    for window in teacher.availability:
        if window.day_of_week != slot.day:
            continue
        if window.start_minute <= slot.start_minute and slot.end_minute <= window.end_minute:
            return True
    return False
