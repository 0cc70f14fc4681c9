from __future__ import annotations

import math
from typing import Sequence

from timetabler.schemas.catalog import Room, Teacher
from timetabler.schemas.timetable import ScheduledSession


def teacher_load(teacher: Teacher, sessions: Sequence[ScheduledSession]) -> float:
    """Assigned sessions divided by the weekly hour cap.

    Every session counts as one hour whatever its real length; callers rely on
    that approximation, so do not switch it to minute accounting.
    """
    assigned = sum(1 for session in sessions if session.teacher_id == teacher.id)
    if teacher.max_hours_per_week <= 0:
        return math.inf
    return assigned / teacher.max_hours_per_week


def room_usage(room: Room, sessions: Sequence[ScheduledSession]) -> int:
    return sum(1 for session in sessions if session.room_id == room.id)


def select_least_loaded_teacher(
    teachers: Sequence[Teacher],
    sessions: Sequence[ScheduledSession],
) -> tuple[Teacher, float] | None:
    # Strict "<" keeps the earliest catalog entry on ties.
    best: tuple[Teacher, float] | None = None
    for teacher in teachers:
        load = teacher_load(teacher, sessions)
        if best is None or load < best[1]:
            best = (teacher, load)
    return best


def select_least_used_room(
    rooms: Sequence[Room],
    sessions: Sequence[ScheduledSession],
) -> tuple[Room, int] | None:
    best: tuple[Room, int] | None = None
    for room in rooms:
        usage = room_usage(room, sessions)
        if best is None or usage < best[1]:
            best = (room, usage)
    return best
