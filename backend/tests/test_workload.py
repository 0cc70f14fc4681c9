import math

from timetabler.schemas.catalog import Room, Teacher
from timetabler.schemas.timetable import ScheduledSession
from timetabler.services.workload import (
    room_usage,
    select_least_loaded_teacher,
    select_least_used_room,
    teacher_load,
)


def session(session_id, teacher_id, room_id, start="09:00", end="10:00"):
    return ScheduledSession(
        id=session_id,
        day_of_week=1,
        start_time=start,
        end_time=end,
        subject_name="Mathematics",
        teacher_id=teacher_id,
        room_id=room_id,
        class_name="Grade 10A",
    )


def test_teacher_load_counts_sessions_not_minutes():
    teacher = Teacher(id="t1", name="Ada", max_hours_per_week=4)
    sessions = [
        session("s1", "t1", "r1", "09:00", "11:00"),
        session("s2", "t2", "r1"),
    ]
    assert teacher_load(teacher, sessions) == 0.25


def test_teacher_with_zero_weekly_hours_is_fully_loaded():
    assert teacher_load(Teacher(id="t1", name="Ada", max_hours_per_week=0), []) == math.inf


def test_room_usage_counts_sessions():
    sessions = [session("s1", "t1", "r1"), session("s2", "t2", "r1"), session("s3", "t2", "r2")]
    assert room_usage(Room(id="r1", name="101"), sessions) == 2
    assert room_usage(Room(id="r3", name="103"), sessions) == 0


def test_least_loaded_teacher_ties_go_to_catalog_order():
    first = Teacher(id="t1", name="Ada", max_hours_per_week=10)
    second = Teacher(id="t2", name="Grace", max_hours_per_week=10)
    assert select_least_loaded_teacher([first, second], []) == (first, 0.0)

    chosen, load = select_least_loaded_teacher([first, second], [session("s1", "t1", "r1")])
    assert chosen is second
    assert load == 0.0


def test_load_ratio_prefers_teacher_with_more_headroom():
    busy = Teacher(id="t1", name="Ada", max_hours_per_week=20)
    part_time = Teacher(id="t2", name="Grace", max_hours_per_week=2)
    sessions = [session("s1", "t1", "r1"), session("s2", "t2", "r2", "10:00", "11:00")]
    chosen, load = select_least_loaded_teacher([busy, part_time], sessions)
    assert chosen is busy
    assert load == 0.05


def test_least_used_room():
    rooms = [Room(id="r1", name="101"), Room(id="r2", name="102")]
    assert select_least_used_room(rooms, [session("s1", "t1", "r1")]) == (rooms[1], 0)
    assert select_least_used_room([], []) is None
