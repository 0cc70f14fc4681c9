from timetabler.schemas.catalog import AvailabilityWindow, Teacher
from timetabler.schemas.timetable import ScheduledSession
from timetabler.services.availability import overlaps, within_availability
from timetabler.services.time_grid import TimeSlot


def slot(day, start, end):
    return TimeSlot(day=day, start_minute=start * 60, end_minute=end * 60)


def test_slot_inside_window_is_available():
    teacher = Teacher(
        id="t1",
        name="Ada",
        availability=[AvailabilityWindow(day_of_week=1, start_time="09:00", end_time="12:00")],
    )
    assert within_availability(teacher, slot(1, 9, 10))
    assert within_availability(teacher, slot(1, 11, 12))
    assert not within_availability(teacher, slot(1, 8, 9))
    assert not within_availability(teacher, slot(1, 11, 13))
    assert not within_availability(teacher, slot(2, 9, 10))


def test_any_window_on_the_day_is_enough():
    teacher = Teacher(
        id="t1",
        name="Ada",
        availability=[
            AvailabilityWindow(day_of_week=3, start_time="08:00", end_time="09:00"),
            AvailabilityWindow(day_of_week=3, start_time="14:00", end_time="16:00"),
        ],
    )
    assert within_availability(teacher, slot(3, 15, 16))
    assert not within_availability(teacher, slot(3, 10, 11))


def test_teacher_without_windows_is_never_available():
    assert not within_availability(Teacher(id="t1", name="Ada"), slot(1, 9, 10))


def test_overlap_is_half_open_and_day_qualified():
    assert overlaps(slot(1, 9, 10), slot(1, 9, 10))
    assert overlaps(slot(1, 9, 11), slot(1, 10, 12))
    assert not overlaps(slot(1, 9, 10), slot(1, 10, 11))
    assert not overlaps(slot(1, 9, 10), slot(2, 9, 10))


def test_overlap_accepts_sessions_and_slots():
    session = ScheduledSession(
        id="s1",
        day_of_week=2,
        start_time="10:00",
        end_time="11:00",
        subject_name="Mathematics",
        class_name="Grade 10A",
    )
    assert overlaps(session, TimeSlot(day=2, start_minute=630, end_minute=690))
    assert not overlaps(session, TimeSlot(day=2, start_minute=660, end_minute=720))
