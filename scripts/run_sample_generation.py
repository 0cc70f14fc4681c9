"""Run both scheduling strategies over a small sample school and print the result.

Run:
  PYTHONPATH=backend python scripts/run_sample_generation.py
"""

from __future__ import annotations

import logging

from timetabler.schemas.catalog import AvailabilityWindow, Catalog, Room, Student, Subject, Teacher
from timetabler.schemas.curriculum import CurriculumCourse
from timetabler.schemas.timetable import DAY_NAMES
from timetabler.services.allocator import ConstrainedAllocator
from timetabler.services.conflict_service import suggested_resolutions
from timetabler.services.curriculum_placer import CreditDrivenPlacer
from timetabler.services.time_grid import build_time_grid

WEEKDAYS = (1, 2, 3, 4, 5)
CLASSES = ["Grade 10A", "Grade 10B"]


def _weekday_windows(start: str, end: str, days=WEEKDAYS) -> list[AvailabilityWindow]:
    return [AvailabilityWindow(day_of_week=day, start_time=start, end_time=end) for day in days]


def sample_catalog() -> Catalog:
    return Catalog(
        subjects=[
            Subject(id="sub-math", name="Mathematics", duration=240, room_requirements=["whiteboard"]),
            Subject(id="sub-phys", name="Physics", duration=180, room_requirements=["lab"]),
            Subject(id="sub-eng", name="English", duration=135),
            Subject(id="sub-lit", name="Literature", duration=90, prerequisites=["English"]),
            Subject(id="sub-chem", name="Chemistry", duration=120, room_requirements=["fume_hood"]),
        ],
        teachers=[
            Teacher(id="t-smith", name="John Smith", subjects=["Mathematics", "Physics"],
                    availability=_weekday_windows("08:00", "17:00"), max_hours_per_week=12),
            Teacher(id="t-doe", name="Jane Doe", subjects=["English", "Literature"],
                    availability=_weekday_windows("09:00", "13:00", days=(1, 2, 4))),
        ],
        rooms=[
            Room(id="r-101", name="Room 101", capacity=35, equipment=["whiteboard", "projector"]),
            Room(id="r-lab", name="Physics Lab", capacity=24, equipment=["lab", "whiteboard"]),
        ],
        students=[
            Student(id="s-1", name="Asha", class_name="Grade 10A", subjects=["Mathematics", "Physics", "English"]),
            Student(id="s-2", name="Ben", class_name="Grade 10A", subjects=["Literature", "Chemistry"]),
            Student(id="s-3", name="Chen", class_name="Grade 10B", subjects=["Mathematics", "English", "Literature"]),
        ],
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    result = ConstrainedAllocator(build_time_grid(8, 17)).generate_for_catalog(CLASSES, sample_catalog())
    for session in result.sessions:
        print(
            f"{session.class_name:<10} {DAY_NAMES[session.day_of_week]:<9} {session.start_time}-{session.end_time} "
            f"{session.subject_name:<12} {session.teacher_id:<8} {session.room_id}"
        )
    print(f"Coverage: {result.summary.coverage}% ({result.summary.total_sessions}/{result.summary.required_sessions})")
    for conflict in result.conflicts:
        print(f"[{conflict.severity.upper()}] {conflict.kind}: {conflict.message}")
        for remedy in suggested_resolutions(conflict.kind):
            print(f"    - {remedy}")

    curriculum = CreditDrivenPlacer().place(
        "B.Tech CSE Semester 5",
        [
            CurriculumCourse(name="Database Systems", credits=3),
            CurriculumCourse(name="Computer Networks", credits=4),
            CurriculumCourse(name="Compiler Design Lab"),
        ],
    )
    print(f"\nCurriculum {curriculum.title} (seed {curriculum.seed})")
    for session in curriculum.sessions:
        print(f"{DAY_NAMES[session.day_of_week]:<9} {session.start_time}-{session.end_time} {session.topic}")


if __name__ == "__main__":
    main()
