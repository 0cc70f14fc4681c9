from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from time import perf_counter
from typing import Sequence

from timetabler.schemas.catalog import Catalog, Room, Student, Subject, Teacher
from timetabler.schemas.generator import GenerationResult
from timetabler.schemas.timetable import GenerationSummary, ScheduledSession
from timetabler.services.availability import overlaps, within_availability
from timetabler.services.conflict_service import ConflictReporter
from timetabler.services.time_grid import TimeSlot
from timetabler.services.workload import select_least_loaded_teacher, select_least_used_room

logger = logging.getLogger(__name__)

SESSION_ID_PREFIX = "ses"


def required_session_count(subject: Subject) -> int:
    return math.ceil(subject.duration / 60)


def subjects_for_class(students: Sequence[Student], subjects: Sequence[Subject]) -> list[Subject]:
    wanted: set[str] = set()
    for student in students:
        wanted.update(student.subjects)
    return [subject for subject in subjects if subject.name in wanted]


@dataclass
class AllocationContext:
    """Mutable state of one allocation run.

    Every placement decision reads everything placed before it, so a context
    must never be shared between runs or touched from two threads.
    """

    reporter: ConflictReporter = field(default_factory=ConflictReporter)
    sessions: list[ScheduledSession] = field(default_factory=list)
    required_sessions: int = 0

    def next_session_id(self) -> str:
        return f"{SESSION_ID_PREFIX}-{len(self.sessions) + 1:04d}"

    def teacher_is_free(self, teacher: Teacher, slot: TimeSlot) -> bool:
        return not any(
            session.teacher_id == teacher.id and overlaps(session, slot) for session in self.sessions
        )

    def room_is_free(self, room: Room, slot: TimeSlot) -> bool:
        return not any(session.room_id == room.id and overlaps(session, slot) for session in self.sessions)

    def class_is_free(self, class_name: str, slot: TimeSlot) -> bool:
        return not any(
            session.class_name == class_name and overlaps(session, slot) for session in self.sessions
        )


class ConstrainedAllocator:
    """Single-pass greedy placement of catalog subjects onto a time grid.

    Classes are handled in the order given, subjects in catalog order and slots
    in grid order. Nothing is revisited once placed, so equal inputs give equal
    outputs.
    """

    def __init__(self, grid: Sequence[TimeSlot], *, prevent_class_overlap: bool = False) -> None:
        self.grid = list(grid)
        self.prevent_class_overlap = prevent_class_overlap

    def generate(
        self,
        class_names: Sequence[str],
        subjects: Sequence[Subject],
        teachers: Sequence[Teacher],
        rooms: Sequence[Room],
        students: Sequence[Student],
    ) -> GenerationResult:
        started = perf_counter()
        context = AllocationContext()
        logger.info(
            "ALLOCATION START | classes=%s | subjects=%s | teachers=%s | rooms=%s | slots=%s",
            len(class_names),
            len(subjects),
            len(teachers),
            len(rooms),
            len(self.grid),
        )

        for class_name in class_names:
            class_students = [student for student in students if student.class_name == class_name]
            class_subjects = subjects_for_class(class_students, subjects)
            if not class_subjects:
                logger.debug("Class %s has no catalog subjects to schedule", class_name)
            for subject in class_subjects:
                self._assign_subject(context, subject, class_name, teachers, rooms)

        summary = self._summarize(context)
        logger.info(
            "ALLOCATION DONE | sessions=%s | required=%s | coverage=%.1f | conflicts=%s | elapsed_ms=%.1f",
            summary.total_sessions,
            summary.required_sessions,
            summary.coverage,
            summary.conflict_count,
            (perf_counter() - started) * 1000,
        )
        return GenerationResult(
            sessions=list(context.sessions),
            conflicts=context.reporter.conflicts,
            summary=summary,
        )

    def generate_for_catalog(self, class_names: Sequence[str], catalog: Catalog) -> GenerationResult:
        return self.generate(class_names, catalog.subjects, catalog.teachers, catalog.rooms, catalog.students)

    def _assign_subject(
        self,
        context: AllocationContext,
        subject: Subject,
        class_name: str,
        teachers: Sequence[Teacher],
        rooms: Sequence[Room],
    ) -> int:
        required = required_session_count(subject)
        context.required_sessions += required

        candidate_teachers = [teacher for teacher in teachers if subject.name in teacher.subjects]
        if not candidate_teachers:
            context.reporter.no_teacher(subject.name, subject.id)
            return 0

        requirements = set(subject.room_requirements)
        candidate_rooms = [room for room in rooms if requirements.issubset(room.equipment)]
        if not candidate_rooms:
            context.reporter.no_room(subject.name, subject.id)
            return 0

        assigned = 0

        for slot in self.grid:
            if assigned >= required:
                break
            if self.prevent_class_overlap and not context.class_is_free(class_name, slot):
                continue

            free_teachers = [
                teacher
                for teacher in candidate_teachers
                if within_availability(teacher, slot) and context.teacher_is_free(teacher, slot)
            ]
            if not free_teachers:
                continue
            free_rooms = [room for room in candidate_rooms if context.room_is_free(room, slot)]
            if not free_rooms:
                continue

            teacher, load = select_least_loaded_teacher(free_teachers, context.sessions)
            if load >= 1:
                # Least loaded free teacher is already at the weekly cap.
                continue
            room, _ = select_least_used_room(free_rooms, context.sessions)

            context.sessions.append(
                ScheduledSession(
                    id=context.next_session_id(),
                    day_of_week=slot.day,
                    start_time=slot.start_time,
                    end_time=slot.end_time,
                    subject_id=subject.id,
                    subject_name=subject.name,
                    teacher_id=teacher.id,
                    room_id=room.id,
                    class_name=class_name,
                )
            )
            assigned += 1

        if assigned < required:
            context.reporter.shortfall(subject.name, assigned, required, class_name=class_name, subject_id=subject.id)
        return assigned

    @staticmethod
    def _summarize(context: AllocationContext) -> GenerationSummary:
        total = len(context.sessions)
        required = context.required_sessions
        coverage = 100.0 if required == 0 else round(total / required * 100, 1)
        return GenerationSummary(
            total_sessions=total,
            required_sessions=required,
            coverage=coverage,
            conflict_count=len(context.reporter.conflicts),
        )
