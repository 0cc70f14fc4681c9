from __future__ import annotations

from collections import defaultdict
import logging
import random
from typing import Sequence

from timetabler.schemas.curriculum import (
    MAX_COURSE_CREDITS,
    MAX_SESSIONS_PER_WEEK,
    CurriculumCourse,
    CurriculumResult,
)
from timetabler.schemas.timetable import ScheduledSession
from timetabler.services.conflict_service import ConflictReporter
from timetabler.services.time_grid import TimeSlot, curriculum_slot_grid

logger = logging.getLogger(__name__)

DEFAULT_CURRICULUM_TITLE = "Curriculum"
DEFAULT_CREDITS = 3

# First matching rule wins.
CREDIT_KEYWORD_RULES: tuple[tuple[tuple[str, ...], int], ...] = (
    (("lab", "practical", "workshop"), 1),
    (("elective", "optional"), 3),
    (("research", "methodology", "project"), 2),
    (("core", "fundamental", "advanced"), 4),
)


def infer_credits(course_name: str) -> int:
    """Guess weekly credits for a course the extractor gave no credit count for."""
    lowered = course_name.lower()
    for keywords, credits in CREDIT_KEYWORD_RULES:
        if any(keyword in lowered for keyword in keywords):
            return credits
    return DEFAULT_CREDITS


def derive_seed(title: str, course_count: int) -> int:
    return len(title) + course_count


def sessions_needed(credits: int) -> int:
    return min(credits, MAX_SESSIONS_PER_WEEK)


class OccupancyGrid:
    """Day x slot booleans, indexed by position in the curriculum grid."""

    def __init__(self, slots: Sequence[TimeSlot]) -> None:
        by_day: dict[int, list[TimeSlot]] = defaultdict(list)
        for slot in slots:
            by_day[slot.day].append(slot)
        self.days: list[int] = sorted(by_day)
        self.slots: list[list[TimeSlot]] = [by_day[day] for day in self.days]
        self.taken: list[list[bool]] = [[False] * len(day_slots) for day_slots in self.slots]

    def free_slot_indices(self, day_index: int) -> list[int]:
        return [index for index, taken in enumerate(self.taken[day_index]) if not taken]

    def days_with_free_slot(self) -> list[int]:
        return [day_index for day_index in range(len(self.days)) if self.free_slot_indices(day_index)]

    def occupy(self, day_index: int, slot_index: int) -> TimeSlot:
        if self.taken[day_index][slot_index]:
            raise ValueError(f"Slot {slot_index} on day {self.days[day_index]} is already occupied")
        self.taken[day_index][slot_index] = True
        return self.slots[day_index][slot_index]


class CreditDrivenPlacer:
    """Spreads curriculum courses over the week from their credit counts alone.

    There is no teacher or room at this stage, so the only guarantee is that no
    two sessions share a day and slot. All randomness comes from one
    ``random.Random`` seeded per run; the seed is returned with the result so
    any placement can be replayed.
    """

    def __init__(self, grid: Sequence[TimeSlot] | None = None) -> None:
        self.grid = list(grid) if grid is not None else curriculum_slot_grid()

    def place(
        self,
        title: str,
        courses: Sequence[CurriculumCourse],
        seed: int | None = None,
    ) -> CurriculumResult:
        title = title.strip()
        run_seed = derive_seed(title, len(courses)) if seed is None else seed
        rng = random.Random(run_seed)
        reporter = ConflictReporter()
        occupancy = OccupancyGrid(self.grid)
        class_name = title or DEFAULT_CURRICULUM_TITLE
        sessions: list[ScheduledSession] = []

        logger.info(
            "CURRICULUM PLACEMENT START | title=%s | courses=%s | seed=%s",
            class_name,
            len(courses),
            run_seed,
        )

        accepted, skipped = self._validate(courses)
        order = list(accepted)
        rng.shuffle(order)

        for name, credits in order:
            needed = sessions_needed(credits)
            if needed == 0:
                continue
            days = occupancy.days_with_free_slot()
            rng.shuffle(days)
            chosen_days = days[:needed]

            for session_number, day_index in enumerate(chosen_days, start=1):
                free = occupancy.free_slot_indices(day_index)
                if not free:
                    reporter.unplaced_day(name, occupancy.days[day_index])
                    continue
                slot = occupancy.occupy(day_index, rng.choice(free))
                sessions.append(
                    ScheduledSession(
                        id=f"cur-{len(sessions) + 1:04d}",
                        day_of_week=slot.day,
                        start_time=slot.start_time,
                        end_time=slot.end_time,
                        subject_name=name,
                        class_name=class_name,
                        topic=f"{name} - Session {session_number}",
                        week=1,
                        credits=credits,
                    )
                )

            if len(chosen_days) < needed:
                reporter.shortfall(name, len(chosen_days), needed)

        logger.info(
            "CURRICULUM PLACEMENT DONE | title=%s | sessions=%s | skipped=%s | conflicts=%s | seed=%s",
            class_name,
            len(sessions),
            len(skipped),
            len(reporter.conflicts),
            run_seed,
        )
        return CurriculumResult(
            title=class_name,
            seed=run_seed,
            sessions=sessions,
            conflicts=reporter.conflicts,
            skipped_courses=skipped,
        )

    @staticmethod
    def _validate(courses: Sequence[CurriculumCourse]) -> tuple[list[tuple[str, int]], list[str]]:
        accepted: list[tuple[str, int]] = []
        skipped: list[str] = []
        for course in courses:
            name = (course.name or "").strip()
            if not name:
                logger.warning("Skipping curriculum course with an empty name")
                skipped.append(course.name or "")
                continue
            credits = course.credits
            if credits is None:
                credits = infer_credits(name)
                logger.debug("Inferred %s credits for %s", credits, name)
            if not 0 <= credits <= MAX_COURSE_CREDITS:
                logger.warning("Skipping curriculum course %s with out-of-range credits %s", name, credits)
                skipped.append(name)
                continue
            accepted.append((name, credits))
        return accepted, skipped
