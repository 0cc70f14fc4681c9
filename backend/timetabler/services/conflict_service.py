from __future__ import annotations

from collections import defaultdict
import logging
from typing import Callable, Dict, Iterable, List, Sequence

from timetabler.schemas.conflict import Conflict, ConflictKind, ConflictReport, ConflictSeverity
from timetabler.schemas.timetable import DAY_NAMES, ScheduledSession
from timetabler.services.availability import overlaps

logger = logging.getLogger(__name__)

SUGGESTED_RESOLUTIONS: Dict[str, List[str]] = {
    "teacher_conflict": [
        "Assign a different teacher to one of the conflicting classes",
        "Reschedule one of the classes to a different time slot",
        "Split the class into smaller groups with different teachers",
    ],
    "room_conflict": [
        "Assign a different room to one of the conflicting classes",
        "Reschedule one of the classes to a different time slot",
        "Use a larger room that can accommodate both classes",
    ],
    "student_conflict": [
        "Reschedule one of the classes to a different time slot",
        "Split the class into smaller groups",
        "Assign different students to different class sections",
    ],
    "time_conflict": [
        "Adjust the time slots to avoid overlap",
        "Reduce the duration of one of the classes",
        "Move one of the classes to a different day",
    ],
}
FALLBACK_RESOLUTIONS = ["Contact administrator for assistance"]


def suggested_resolutions(kind: str) -> List[str]:
    return list(SUGGESTED_RESOLUTIONS.get(kind, FALLBACK_RESOLUTIONS))


def build_report(conflicts: Sequence[Conflict]) -> ConflictReport:
    kinds: List[str] = []
    for conflict in conflicts:
        if conflict.kind not in kinds:
            kinds.append(conflict.kind)
    return ConflictReport(
        conflicts=list(conflicts),
        suggested_resolutions={kind: suggested_resolutions(kind) for kind in kinds},
    )


class ConflictReporter:
    """Ordered, de-duplicated record of everything a run could not satisfy.

    One reporter belongs to one run. Conflicts are data: nothing here raises,
    and no remedy is ever applied automatically.
    """

    def __init__(self) -> None:
        self._conflicts: List[Conflict] = []
        self._seen: set[tuple[str, str, str, str | None]] = set()

    @property
    def conflicts(self) -> List[Conflict]:
        return list(self._conflicts)

    def record(
        self,
        kind: ConflictKind,
        message: str,
        severity: ConflictSeverity,
        affected_sessions: Iterable[str] = (),
        identity: str | None = None,
    ) -> Conflict | None:
        # identity separates records whose text matches but whose source differs,
        # e.g. two catalog subjects sharing a display name.
        key = (kind, message, severity, identity)
        if key in self._seen:
            return None
        self._seen.add(key)
        conflict = Conflict(kind=kind, message=message, severity=severity, affected_sessions=list(affected_sessions))
        self._conflicts.append(conflict)
        logger.info("CONFLICT | kind=%s | severity=%s | %s", kind, severity, message)
        return conflict

    def no_teacher(self, subject_name: str, subject_id: str | None = None) -> Conflict | None:
        return self.record(
            "teacher_conflict", f"No available teacher for subject: {subject_name}", "high", identity=subject_id
        )

    def no_room(self, subject_name: str, subject_id: str | None = None) -> Conflict | None:
        return self.record(
            "room_conflict", f"No suitable room for subject: {subject_name}", "high", identity=subject_id
        )

    def shortfall(
        self,
        subject_name: str,
        assigned: int,
        required: int,
        class_name: str | None = None,
        subject_id: str | None = None,
    ) -> Conflict | None:
        suffix = f" in {class_name}" if class_name else ""
        return self.record(
            "time_conflict",
            f"Could not assign all required slots for {subject_name}{suffix}. Assigned {assigned}/{required}",
            "medium",
            identity=subject_id,
        )

    def unplaced_day(self, course_name: str, day: int) -> Conflict | None:
        return self.record(
            "time_conflict",
            f"No free slot left on {DAY_NAMES[day]} for {course_name}; session skipped",
            "low",
        )

    def audit(self, sessions: Sequence[ScheduledSession]) -> List[Conflict]:
        """Re-derive the double-booking invariants over a finished session list."""
        found: List[Conflict] = []
        checks: list[tuple[ConflictKind, str, Callable[[ScheduledSession], str | None]]] = [
            ("teacher_conflict", "Teacher", lambda s: s.teacher_id),
            ("room_conflict", "Room", lambda s: s.room_id),
            ("student_conflict", "Class", lambda s: s.class_name),
        ]
        for kind, label, key_of in checks:
            groups: dict[str, list[ScheduledSession]] = defaultdict(list)
            for session in sessions:
                key = key_of(session)
                if key:
                    groups[key].append(session)

            for key, group in groups.items():
                n = len(group)
                for i in range(n):
                    first = group[i]
                    for j in range(i + 1, n):
                        second = group[j]
                        if not overlaps(first, second):
                            continue
                        conflict = self.record(
                            kind,
                            (
                                f"{label} {key} double-booked on {first.day_name}: "
                                f"{first.subject_name} {first.start_time}-{first.end_time} and "
                                f"{second.subject_name} {second.start_time}-{second.end_time}"
                            ),
                            "high",
                            affected_sessions=[first.id, second.id],
                            identity=f"{first.id}/{second.id}",
                        )
                        if conflict is not None:
                            found.append(conflict)
        return found


def audit_sessions(sessions: Sequence[ScheduledSession]) -> ConflictReport:
    reporter = ConflictReporter()
    conflicts = reporter.audit(sessions)
    logger.info("TIMETABLE AUDIT | sessions=%s | conflicts=%s", len(sessions), len(conflicts))
    return build_report(conflicts)
