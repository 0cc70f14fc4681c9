from pydantic import BaseModel, Field
from typing import Literal, List, Dict

from timetabler.schemas.timetable import ScheduledSession

ConflictKind = Literal[
    "teacher_conflict",
    "room_conflict",
    "student_conflict",
    "time_conflict",
]
ConflictSeverity = Literal["low", "medium", "high"]


class Conflict(BaseModel):
    kind: ConflictKind
    message: str
    severity: ConflictSeverity
    affected_sessions: List[str] = Field(default_factory=list)  # session ids, empty for allocation-time conflicts


class ConflictReport(BaseModel):
    conflicts: List[Conflict]
    suggested_resolutions: Dict[str, List[str]]  # remedies keyed by conflict kind


class AuditRequest(BaseModel):
    sessions: List[ScheduledSession]
