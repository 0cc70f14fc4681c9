from __future__ import annotations

from pydantic import BaseModel, Field

from timetabler.schemas.catalog import Catalog
from timetabler.schemas.conflict import Conflict
from timetabler.schemas.timetable import GenerationSummary, ScheduledSession


class GridConfig(BaseModel):
    start_hour: int = 8
    end_hour: int = 17
    session_minutes: int = 60
    lunch_start: str = "12:00"
    lunch_end: str = "13:00"


class GenerateTimetableRequest(BaseModel):
    class_names: list[str] = Field(default_factory=list)
    catalog: Catalog = Field(default_factory=Catalog)
    grid: GridConfig | None = None
    prevent_class_overlap: bool | None = None


class GenerationResult(BaseModel):
    sessions: list[ScheduledSession] = Field(default_factory=list)
    conflicts: list[Conflict] = Field(default_factory=list)
    summary: GenerationSummary = Field(default_factory=GenerationSummary)
