import logging
from time import perf_counter

from fastapi import APIRouter

from timetabler.core.config import get_settings
from timetabler.schemas.generator import GenerateTimetableRequest, GenerationResult, GridConfig
from timetabler.services.allocator import ConstrainedAllocator
from timetabler.services.time_grid import build_grid_from_config

router = APIRouter()
logger = logging.getLogger(__name__)


def default_grid_config() -> GridConfig:
    settings = get_settings()
    return GridConfig(
        start_hour=settings.grid_start_hour,
        end_hour=settings.grid_end_hour,
        session_minutes=settings.grid_session_minutes,
        lunch_start=settings.grid_lunch_start,
        lunch_end=settings.grid_lunch_end,
    )


@router.post("/generate", response_model=GenerationResult)
def generate_timetable(payload: GenerateTimetableRequest) -> GenerationResult:
    started = perf_counter()
    settings = get_settings()
    grid_config = payload.grid or default_grid_config()
    # Raises GridConfigurationError before anything is scheduled.
    grid = build_grid_from_config(grid_config)

    prevent_class_overlap = payload.prevent_class_overlap
    if prevent_class_overlap is None:
        prevent_class_overlap = settings.allocator_prevent_class_overlap

    logger.info(
        "TIMETABLE GENERATION START | classes=%s | grid=%s-%s/%smin | class_overlap_guard=%s",
        ",".join(payload.class_names),
        grid_config.start_hour,
        grid_config.end_hour,
        grid_config.session_minutes,
        prevent_class_overlap,
    )
    allocator = ConstrainedAllocator(grid, prevent_class_overlap=prevent_class_overlap)
    result = allocator.generate_for_catalog(payload.class_names, payload.catalog)
    logger.info(
        "TIMETABLE GENERATION COMPLETE | sessions=%s | conflicts=%s | elapsed_ms=%.1f",
        len(result.sessions),
        len(result.conflicts),
        (perf_counter() - started) * 1000,
    )
    return result
