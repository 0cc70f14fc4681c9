from fastapi import APIRouter

from timetabler.schemas.curriculum import CurriculumRequest, CurriculumResult
from timetabler.services.curriculum_placer import CreditDrivenPlacer

router = APIRouter()


@router.post("/generate", response_model=CurriculumResult)
def generate_from_curriculum(payload: CurriculumRequest) -> CurriculumResult:
    return CreditDrivenPlacer().place(payload.title, payload.courses, seed=payload.seed)
