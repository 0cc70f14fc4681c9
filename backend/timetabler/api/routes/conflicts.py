from fastapi import APIRouter

from timetabler.schemas.conflict import AuditRequest, ConflictReport
from timetabler.services.conflict_service import SUGGESTED_RESOLUTIONS, audit_sessions

router = APIRouter()


@router.post("/detect", response_model=ConflictReport)
def detect_conflicts(payload: AuditRequest) -> ConflictReport:
    # Audits a previously generated or externally supplied schedule; nothing is corrected.
    return audit_sessions(payload.sessions)


@router.get("/resolutions")
def list_resolutions() -> dict[str, list[str]]:
    return {kind: list(remedies) for kind, remedies in SUGGESTED_RESOLUTIONS.items()}
