from fastapi import APIRouter

from schemas.alignment import AlignmentReport, AlignmentRequest
from schemas.response_schema import APIResponse
from services.alignment_service import build_alignment_report

router = APIRouter(prefix="/alignment", tags=["Alignment"])


# ------------------------------
# Compare a recited transcript to the script text
# ------------------------------
@router.post("/", response_model=APIResponse[AlignmentReport])
async def align_transcript(payload: AlignmentRequest):
    """
    Classifies every word as correct, substituted, missing or extra.
    """
    report = build_alignment_report(payload)
    return APIResponse(status_code=200, data=report, detail="Alignment computed successfully")
