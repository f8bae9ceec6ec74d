from typing import List

from fastapi import APIRouter, Path

from schemas.response_schema import APIResponse
from schemas.script import (
    MemorizationOut,
    MemorizationRequest,
    SampleScriptSummary,
    ScriptOut,
    ScriptTextRequest,
)
from services.script_service import (
    breakdown_script,
    build_memorization_view,
    list_sample_scripts,
    retrieve_sample_script,
)

router = APIRouter(prefix="/scripts", tags=["Scripts"])


# ------------------------------
# Break a script into beats
# ------------------------------
@router.post("/beats", response_model=APIResponse[ScriptOut])
async def create_beats(payload: ScriptTextRequest):
    """
    Splits script text on sentence-ending punctuation and line breaks.
    """
    script = breakdown_script(payload.text)
    return APIResponse(status_code=200, data=script, detail=f"Parsed {len(script.beats)} beats")


# ------------------------------
# Sample scripts
# ------------------------------
@router.get("/samples", response_model=APIResponse[List[SampleScriptSummary]])
async def list_samples():
    return APIResponse(status_code=200, data=list_sample_scripts(), detail="Fetched successfully")


@router.get("/samples/{key}", response_model=APIResponse[ScriptOut])
async def get_sample(key: str = Path(..., description="Sample script key, e.g. 'hamlet'")):
    script = retrieve_sample_script(key)
    return APIResponse(status_code=200, data=script, detail="Sample script fetched")


# ------------------------------
# Memorization prompt for a beat
# ------------------------------
@router.post("/memorization", response_model=APIResponse[MemorizationOut])
async def memorization_view(payload: MemorizationRequest):
    """
    Stage 1 shows the full line, stage 2 hides roughly a third of the words, stage 3 hides everything.
    """
    view = build_memorization_view(payload)
    return APIResponse(status_code=200, data=view, detail="Memorization view built")
