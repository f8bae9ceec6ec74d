from fastapi import APIRouter

from schemas.performance import (
    CharacterContext,
    ContextPresetsOut,
    GuidanceReport,
    PerformanceReport,
    PerformanceRequest,
    SamplesPerformanceRequest,
)
from schemas.response_schema import APIResponse
from services.performance_service import (
    describe_guidance,
    evaluate_performance,
    evaluate_samples,
    list_context_presets,
)

router = APIRouter(prefix="/performance", tags=["Performance"])


# ------------------------------
# Score a take from precomputed metrics
# ------------------------------
@router.post("/analyze", response_model=APIResponse[PerformanceReport])
async def analyze_take(payload: PerformanceRequest):
    """
    Scores a recorded take against the vocal shape its character context calls for.
    """
    report = evaluate_performance(payload.context, payload.metrics)
    return APIResponse(status_code=200, data=report, detail="Performance analyzed successfully")


# ------------------------------
# Score a take from raw amplitude samples
# ------------------------------
@router.post("/analyze-samples", response_model=APIResponse[PerformanceReport])
async def analyze_samples(payload: SamplesPerformanceRequest):
    """
    Builds the metrics from the recorder's amplitude samples, then scores them.
    """
    report = evaluate_samples(payload)
    return APIResponse(status_code=200, data=report, detail="Performance analyzed successfully")


# ------------------------------
# Delivery guidance for a character context
# ------------------------------
@router.post("/guidance", response_model=APIResponse[GuidanceReport])
async def get_guidance(payload: CharacterContext):
    report = describe_guidance(payload)
    return APIResponse(status_code=200, data=report, detail="Guidance derived successfully")


@router.get("/presets", response_model=APIResponse[ContextPresetsOut])
async def get_presets():
    return APIResponse(status_code=200, data=list_context_presets(), detail="Presets fetched successfully")
