import logging
import math

from fastapi import HTTPException, status

from controller.performance.analyzer import score_performance
from controller.performance.expectations import context_expectations
from controller.performance.guidance import COMMON_SCENARIOS, DESTINATIONS, INTENTS, MOTIVATIONS, ORIGINS
from controller.performance.metrics import build_performance_metrics
from core.settings import MAX_RECORDING_SECONDS, SAMPLE_INTERVAL_SECONDS
from schemas.performance import (
    CharacterContext,
    ContextPresetsOut,
    GuidanceReport,
    PerformanceMetrics,
    PerformanceReport,
    SamplesPerformanceRequest,
)

logger = logging.getLogger(__name__)


def evaluate_performance(context: CharacterContext, metrics: PerformanceMetrics) -> PerformanceReport:
    result, scores, expectation = score_performance(context, metrics)
    logger.info(
        "Performance scored %.2f for intent=%r motivation=%r",
        result.score,
        context.intent,
        context.motivation,
    )
    return PerformanceReport(
        result=result,
        metric_scores=scores,
        expectation=expectation,
        metrics=metrics,
    )


def _max_samples(sample_interval: float = SAMPLE_INTERVAL_SECONDS) -> int:
    return math.ceil(MAX_RECORDING_SECONDS / sample_interval)


def evaluate_samples(request: SamplesPerformanceRequest) -> PerformanceReport:
    sample_interval = request.sample_interval or SAMPLE_INTERVAL_SECONDS
    limit = _max_samples(sample_interval)
    if len(request.samples) > limit:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Recordings are capped at {MAX_RECORDING_SECONDS:g}s ({limit} samples).",
        )
    metrics = build_performance_metrics(
        request.samples,
        duration=request.duration,
        sample_interval=sample_interval,
    )
    return evaluate_performance(request.context, metrics)


def describe_guidance(context: CharacterContext) -> GuidanceReport:
    guidance = context.delivery_guidance
    return GuidanceReport(
        guidance=guidance,
        expectation=context_expectations(guidance.expected_characteristics),
    )


def list_context_presets() -> ContextPresetsOut:
    return ContextPresetsOut(
        origins=ORIGINS,
        destinations=DESTINATIONS,
        intents=INTENTS,
        motivations=MOTIVATIONS,
        common_scenarios=COMMON_SCENARIOS,
    )
