from __future__ import annotations

import logging
from typing import Tuple

from controller.performance.expectations import context_expectations
from controller.performance.feedback import generate_feedback
from controller.performance.scoring import composite_score, score_metrics
from schemas.performance import (
    CharacterContext,
    ContextExpectation,
    MetricScores,
    PerformanceMetrics,
    PerformanceResult,
)

logger = logging.getLogger(__name__)


def score_performance(
    context: CharacterContext,
    metrics: PerformanceMetrics,
) -> Tuple[PerformanceResult, MetricScores, ContextExpectation]:
    expected = context_expectations(context.delivery_guidance.expected_characteristics)
    scores = score_metrics(metrics, expected)
    final_score = composite_score(scores)
    logger.debug(
        "Scored take intent=%r amplitude=%.3f variation=%.3f pacing=%.3f consistency=%.3f final=%.2f",
        context.intent,
        scores.amplitude,
        scores.variation,
        scores.pacing,
        scores.consistency,
        final_score,
    )
    return generate_feedback(context, final_score, scores, metrics), scores, expected


def analyze_performance(context: CharacterContext, metrics: PerformanceMetrics) -> PerformanceResult:
    result, _scores, _expected = score_performance(context, metrics)
    return result
