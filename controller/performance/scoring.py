from __future__ import annotations

from typing import Sequence

from schemas.performance import ContextExpectation, MetricScores, PerformanceMetrics

AMPLITUDE_WEIGHT = 0.35
VARIATION_WEIGHT = 0.25
PACING_WEIGHT = 0.20
CONSISTENCY_WEIGHT = 0.20

# Added before clamping so a rough take still lands in the encouraging band.
MOTIVATIONAL_BUFFER = 0.25
SCORE_FLOOR = 2.5
SCORE_SPAN = 2.5

MIN_CONSISTENCY_SAMPLES = 21
NEUTRAL_CONSISTENCY = 0.5
FLAT_DELTA = 0.01


def clamp(value: float, minimum: float = 0.0, maximum: float = 1.0) -> float:
    return max(minimum, min(maximum, value))


def score_amplitude(average: float, expected: ContextExpectation) -> float:
    if expected.contains_amplitude(average):
        half_width = (expected.amplitude_high - expected.amplitude_low) / 2.0
        if half_width <= 0:
            return 1.0
        distance = abs(average - expected.amplitude_mid) / half_width
        return 1.0 - distance * 0.7
    if average < expected.amplitude_low:
        distance = expected.amplitude_low - average
    else:
        distance = average - expected.amplitude_high
    return 0.3 - distance * 5.0


def score_variation(variation: float, expected: ContextExpectation) -> float:
    ratio = variation / expected.variation_min
    if ratio >= 1.0:
        return 0.8 + (ratio - 1.0) * 0.2
    return ratio - 1.0


def score_pacing(silence_ratio: float, expected: ContextExpectation) -> float:
    ideal = expected.silence_max * 0.5
    deviation = abs(silence_ratio - ideal) / expected.silence_max
    return 1.0 - deviation * deviation


def longest_flat_run(history: Sequence[float], delta: float = FLAT_DELTA) -> int:
    """Longest streak of adjacent sample pairs that differ by less than ``delta``."""
    run = longest = 0
    for previous, current in zip(history, history[1:]):
        if abs(current - previous) < delta:
            run += 1
            longest = max(longest, run)
        else:
            run = 0
    return longest


def score_consistency(history: Sequence[float]) -> float:
    if len(history) < MIN_CONSISTENCY_SAMPLES:
        return NEUTRAL_CONSISTENCY
    flat_ratio = longest_flat_run(history) / len(history)
    return 1.0 - flat_ratio * flat_ratio


def score_metrics(metrics: PerformanceMetrics, expected: ContextExpectation) -> MetricScores:
    return MetricScores(
        amplitude=score_amplitude(metrics.average_amplitude, expected),
        variation=score_variation(metrics.amplitude_variation, expected),
        pacing=score_pacing(metrics.silence_ratio, expected),
        consistency=score_consistency(metrics.amplitude_history),
    )


def composite_score(scores: MetricScores) -> float:
    raw = (
        scores.amplitude * AMPLITUDE_WEIGHT
        + scores.variation * VARIATION_WEIGHT
        + scores.pacing * PACING_WEIGHT
        + scores.consistency * CONSISTENCY_WEIGHT
    )
    return SCORE_FLOOR + clamp(raw + MOTIVATIONAL_BUFFER) * SCORE_SPAN
