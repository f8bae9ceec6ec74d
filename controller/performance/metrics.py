from __future__ import annotations

import math
from typing import Iterable, Optional

from core.settings import SAMPLE_INTERVAL_SECONDS
from schemas.performance import PerformanceMetrics

# Samples below this loudness count as silent frames.
SILENCE_FLOOR = 0.05
RMS_GAIN = 8.0


def amplitude_from_rms(rms: float) -> float:
    """Scale a raw buffer RMS into the 0..1 amplitude the scorers expect."""
    return min(max(rms, 0.0) * RMS_GAIN, 1.0)


def build_performance_metrics(
    samples: Iterable[float],
    duration: Optional[float] = None,
    sample_interval: float = SAMPLE_INTERVAL_SECONDS,
) -> PerformanceMetrics:
    history = [min(max(float(s), 0.0), 1.0) for s in samples]
    if duration is None:
        duration = len(history) * sample_interval
    if not history:
        return PerformanceMetrics(
            average_amplitude=0.0,
            peak_amplitude=0.0,
            amplitude_variation=0.0,
            duration=duration,
            silence_ratio=0.0,
            amplitude_history=[],
        )

    count = len(history)
    mean = sum(history) / count
    variation = math.sqrt(sum((s - mean) ** 2 for s in history) / count)
    silent = sum(1 for s in history if s < SILENCE_FLOOR)
    return PerformanceMetrics(
        average_amplitude=mean,
        peak_amplitude=max(history),
        amplitude_variation=variation,
        duration=duration,
        silence_ratio=silent / count,
        amplitude_history=history,
    )
