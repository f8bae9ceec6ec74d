"""Translate qualitative vocal characteristics into numeric targets.

Each table is an ordered list of ``(keywords, value)`` rows. The first row
whose keywords appear in the lower-cased descriptor wins; the trailing
default applies when nothing matches.
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple, TypeVar

from schemas.performance import ContextExpectation, VocalCharacteristics

T = TypeVar("T")
RuleTable = Sequence[Tuple[Tuple[str, ...], T]]


AMPLITUDE_RULES: RuleTable = (
    (("explosive", "high", "urgent", "power"), (0.35, 1.0)),
    (("strong", "commanding", "engaged"), (0.25, 0.75)),
    (("calm", "composed", "controlled"), (0.12, 0.50)),
    (("restrained", "measured", "subtle", "soothing"), (0.02, 0.25)),
)
DEFAULT_AMPLITUDE_RANGE = (0.12, 0.50)

VARIATION_RULES: RuleTable = (
    (("explosive", "dynamic", "urgent"), 0.10),
    (("strong", "engaged"), 0.07),
    (("composed", "calm", "controlled"), 0.04),
)
DEFAULT_VARIATION_MIN = 0.01

SILENCE_RULES: RuleTable = (
    (("fast", "urgent", "building"), 0.25),
    (("steady", "deliberate", "methodical"), 0.35),
    (("slower", "reassuring", "charging"), 0.40),
)
DEFAULT_SILENCE_MAX = 0.30


def contains_any(text: str, keywords: Sequence[str]) -> bool:
    lowered = (text or "").lower()
    return any(keyword in lowered for keyword in keywords)


def first_match(text: str, rules: RuleTable, default: Optional[T] = None) -> Optional[T]:
    for keywords, value in rules:
        if contains_any(text, keywords):
            return value
    return default


def context_expectations(characteristics: VocalCharacteristics) -> ContextExpectation:
    low, high = first_match(characteristics.energy, AMPLITUDE_RULES, DEFAULT_AMPLITUDE_RANGE)
    return ContextExpectation(
        amplitude_low=low,
        amplitude_high=high,
        variation_min=first_match(characteristics.energy, VARIATION_RULES, DEFAULT_VARIATION_MIN),
        silence_max=first_match(characteristics.pace, SILENCE_RULES, DEFAULT_SILENCE_MAX),
    )
