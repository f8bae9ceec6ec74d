"""Template-based feedback for a scored take.

Every phrase is chosen by an ordered keyword table over the character's
``energy`` or ``pace`` descriptor and then filled in with the lower-cased
intent and motivation. Nothing here is generated free-form, so the same
inputs always produce the same text.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

from controller.performance.expectations import RuleTable, context_expectations, first_match
from schemas.performance import (
    CharacterContext,
    ContextExpectation,
    MetricScores,
    PerformanceMetrics,
    PerformanceResult,
    VocalCharacteristics,
)

STRENGTH_THRESHOLD = 0.4
IMPROVEMENT_THRESHOLD = 0.2
MAX_FEEDBACK_ITEMS = 2
HESITANT_SILENCE_RATIO = 0.4

AMPLITUDE_STRENGTHS: RuleTable = (
    (("power", "explosive", "high"), "Strong vocal projection that commands the space."),
    (("urgent", "engaged"), "Well-projected delivery that serves your intent."),
)
DEFAULT_AMPLITUDE_STRENGTH = "Measured volume that draws the listener closer."

VARIATION_STRENGTHS: RuleTable = (
    (("dynamic", "urgent"), "Dynamic shifts that reveal the emotional landscape of your {intent}."),
)
DEFAULT_VARIATION_STRENGTH = "Thoughtful tonal variation that reinforces your {motivation}."

PACING_STRENGTHS: RuleTable = (
    (("fast", "urgent"), "Forward momentum that drives the intention home."),
)
DEFAULT_PACING_STRENGTH = "Intentional pacing that lets each word land with impact."

CONSISTENCY_STRENGTH = "Sustained engagement throughout the delivery."
FALLBACK_STRENGTH = "You committed to the {intent} performance."

TOO_QUIET_IMPROVEMENTS: RuleTable = (
    (("power", "explosive"), "Push the emotional stakes — let your {intent} fill the room."),
)
DEFAULT_TOO_QUIET_IMPROVEMENT = "Allow more vocal presence to support your {motivation}."

TOO_LOUD_IMPROVEMENTS: RuleTable = (
    (("restrained", "subtle"), "Pull back — find the power in restraint and control for your {intent}."),
)
DEFAULT_TOO_LOUD_IMPROVEMENT = "The projection overshot the {motivation}. Find the right ceiling."

VARIATION_IMPROVEMENTS: RuleTable = (
    (("dynamic", "urgent"), "Allow more dynamic rise and fall to reinforce your {intent}."),
)
DEFAULT_VARIATION_IMPROVEMENT = "Introduce subtle tonal shifts to keep the {motivation} alive."

HESITANT_PACING_IMPROVEMENT = "Your pacing hesitated — trust your {motivation} and stay connected to the line."
RUSHED_PACING_IMPROVEMENT = "Create more intentional pauses to build tension within your {intent}."
CONSISTENCY_IMPROVEMENT = "Avoid letting the energy drop mid-phrase."
FALLBACK_IMPROVEMENT = "Explore deeper contrast between phrases to emphasize your {motivation}."

# (lower bound inclusive, template); first band the score reaches wins.
SUMMARY_BANDS: Sequence[Tuple[float, str]] = (
    (4.5, "You captured the {motivation} — a commanding performance."),
    (3.8, "Strong delivery of your {intent}. Push deeper into the stakes."),
    (2.8, "The {motivation} is there — let it drive your voice."),
    (2.6, "You're finding the truth. Trust the impulse of your {intent}."),
)
DEFAULT_SUMMARY = "You've laid a foundation. Explore the {motivation} on the next take."

TIP_RULES = {
    "amplitude": (
        (
            (
                ("power", "explosive", "urgent"),
                "To support your {motivation}: take a deep breath and imagine projecting to fill a large space.",
            ),
        ),
        "For your {intent}: try whispering first, then find the minimal volume needed to be heard.",
    ),
    "variation": (
        (),
        "To emphasize your {motivation}: pause half a second before a key word, then shift your tone as you land it.",
    ),
    "pacing": (
        (
            (
                ("urgent", "explosive"),
                "Ground yourself with one breath cycle before starting. Let the {motivation} launch the first word.",
            ),
        ),
        "Read the line silently first, marking where your {intent} naturally builds. Honor those beats.",
    ),
}


def _fill(template: str, context: CharacterContext) -> str:
    return template.format(intent=context.intent.lower(), motivation=context.motivation.lower())


def _characteristics(context: CharacterContext) -> VocalCharacteristics:
    return context.delivery_guidance.expected_characteristics


def build_strengths(context: CharacterContext, scores: MetricScores) -> List[str]:
    characteristics = _characteristics(context)
    candidates = [
        (scores.amplitude, first_match(characteristics.energy, AMPLITUDE_STRENGTHS, DEFAULT_AMPLITUDE_STRENGTH)),
        (scores.variation, first_match(characteristics.energy, VARIATION_STRENGTHS, DEFAULT_VARIATION_STRENGTH)),
        (scores.pacing, first_match(characteristics.pace, PACING_STRENGTHS, DEFAULT_PACING_STRENGTH)),
        (scores.consistency, CONSISTENCY_STRENGTH),
    ]
    strengths = [_fill(text, context) for score, text in candidates if score > STRENGTH_THRESHOLD]
    if not strengths:
        strengths = [_fill(FALLBACK_STRENGTH, context)]
    return strengths[:MAX_FEEDBACK_ITEMS]


def _amplitude_improvement(context: CharacterContext, average: float, expected: ContextExpectation) -> str:
    energy = _characteristics(context).energy
    if average < expected.amplitude_low:
        return first_match(energy, TOO_QUIET_IMPROVEMENTS, DEFAULT_TOO_QUIET_IMPROVEMENT)
    return first_match(energy, TOO_LOUD_IMPROVEMENTS, DEFAULT_TOO_LOUD_IMPROVEMENT)


def _pacing_improvement(silence_ratio: float) -> str:
    if silence_ratio > HESITANT_SILENCE_RATIO:
        return HESITANT_PACING_IMPROVEMENT
    return RUSHED_PACING_IMPROVEMENT


def build_improvements(
    context: CharacterContext,
    scores: MetricScores,
    metrics: PerformanceMetrics,
) -> List[str]:
    characteristics = _characteristics(context)
    expected = context_expectations(characteristics)
    improvements: List[str] = []
    if scores.amplitude < IMPROVEMENT_THRESHOLD:
        improvements.append(_amplitude_improvement(context, metrics.average_amplitude, expected))
    if scores.variation < IMPROVEMENT_THRESHOLD:
        improvements.append(
            first_match(characteristics.energy, VARIATION_IMPROVEMENTS, DEFAULT_VARIATION_IMPROVEMENT)
        )
    if scores.pacing < IMPROVEMENT_THRESHOLD:
        improvements.append(_pacing_improvement(metrics.silence_ratio))
    if scores.consistency < IMPROVEMENT_THRESHOLD:
        improvements.append(CONSISTENCY_IMPROVEMENT)
    if not improvements:
        improvements = [FALLBACK_IMPROVEMENT]
    return [_fill(text, context) for text in improvements[:MAX_FEEDBACK_ITEMS]]


def build_summary(score: float, context: CharacterContext) -> str:
    for lower_bound, template in SUMMARY_BANDS:
        if score >= lower_bound:
            return _fill(template, context)
    return _fill(DEFAULT_SUMMARY, context)


def weakest_metric(scores: MetricScores) -> str:
    # min() keeps the first of equal values: amplitude, variation, pacing.
    ranked = [
        ("amplitude", scores.amplitude),
        ("variation", scores.variation),
        ("pacing", scores.pacing),
    ]
    return min(ranked, key=lambda item: item[1])[0]


def build_practical_tip(context: CharacterContext, scores: MetricScores) -> str:
    metric = weakest_metric(scores)
    rules, default = TIP_RULES[metric]
    return _fill(first_match(_characteristics(context).energy, rules, default), context)


def generate_feedback(
    context: CharacterContext,
    score: float,
    scores: MetricScores,
    metrics: PerformanceMetrics,
) -> PerformanceResult:
    return PerformanceResult(
        score=score,
        summary=build_summary(score, context),
        strengths=build_strengths(context, scores),
        improvements=build_improvements(context, scores, metrics),
        practical_tip=build_practical_tip(context, scores),
    )
