from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from controller.performance.expectations import contains_any
from schemas.performance import ContextPreset, DeliveryGuidance, VocalCharacteristics


def _guidance(tips: List[str], pitch_range: str, pace: str, emphasis: str, breath_pauses: str, energy: str) -> DeliveryGuidance:
    return DeliveryGuidance(
        tips=tips,
        expected_characteristics=VocalCharacteristics(
            pitch_range=pitch_range,
            pace=pace,
            emphasis=emphasis,
            breath_pauses=breath_pauses,
            energy=energy,
        ),
    )


@dataclass(frozen=True)
class IntentRule:
    keywords: Tuple[str, ...]
    default: DeliveryGuidance
    motivation_rules: Sequence[Tuple[Tuple[str, ...], DeliveryGuidance]] = field(default_factory=tuple)

    def resolve(self, motivation: str) -> DeliveryGuidance:
        for keywords, guidance in self.motivation_rules:
            if contains_any(motivation, keywords):
                return guidance
        return self.default


INTENT_RULES: Tuple[IntentRule, ...] = (
    IntentRule(
        keywords=("threaten", "intimidate"),
        motivation_rules=(
            (
                ("desper",),
                _guidance(
                    [
                        "Lower your pitch slightly to convey controlled danger",
                        "Use direct, punchy delivery with minimal filler words",
                        "Emphasize key words with intentional pauses before/after",
                        "Maintain steady tempo even when emotional",
                        "End phrases with downward inflection for authority",
                    ],
                    "Low to mid",
                    "Deliberate and controlled",
                    "High on key words",
                    "Strategic pauses for impact",
                    "Restrained intensity",
                ),
            ),
            (
                ("power", "control"),
                _guidance(
                    [
                        "Project confidence through steady volume and pace",
                        "Use longer phrases to show command of the situation",
                        "Vary tone only for calculated effect",
                        "Place emphasis on verbs and action words",
                        "Maintain forward momentum without rushing",
                    ],
                    "Mid to low",
                    "Steady and commanding",
                    "On action words",
                    "Minimal, confident",
                    "Controlled power",
                ),
            ),
        ),
        default=_guidance(
            [
                "Use lower pitch to suggest danger",
                "Speak with clear enunciation and controlled volume",
                "Pause briefly before delivering the threat",
                "Avoid sounding angry—sound determined instead",
                "End on a strong note to reinforce the message",
            ],
            "Lower than normal",
            "Controlled",
            "Deliberate",
            "Strategic",
            "Contained",
        ),
    ),
    IntentRule(
        keywords=("persuade", "convince"),
        motivation_rules=(
            (
                ("desper",),
                _guidance(
                    [
                        "Let some emotional urgency show in your voice",
                        "Use conversational, direct language patterns",
                        "Place emphasis on reasons and benefits",
                        "Vary pitch to keep the listener engaged",
                        "Create space for the listener to feel heard",
                    ],
                    "Varied, conversational",
                    "Engaged, slightly faster",
                    "On compelling reasons",
                    "Natural, breathing points",
                    "Urgent but controlled",
                ),
            ),
            (
                ("logical", "reason"),
                _guidance(
                    [
                        "Speak clearly and methodically—like presenting facts",
                        "Use even pacing to suggest confidence in your argument",
                        "Emphasize logical connectors: 'therefore,' 'because'",
                        "Avoid emotional variation; let your words do the work",
                        "Build from point to point with slight crescendo",
                    ],
                    "Even, rational",
                    "Methodical",
                    "On logical points",
                    "Between ideas",
                    "Calm, reasoned",
                ),
            ),
        ),
        default=_guidance(
            [
                "Speak with genuine interest in the listener's perspective",
                "Use warm, inviting tone throughout",
                "Vary your pitch to show enthusiasm",
                "Place emphasis on shared benefits",
                "End on an upward note to invite agreement",
            ],
            "Warm, varied",
            "Natural, conversational",
            "On benefits",
            "Natural",
            "Engaging",
        ),
    ),
    IntentRule(
        keywords=("seduce", "charm", "attract"),
        default=_guidance(
            [
                "Use a lower, slower pitch than your natural speaking voice",
                "Add subtle breathiness to your delivery",
                "Emphasize words that create intimacy or connection",
                "Use longer pauses to create tension and anticipation",
                "Let your voice suggest confidence and ease",
            ],
            "Lower, sultry",
            "Slower, deliberate",
            "On intimate words",
            "Longer, charged pauses",
            "Suggestive, confident",
        ),
    ),
    IntentRule(
        keywords=("plead", "beg", "desperate"),
        default=_guidance(
            [
                "Allow your voice to show vulnerability and emotion",
                "Use higher pitch than normal to convey pleading",
                "Vary volume to emphasize desperation",
                "Use shorter, building phrases for escalation",
                "Let your breath show—don't hide the strain",
            ],
            "Higher, strained",
            "Urgent, building",
            "On emotional words",
            "Ragged, emotional",
            "Desperate, vulnerable",
        ),
    ),
    IntentRule(
        keywords=("deceive", "lie"),
        motivation_rules=(
            (
                ("self-protect", "survival"),
                _guidance(
                    [
                        "Deliver with apparent confidence—not hesitation",
                        "Keep volume and pace steady to seem believable",
                        "Avoid over-explaining; let the lie sit simply",
                        "Place emphasis on believable details",
                        "End strong, as if there's nothing more to say",
                    ],
                    "Normal, convinced-sounding",
                    "Steady, not defensive",
                    "On credible details",
                    "Natural, assured",
                    "Calm conviction",
                ),
            ),
        ),
        default=_guidance(
            [
                "Keep the lie simple and delivered matter-of-factly",
                "Use the same vocal patterns as truth-telling",
                "Avoid defensive over-explanation",
                "Maintain eye contact energy (imagine it)",
                "End decisively without trailing off",
            ],
            "Neutral, believable",
            "Confident",
            "Minimal, natural",
            "Normal",
            "Composed",
        ),
    ),
    IntentRule(
        keywords=("comfort", "console"),
        default=_guidance(
            [
                "Use a warm, gentle tone throughout",
                "Speak slightly slower than normal for reassurance",
                "Lower your pitch slightly to suggest safety",
                "Emphasize words of support and understanding",
                "Use longer, sustained phrases to convey calm",
            ],
            "Warm, slightly lowered",
            "Slower, reassuring",
            "On comforting words",
            "Gentle, present",
            "Soothing, supportive",
        ),
    ),
)

DEFAULT_GUIDANCE = _guidance(
    [
        "Speak clearly and naturally",
        "Maintain consistent energy throughout",
        "Let your character's emotional state guide your delivery",
        "Use pauses to emphasize important moments",
        "Trust your instincts and commit fully to the intention",
    ],
    "Natural",
    "Conversational",
    "On key words",
    "Natural",
    "Committed",
)


def derive_delivery_guidance(intent: str, motivation: str) -> DeliveryGuidance:
    for rule in INTENT_RULES:
        if contains_any(intent, rule.keywords):
            return rule.resolve(motivation)
    return DEFAULT_GUIDANCE


ORIGINS = [
    "Confrontation",
    "Deception",
    "Plea",
    "Revelation",
    "Accusation",
    "Offering",
    "Demand",
    "Confession",
    "Seduction",
    "Negotiation",
    "Custom",
]

DESTINATIONS = [
    "Reconciliation",
    "Escape",
    "Manipulation",
    "Understanding",
    "Justice",
    "Gain/Acquisition",
    "Submission",
    "Forgiveness",
    "Connection",
    "Agreement",
    "Custom",
]

INTENTS = [
    "Threaten",
    "Persuade",
    "Seduce",
    "Plead",
    "Deceive",
    "Comfort",
    "Accuse",
    "Confess",
    "Demand",
    "Manipulate",
    "Custom",
]

MOTIVATIONS = [
    "Desperation",
    "Power/Control",
    "Logical Reason",
    "Self-Protection",
    "Love/Connection",
    "Revenge",
    "Survival",
    "Ambition",
    "Redemption",
    "Fear",
    "Custom",
]

COMMON_SCENARIOS = [
    ContextPreset(
        label="Threatening villain",
        origin_context="Confrontation",
        destination_context="Submission",
        intent="Threaten",
        motivation="Power/Control",
    ),
    ContextPreset(
        label="Desperate plea",
        origin_context="Plea",
        destination_context="Reconciliation",
        intent="Plead",
        motivation="Desperation",
    ),
    ContextPreset(
        label="Seductive charm",
        origin_context="Seduction",
        destination_context="Connection",
        intent="Seduce",
        motivation="Love/Connection",
    ),
    ContextPreset(
        label="Logical persuasion",
        origin_context="Negotiation",
        destination_context="Agreement",
        intent="Persuade",
        motivation="Logical Reason",
    ),
    ContextPreset(
        label="Guilty confession",
        origin_context="Confession",
        destination_context="Forgiveness",
        intent="Confess",
        motivation="Redemption",
    ),
]
