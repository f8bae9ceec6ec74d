from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field


class VocalCharacteristics(BaseModel):
    pitch_range: str = Field(
        validation_alias=AliasChoices("pitch_range", "pitchRange"),
        serialization_alias="pitchRange",
    )
    pace: str
    emphasis: str
    breath_pauses: str = Field(
        validation_alias=AliasChoices("breath_pauses", "breathPauses"),
        serialization_alias="breathPauses",
    )
    energy: str

    model_config = {"frozen": True, "populate_by_name": True}


class DeliveryGuidance(BaseModel):
    tips: List[str]
    expected_characteristics: VocalCharacteristics = Field(
        validation_alias=AliasChoices("expected_characteristics", "expectedCharacteristics"),
        serialization_alias="expectedCharacteristics",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class CharacterContext(BaseModel):
    origin_context: str = Field(
        default="",
        validation_alias=AliasChoices("origin_context", "originContext", "origin"),
        serialization_alias="originContext",
    )
    destination_context: str = Field(
        default="",
        validation_alias=AliasChoices("destination_context", "destinationContext", "destination"),
        serialization_alias="destinationContext",
    )
    intent: str
    motivation: str

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def delivery_guidance(self) -> DeliveryGuidance:
        from controller.performance.guidance import derive_delivery_guidance

        return derive_delivery_guidance(self.intent, self.motivation)


class PerformanceMetrics(BaseModel):
    average_amplitude: float = Field(
        validation_alias=AliasChoices("average_amplitude", "averageAmplitude"),
        serialization_alias="averageAmplitude",
    )
    peak_amplitude: float = Field(
        default=0.0,
        validation_alias=AliasChoices("peak_amplitude", "peakAmplitude"),
        serialization_alias="peakAmplitude",
    )
    amplitude_variation: float = Field(
        validation_alias=AliasChoices("amplitude_variation", "amplitudeVariation"),
        serialization_alias="amplitudeVariation",
    )
    duration: float = 0.0
    silence_ratio: float = Field(
        validation_alias=AliasChoices("silence_ratio", "silenceRatio"),
        serialization_alias="silenceRatio",
    )
    amplitude_history: List[float] = Field(
        default_factory=list,
        validation_alias=AliasChoices("amplitude_history", "amplitudeHistory"),
        serialization_alias="amplitudeHistory",
    )

    # Metrics must be finite; clamp() cannot order NaN.
    model_config = {"frozen": True, "populate_by_name": True, "allow_inf_nan": False}


class ContextExpectation(BaseModel):
    amplitude_low: float = Field(
        validation_alias=AliasChoices("amplitude_low", "amplitudeLow"),
        serialization_alias="amplitudeLow",
    )
    amplitude_high: float = Field(
        validation_alias=AliasChoices("amplitude_high", "amplitudeHigh"),
        serialization_alias="amplitudeHigh",
    )
    variation_min: float = Field(
        validation_alias=AliasChoices("variation_min", "variationMin"),
        serialization_alias="variationMin",
    )
    silence_max: float = Field(
        validation_alias=AliasChoices("silence_max", "silenceMax"),
        serialization_alias="silenceMax",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def amplitude_mid(self) -> float:
        return (self.amplitude_low + self.amplitude_high) / 2.0

    def contains_amplitude(self, value: float) -> bool:
        return self.amplitude_low <= value <= self.amplitude_high


class MetricScores(BaseModel):
    amplitude: float
    variation: float
    pacing: float
    consistency: float

    model_config = {"frozen": True}


class PerformanceResult(BaseModel):
    score: float
    summary: str
    strengths: List[str]
    improvements: List[str]
    practical_tip: str = Field(
        validation_alias=AliasChoices("practical_tip", "practicalTip"),
        serialization_alias="practicalTip",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class PerformanceRequest(BaseModel):
    context: CharacterContext
    metrics: PerformanceMetrics


class SamplesPerformanceRequest(BaseModel):
    context: CharacterContext
    samples: List[float] = Field(
        default_factory=list,
        validation_alias=AliasChoices("samples", "amplitudeHistory", "amplitude_history"),
    )
    duration: Optional[float] = None
    sample_interval: Optional[float] = Field(
        default=None,
        gt=0.0,
        validation_alias=AliasChoices("sample_interval", "sampleInterval"),
        serialization_alias="sampleInterval",
    )

    model_config = {"populate_by_name": True, "allow_inf_nan": False}


class PerformanceReport(BaseModel):
    result: PerformanceResult
    metric_scores: MetricScores = Field(
        validation_alias=AliasChoices("metric_scores", "metricScores"),
        serialization_alias="metricScores",
    )
    expectation: ContextExpectation
    metrics: PerformanceMetrics

    model_config = {"populate_by_name": True}


class GuidanceReport(BaseModel):
    guidance: DeliveryGuidance
    expectation: ContextExpectation


class ContextPreset(BaseModel):
    label: str
    origin_context: str = Field(
        validation_alias=AliasChoices("origin_context", "originContext"),
        serialization_alias="originContext",
    )
    destination_context: str = Field(
        validation_alias=AliasChoices("destination_context", "destinationContext"),
        serialization_alias="destinationContext",
    )
    intent: str
    motivation: str

    model_config = {"frozen": True, "populate_by_name": True}


class ContextPresetsOut(BaseModel):
    origins: List[str]
    destinations: List[str]
    intents: List[str]
    motivations: List[str]
    common_scenarios: List[ContextPreset] = Field(
        validation_alias=AliasChoices("common_scenarios", "commonScenarios"),
        serialization_alias="commonScenarios",
    )

    model_config = {"populate_by_name": True}
