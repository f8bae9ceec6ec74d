from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field


class Emotion(str, Enum):
    calm = "Calm"
    angry = "Angry"
    fearful = "Fearful"
    conflicted = "Conflicted"
    loving = "Loving"


class Beat(BaseModel):
    index: int
    text: str
    emotion: Optional[Emotion] = None
    has_pause: bool = Field(
        default=False,
        validation_alias=AliasChoices("has_pause", "hasPause"),
        serialization_alias="hasPause",
    )
    intensity: float = Field(default=5.0, ge=1.0, le=10.0)

    model_config = {"populate_by_name": True}


class ScriptTextRequest(BaseModel):
    text: str = Field(validation_alias=AliasChoices("text", "rawText", "raw_text"))

    model_config = {"populate_by_name": True}


class ScriptOut(BaseModel):
    name: Optional[str] = None
    raw_text: str = Field(
        validation_alias=AliasChoices("raw_text", "rawText"),
        serialization_alias="rawText",
    )
    beats: List[Beat]

    model_config = {"populate_by_name": True}


class SampleScriptSummary(BaseModel):
    key: str
    name: str
    beat_count: int = Field(
        validation_alias=AliasChoices("beat_count", "beatCount"),
        serialization_alias="beatCount",
    )

    model_config = {"populate_by_name": True}


class MemorizationRequest(BaseModel):
    text: str
    stage: int = Field(default=1, ge=1, le=3)


class MemorizationOut(BaseModel):
    stage: int
    display_text: str = Field(
        validation_alias=AliasChoices("display_text", "displayText"),
        serialization_alias="displayText",
    )
    prompt: str
    hidden_word_count: int = Field(
        validation_alias=AliasChoices("hidden_word_count", "hiddenWordCount"),
        serialization_alias="hiddenWordCount",
    )

    model_config = {"populate_by_name": True}
