from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, computed_field


class MatchType(str, Enum):
    correct = "correct"
    substitution = "substitution"
    missing = "missing"
    extra = "extra"


class WordMatchResult(BaseModel):
    type: MatchType
    expected: Optional[str] = None
    actual: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def correct(cls, word: str) -> "WordMatchResult":
        return cls(type=MatchType.correct, expected=word, actual=word)

    @classmethod
    def substitution(cls, expected: str, actual: str) -> "WordMatchResult":
        return cls(type=MatchType.substitution, expected=expected, actual=actual)

    @classmethod
    def missing(cls, expected: str) -> "WordMatchResult":
        return cls(type=MatchType.missing, expected=expected)

    @classmethod
    def extra(cls, actual: str) -> "WordMatchResult":
        return cls(type=MatchType.extra, actual=actual)

    @computed_field
    @property
    def text(self) -> str:
        # Display word: the script's word unless the speaker added one.
        if self.type == MatchType.extra:
            return self.actual or ""
        return self.expected or ""


class AlignmentRequest(BaseModel):
    expected_text: str = Field(
        validation_alias=AliasChoices("expected_text", "expectedText", "expected"),
        serialization_alias="expectedText",
    )
    actual_text: str = Field(
        default="",
        validation_alias=AliasChoices("actual_text", "actualText", "actual", "transcript"),
        serialization_alias="actualText",
    )

    model_config = {"populate_by_name": True}


class AlignmentSummary(BaseModel):
    correct: int
    substitutions: int
    missing: int
    extra: int
    edit_distance: int = Field(
        validation_alias=AliasChoices("edit_distance", "editDistance"),
        serialization_alias="editDistance",
    )
    accuracy: float

    model_config = {"frozen": True, "populate_by_name": True}


class AlignmentReport(BaseModel):
    expected_text: str = Field(
        validation_alias=AliasChoices("expected_text", "expectedText"),
        serialization_alias="expectedText",
    )
    actual_text: str = Field(
        validation_alias=AliasChoices("actual_text", "actualText"),
        serialization_alias="actualText",
    )
    results: List[WordMatchResult]
    summary: AlignmentSummary

    model_config = {"populate_by_name": True}
