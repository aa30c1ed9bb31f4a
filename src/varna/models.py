"""Shared data models."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Script(StrEnum):
    """Writing systems recognized by the engine."""

    DEVANAGARI = "devanagari"
    IAST = "iast"
    UNKNOWN = "unknown"


ArticulationPlace = Literal["guttural", "palatal", "retroflex", "dental", "labial"]
PhonemeCategory = Literal["vowel", "consonant", "other"]
ValidationErrorType = Literal[
    "type_error",
    "empty_input",
    "unrecognized_character",
    "mixed_script",
    "malformed_sequence",
    "unknown_script",
]


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class ValidationResult(BaseModel):
    """Advisory well-formedness report for a word."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    script: Script = Script.UNKNOWN
    error: str | None = None
    error_type: ValidationErrorType | None = None


class Phoneme(BaseModel):
    """One segmented sound unit of a word."""

    model_config = ConfigDict(frozen=True)

    grapheme: str
    script: Script
    category: PhonemeCategory
    articulation_place: ArticulationPlace | Literal["none"] = "none"
    equivalence_class: tuple[str, ...] | None = None
    inherent_vowel: bool = False


class VowelOccurrence(BaseModel):
    """A vowel found in a word, written or inherent."""

    model_config = ConfigDict(frozen=True)

    vowel: str
    position: int = Field(ge=0)
    inherent: bool = False


class Classification(BaseModel):
    """Table-driven classification of a single phoneme."""

    model_config = ConfigDict(frozen=True)

    phoneme: str
    script: Script
    equivalence_class: tuple[str, ...] | None = None
    articulation_place: ArticulationPlace | None = None
    is_vowel: bool = False
    is_consonant: bool = False


class RuleVerdict(BaseModel):
    """Verdict shape returned by grammar rule predicates."""

    applies: bool
    confidence: float = Field(ge=0.0, le=1.0)
    reason: str


class AnalyzeRequest(BaseModel):
    """Word analysis request used by both CLI and API."""

    word: str
    target_script: Script | None = None
    normalize: bool = True
    strict: bool | None = None


class WordAnalysis(BaseModel):
    """Result of running a word through the analysis pipeline."""

    word: str
    script: Script
    is_valid: bool
    error: str | None = None
    error_type: ValidationErrorType | None = None
    normalized: str
    phonemes: list[Phoneme]
    vowel_count: int = Field(ge=0)
    consonant_count: int = Field(ge=0)


class NormalizeRequest(BaseModel):
    """Normalization request payload."""

    word: str
    target_script: Script | None = None


class NormalizeResponse(BaseModel):
    """Normalization response payload."""

    word: str
    source_script: Script
    target_script: Script
    normalized: str


class PratyaharaResponse(BaseModel):
    """Expansion of a named phoneme group."""

    name: str
    script: Script
    phonemes: list[str]
