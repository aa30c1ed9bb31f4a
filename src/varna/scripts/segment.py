"""Greedy longest-match segmentation into script units."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

from varna.models import Script
from varna.scripts.base import (
    AVAGRAHA,
    DEVANAGARI_ACCENTS,
    DEVANAGARI_CONSONANTS,
    DEVANAGARI_MARKS,
    DEVANAGARI_VOWEL_SIGNS,
    DEVANAGARI_VOWELS,
    IAST_CONSONANTS,
    IAST_MARKS,
    IAST_VOWELS,
    OM,
    VIRAMA,
)

_DEVANAGARI_UNITS = frozenset(
    DEVANAGARI_VOWELS
    | DEVANAGARI_VOWEL_SIGNS
    | DEVANAGARI_CONSONANTS
    | {consonant + VIRAMA for consonant in DEVANAGARI_CONSONANTS}
    | DEVANAGARI_MARKS
    | DEVANAGARI_ACCENTS
    | {AVAGRAHA, OM}
)
_IAST_UNITS = frozenset(IAST_VOWELS | IAST_CONSONANTS | IAST_MARKS)

# Decomposed IAST ("ṭh" as t + U+0323 + h) needs up to three codepoints.
_MAX_UNIT_LENGTH = 4


@dataclass(frozen=True)
class Unit:
    """A segmented slice of the input.

    `grapheme` is the exact input slice; `key` is its lookup form (NFC, and
    lower case for IAST).
    """

    grapheme: str
    key: str
    script: Script


def segment(text: str) -> list[Unit]:
    """Split text into the longest known units, keeping unknown codepoints."""
    units: list[Unit] = []
    position = 0
    while position < len(text):
        unit = _match_at(text, position)
        units.append(unit)
        position += len(unit.grapheme)
    return units


def _match_at(text: str, position: int) -> Unit:
    fallback: Unit | None = None
    for length in range(_MAX_UNIT_LENGTH, 0, -1):
        end = position + length
        if end > len(text):
            continue
        candidate = text[position:end]
        if candidate in _DEVANAGARI_UNITS:
            return Unit(grapheme=candidate, key=candidate, script=Script.DEVANAGARI)
        key = unicodedata.normalize("NFC", candidate).lower()
        if key not in _IAST_UNITS:
            continue
        unit = Unit(grapheme=candidate, key=key, script=Script.IAST)
        if not _splits_cluster(text, end):
            return unit
        fallback = fallback or unit

    if fallback is not None:
        return fallback
    char = text[position]
    return Unit(grapheme=char, key=char, script=Script.UNKNOWN)


def _splits_cluster(text: str, end: int) -> bool:
    # A Latin unit must not end before a combining mark that belongs to it.
    return end < len(text) and unicodedata.combining(text[end]) != 0
