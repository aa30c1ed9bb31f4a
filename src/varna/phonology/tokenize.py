"""Phoneme tokenization."""

from __future__ import annotations

from varna.models import Phoneme, PhonemeCategory, Script, VowelOccurrence
from varna.phonology.queries import classify
from varna.phonology.tables import PhonologyTables, resolve_tables
from varna.scripts.base import (
    DEVANAGARI_CONSONANTS,
    DEVANAGARI_VOWEL_SIGNS,
    VOWEL_SIGN_TO_LETTER,
)
from varna.scripts.segment import Unit, segment

INHERENT_VOWEL = "अ"


def tokenize(word: object, *, tables: PhonologyTables | None = None) -> list[Phoneme]:
    """Segment `word` into an ordered list of classified phonemes.

    Unrecognized codepoints are kept as "other" phonemes, so joining the
    graphemes always reproduces the input exactly.
    """
    if not isinstance(word, str):
        return []
    resolved = resolve_tables(tables)
    units = segment(word)
    return [
        _to_phoneme(unit, units[index + 1] if index + 1 < len(units) else None, resolved)
        for index, unit in enumerate(units)
    ]


def graphemes(word: object) -> list[str]:
    """Return just the phoneme graphemes of `word`."""
    if not isinstance(word, str):
        return []
    return [unit.grapheme for unit in segment(word)]


def vowels_of(word: object, *, tables: PhonologyTables | None = None) -> list[VowelOccurrence]:
    """Return every vowel of `word` in order, including inherent ``अ``.

    Positions index the phonemes of `tokenize(word)`. Devanagari vowel signs
    are reported as their independent letters.
    """
    occurrences: list[VowelOccurrence] = []
    for position, phoneme in enumerate(tokenize(word, tables=tables)):
        if phoneme.category == "vowel":
            vowel = VOWEL_SIGN_TO_LETTER.get(phoneme.grapheme, phoneme.grapheme)
            occurrences.append(VowelOccurrence(vowel=vowel, position=position))
        elif phoneme.inherent_vowel:
            occurrences.append(
                VowelOccurrence(vowel=INHERENT_VOWEL, position=position, inherent=True)
            )
    return occurrences


def first_vowel(word: object, *, tables: PhonologyTables | None = None) -> VowelOccurrence | None:
    vowels = vowels_of(word, tables=tables)
    return vowels[0] if vowels else None


def _to_phoneme(unit: Unit, following: Unit | None, tables: PhonologyTables) -> Phoneme:
    classification = classify(unit.key, tables=tables) if unit.script is not Script.UNKNOWN else None
    category: PhonemeCategory = "other"
    if classification is not None and classification.is_vowel:
        category = "vowel"
    elif classification is not None and classification.is_consonant:
        category = "consonant"

    place = classification.articulation_place if classification is not None else None
    inherent_vowel = (
        unit.script is Script.DEVANAGARI
        and unit.key in DEVANAGARI_CONSONANTS
        and (following is None or following.key not in DEVANAGARI_VOWEL_SIGNS)
    )
    return Phoneme(
        grapheme=unit.grapheme,
        script=unit.script,
        category=category,
        articulation_place=place or "none",
        equivalence_class=classification.equivalence_class if classification else None,
        inherent_vowel=inherent_vowel,
    )
