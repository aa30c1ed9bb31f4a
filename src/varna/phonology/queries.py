"""Homorganic and articulation queries over the classification tables.

Every query is total: unknown or malformed input yields None or False,
which rule predicates read as "cannot decide" rather than as a fault.
"""

from __future__ import annotations

import unicodedata

from varna.models import ArticulationPlace, Classification, Script
from varna.phonology.tables import PhonologyTables, resolve_tables
from varna.scripts.base import VIRAMA, VOWEL_SIGN_TO_LETTER
from varna.scripts.detect import detect_script


def are_homorganic(first: object, second: object, *, tables: PhonologyTables | None = None) -> bool:
    """Return True when `second` is in the savarna class of `first`."""
    resolved = resolve_tables(tables)
    left = _lookup_key(first)
    right = _lookup_key(second)
    if left is None or right is None or left[0] is not right[0]:
        return False
    members = resolved.equivalence_classes[left[0]].get(left[1])
    return members is not None and right[1] in members


def equivalence_class_of(
    phoneme: object, *, tables: PhonologyTables | None = None
) -> frozenset[str] | None:
    members = _class_members(phoneme, resolve_tables(tables))
    return frozenset(members) if members is not None else None


def articulation_place_of(
    phoneme: object, *, tables: PhonologyTables | None = None
) -> ArticulationPlace | None:
    key = _lookup_key(phoneme)
    if key is None:
        return None
    script, value = key
    return resolve_tables(tables).articulation_places[script].get(value)


def is_vowel(phoneme: object, *, tables: PhonologyTables | None = None) -> bool:
    key = _lookup_key(phoneme)
    return key is not None and key[1] in resolve_tables(tables).vowels[key[0]]


def is_consonant(phoneme: object, *, tables: PhonologyTables | None = None) -> bool:
    resolved = resolve_tables(tables)
    return _class_members(phoneme, resolved) is not None and not is_vowel(
        phoneme, tables=resolved
    )


def classify(phoneme: object, *, tables: PhonologyTables | None = None) -> Classification:
    """Classify a single phoneme; unrecognized input is neither vowel nor consonant."""
    resolved = resolve_tables(tables)
    members = _class_members(phoneme, resolved)
    vowel = is_vowel(phoneme, tables=resolved)
    return Classification(
        phoneme=phoneme if isinstance(phoneme, str) else "",
        script=detect_script(phoneme),
        equivalence_class=members,
        articulation_place=articulation_place_of(phoneme, tables=resolved),
        is_vowel=vowel,
        is_consonant=members is not None and not vowel,
    )


def vowel_grade(phoneme: object, *, tables: PhonologyTables | None = None) -> str | None:
    """Return "vrddhi", "guna" or "ik" for a graded vowel, else None."""
    key = _lookup_key(phoneme)
    if key is None:
        return None
    return resolve_tables(tables).vowel_grades.get(key[1])


def is_vrddhi(phoneme: object, *, tables: PhonologyTables | None = None) -> bool:
    return vowel_grade(phoneme, tables=tables) == "vrddhi"


def is_guna(phoneme: object, *, tables: PhonologyTables | None = None) -> bool:
    return vowel_grade(phoneme, tables=tables) == "guna"


def is_ik(phoneme: object, *, tables: PhonologyTables | None = None) -> bool:
    return vowel_grade(phoneme, tables=tables) == "ik"


def guna_form(phoneme: object, *, tables: PhonologyTables | None = None) -> str | None:
    """Return the guṇa replacement of an ik vowel in its own script.

    ``guna_form("i") == "e"``, ``guna_form("ऋ") == "अर्"``; vowels without a
    guṇa replacement give None.
    """
    return _gradation_of(phoneme, "guna", resolve_tables(tables))


def vrddhi_form(phoneme: object, *, tables: PhonologyTables | None = None) -> str | None:
    """Return the vṛddhi replacement of a vowel in its own script."""
    return _gradation_of(phoneme, "vrddhi", resolve_tables(tables))


def is_guna_transformation(
    original: object, transformed: object, *, tables: PhonologyTables | None = None
) -> bool:
    expected = guna_form(original, tables=tables)
    return expected is not None and expected == transformed


def is_vrddhi_transformation(
    original: object, transformed: object, *, tables: PhonologyTables | None = None
) -> bool:
    expected = vrddhi_form(original, tables=tables)
    return expected is not None and expected == transformed


def counterpart(phoneme: object, *, tables: PhonologyTables | None = None) -> str | None:
    """Return the corresponding phoneme in the other script."""
    key = _lookup_key(phoneme)
    if key is None:
        return None
    return resolve_tables(tables).counterparts.get(key[1])


def _gradation_of(phoneme: object, grade: str, tables: PhonologyTables) -> str | None:
    key = _lookup_key(phoneme)
    if key is None:
        return None
    return tables.gradations.get(grade, {}).get(key[1])


def _class_members(phoneme: object, tables: PhonologyTables) -> tuple[str, ...] | None:
    key = _lookup_key(phoneme)
    if key is None:
        return None
    script, value = key
    return tables.equivalence_classes[script].get(value)


def _lookup_key(phoneme: object) -> tuple[Script, str] | None:
    # Vowel signs and consonant+virama units look up as their base letters.
    if not isinstance(phoneme, str) or not phoneme:
        return None
    text = unicodedata.normalize("NFC", phoneme)
    script = detect_script(text)
    if script is Script.DEVANAGARI:
        if len(text) == 2 and text.endswith(VIRAMA):
            text = text[0]
        return script, VOWEL_SIGN_TO_LETTER.get(text, text)
    if script is Script.IAST:
        return script, text.lower()
    return None
