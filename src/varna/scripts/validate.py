"""Advisory word validation.

Validation reports problems but never raises: callers are free to continue
with best-effort analysis of a word that failed validation.
"""

from __future__ import annotations

import unicodedata

from varna.models import Script, ValidationErrorType, ValidationResult
from varna.scripts.base import (
    DEVANAGARI_ACCENTS,
    DEVANAGARI_ACCEPTED,
    DEVANAGARI_CONSONANTS,
    DEVANAGARI_MARKS,
    DEVANAGARI_VOWEL_SIGNS,
    DEVANAGARI_VOWELS,
    IAST_COMBINING,
    IAST_LETTERS,
    OM,
    SEPARATORS,
    VIRAMA,
    is_devanagari_char,
)
from varna.scripts.detect import detect_script

_SYLLABIC = {"consonant", "vowel", "sign", "mark", "accent"}


def validate(word: object) -> ValidationResult:
    """Check that `word` is a well-formed Devanagari or IAST word."""
    if not isinstance(word, str):
        return _failure("type_error", "Input must be a string")
    if not word.strip():
        return _failure("empty_input", "Input cannot be empty")

    text = unicodedata.normalize("NFC", word.strip())
    has_devanagari = any(is_devanagari_char(char) for char in text)
    has_latin = any(char.isalpha() and not is_devanagari_char(char) for char in text)
    if has_devanagari and has_latin:
        return _failure(
            "mixed_script",
            "Input mixes Devanagari and Latin letters",
            Script.DEVANAGARI,
        )

    for char in text:
        if not _is_accepted(char):
            return _failure(
                "unrecognized_character",
                f"Unrecognized character {char!r} (U+{ord(char):04X})",
                detect_script(text),
            )

    script = detect_script(text)
    if script is Script.UNKNOWN:
        return _failure(
            "unknown_script",
            "Input does not appear to be Sanskrit in Devanagari or IAST",
        )

    if script is Script.DEVANAGARI:
        problem = _find_malformed_sequence(text)
    else:
        problem = _find_detached_combining_mark(text)
    if problem is not None:
        return _failure("malformed_sequence", problem, script)

    return ValidationResult(is_valid=True, script=script)


def _is_accepted(char: str) -> bool:
    return (
        char in DEVANAGARI_ACCEPTED
        or char in IAST_LETTERS
        or char in IAST_COMBINING
        or char in SEPARATORS
        or char.isspace()
        or (char.isascii() and char.isdigit())
    )


def _find_malformed_sequence(text: str) -> str | None:
    previous = "start"
    for index, char in enumerate(text):
        if char in DEVANAGARI_VOWEL_SIGNS:
            if previous != "consonant":
                return f"Vowel sign {char!r} at position {index} has no preceding consonant"
            previous = "sign"
        elif char == VIRAMA:
            if previous != "consonant":
                return f"Virama at position {index} has no preceding consonant"
            previous = "virama"
        elif char in DEVANAGARI_MARKS:
            if previous not in {"consonant", "vowel", "sign"}:
                return f"Mark {char!r} at position {index} has no preceding syllable"
            previous = "mark"
        elif char in DEVANAGARI_ACCENTS:
            if previous not in _SYLLABIC:
                return f"Accent {char!r} at position {index} has no preceding syllable"
            previous = "accent"
        elif char in DEVANAGARI_CONSONANTS:
            previous = "consonant"
        elif char in DEVANAGARI_VOWELS or char == OM:
            previous = "vowel"
        else:
            previous = "other"
    return None


def _find_detached_combining_mark(text: str) -> str | None:
    # The only combining mark IAST keeps after NFC is the candrabindu of m̐.
    for index, char in enumerate(text):
        if char in IAST_COMBINING and text[index - 1 : index].lower() != "m":
            return f"Combining mark {char!r} at position {index} does not follow 'm'"
    return None


def _failure(
    error_type: ValidationErrorType,
    message: str,
    script: Script = Script.UNKNOWN,
) -> ValidationResult:
    return ValidationResult(is_valid=False, script=script, error=message, error_type=error_type)
