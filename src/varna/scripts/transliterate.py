"""Normalization and Devanagari <-> IAST transliteration.

Letters are converted by aksharamukha; this module canonicalizes around it.
Dandas and digits are mapped here so both scripts spell them the same way
(``|``/``||`` and ASCII digits in IAST), and the nukta and Vedic accents are
dropped before conversion since neither has an IAST spelling.

Normalization is idempotent but transliteration is not a lossless round trip:
a Devanagari vowel hiatus such as अइ reads back from IAST ``ai`` as the
diphthong ऐ, and dropped marks are not restored.
"""

from __future__ import annotations

import logging
import re
import unicodedata

from aksharamukha import transliterate as aksharamukha

from varna.models import Script
from varna.scripts.base import ANUDATTA, DANDA, DIGITS, DOUBLE_DANDA, NUKTA, UDATTA
from varna.scripts.detect import detect_script

logger = logging.getLogger(__name__)

_SPACES_RE = re.compile(r"\s+")
_DEVANAGARI_CLAUSE_RE = re.compile(f"({DOUBLE_DANDA}|{DANDA})")
_IAST_CLAUSE_RE = re.compile(r"(\|\||\|)")

_DANDA_TO_IAST = {DANDA: "|", DOUBLE_DANDA: "||"}
_DANDA_TO_DEVANAGARI = {"|": DANDA, "||": DOUBLE_DANDA}

_DROPPED_MARKS = str.maketrans("", "", NUKTA + UDATTA + ANUDATTA)
_TO_ASCII_DIGITS = str.maketrans({digit: value for value, digit in DIGITS})
_TO_DEVANAGARI_DIGITS = str.maketrans({value: digit for value, digit in DIGITS})

# Script names as aksharamukha spells them.
_AKSHARAMUKHA_DEVANAGARI = "Devanagari"
_AKSHARAMUKHA_IAST = "IAST"


def normalize(word: object, target_script: Script | None = None) -> str | None:
    """Return the canonical form of `word` in `target_script` (IAST by default).

    Non-string input yields None. Text already in the target script is only
    canonicalized: NFC, trimmed, whitespace collapsed, and lower-cased for IAST.
    """
    if not isinstance(word, str):
        return None
    target = target_script or Script.IAST
    source = detect_script(word)
    return transliterate(word, source, target)


def transliterate(text: str, source: Script, target: Script) -> str:
    """Convert `text` from `source` to `target` script and canonicalize it."""
    text = _canonical_spacing(text)
    if source is Script.DEVANAGARI and target is Script.IAST:
        converted = devanagari_to_iast(text)
    elif source is Script.IAST and target is Script.DEVANAGARI:
        converted = iast_to_devanagari(text)
    else:
        converted = text

    if target is Script.IAST:
        converted = converted.lower()
    converted = _canonical_spacing(converted)
    if converted != text:
        logger.debug("transliterated %r (%s -> %s) to %r", text, source, target, converted)
    return converted


def devanagari_to_iast(text: str) -> str:
    """Transliterate Devanagari to IAST, spelling out inherent vowels."""
    text = unicodedata.normalize("NFC", text).translate(_DROPPED_MARKS)
    converted = _convert_clauses(
        text,
        _DEVANAGARI_CLAUSE_RE,
        _DANDA_TO_IAST,
        _AKSHARAMUKHA_DEVANAGARI,
        _AKSHARAMUKHA_IAST,
    )
    return unicodedata.normalize("NFC", converted.translate(_TO_ASCII_DIGITS))


def iast_to_devanagari(text: str) -> str:
    """Transliterate IAST to Devanagari, adding virama to vowelless consonants."""
    text = unicodedata.normalize("NFC", text).lower()
    converted = _convert_clauses(
        text,
        _IAST_CLAUSE_RE,
        _DANDA_TO_DEVANAGARI,
        _AKSHARAMUKHA_IAST,
        _AKSHARAMUKHA_DEVANAGARI,
    )
    return unicodedata.normalize("NFC", converted.translate(_TO_DEVANAGARI_DIGITS))


def are_equivalent_across_scripts(first: object, second: object) -> bool:
    """Return True when both inputs normalize to the same non-empty IAST form."""
    left = normalize(first)
    right = normalize(second)
    return bool(left) and left == right


def _convert_clauses(
    text: str,
    clause_re: re.Pattern[str],
    dandas: dict[str, str],
    source_name: str,
    target_name: str,
) -> str:
    # Dandas are mapped here; only the text between them goes to aksharamukha.
    parts: list[str] = []
    for piece in clause_re.split(text):
        if piece in dandas:
            parts.append(dandas[piece])
        elif piece:
            parts.append(aksharamukha.process(source_name, target_name, piece))
    return "".join(parts)


def _canonical_spacing(text: str) -> str:
    return _SPACES_RE.sub(" ", unicodedata.normalize("NFC", text)).strip()
