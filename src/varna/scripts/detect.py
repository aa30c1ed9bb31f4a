"""Script detection shared by every analysis step."""

from __future__ import annotations

import unicodedata

from varna.models import Script
from varna.scripts.base import IAST_LETTERS, is_devanagari_char


def detect_script(text: object) -> Script:
    """Classify the writing system of `text`.

    Any Devanagari codepoint makes the text Devanagari. Otherwise the text is
    IAST when it has at least one letter and every letter belongs to the IAST
    alphabet; plain ASCII resolves to IAST unless it uses letters IAST lacks.
    """
    if not isinstance(text, str) or not text:
        return Script.UNKNOWN

    normalized = unicodedata.normalize("NFC", text)
    if any(is_devanagari_char(char) for char in normalized):
        return Script.DEVANAGARI

    letters = [char for char in normalized if char.isalpha()]
    if letters and all(char in IAST_LETTERS for char in letters):
        return Script.IAST
    return Script.UNKNOWN


def is_devanagari(text: object) -> bool:
    """Return True when `text` is detected as Devanagari."""
    return detect_script(text) is Script.DEVANAGARI


def is_iast(text: object) -> bool:
    """Return True when `text` is detected as IAST."""
    return detect_script(text) is Script.IAST
