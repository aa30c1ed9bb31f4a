"""Script detection, validation and transliteration."""

from varna.scripts.detect import detect_script, is_devanagari, is_iast
from varna.scripts.segment import Unit, segment
from varna.scripts.transliterate import (
    are_equivalent_across_scripts,
    devanagari_to_iast,
    iast_to_devanagari,
    normalize,
    transliterate,
)
from varna.scripts.validate import validate

__all__ = [
    "Unit",
    "are_equivalent_across_scripts",
    "detect_script",
    "devanagari_to_iast",
    "iast_to_devanagari",
    "is_devanagari",
    "is_iast",
    "normalize",
    "segment",
    "transliterate",
    "validate",
]
