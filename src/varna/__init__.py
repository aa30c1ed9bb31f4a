"""Multi-script Sanskrit phonological analysis."""

from varna.core import InvalidWordError, analyze_word, homorganic_verdict
from varna.models import (
    Classification,
    Phoneme,
    Script,
    ValidationResult,
    VowelOccurrence,
    WordAnalysis,
)
from varna.phonology import (
    are_homorganic,
    articulation_place_of,
    classify,
    equivalence_class_of,
    expand_pratyahara,
    tokenize,
)
from varna.scripts import detect_script, normalize, validate

__version__ = "0.1.0"

__all__ = [
    "Classification",
    "InvalidWordError",
    "Phoneme",
    "Script",
    "ValidationResult",
    "VowelOccurrence",
    "WordAnalysis",
    "__version__",
    "analyze_word",
    "are_homorganic",
    "articulation_place_of",
    "classify",
    "detect_script",
    "equivalence_class_of",
    "expand_pratyahara",
    "homorganic_verdict",
    "normalize",
    "tokenize",
    "validate",
]
