"""Word analysis pipeline.

detect -> validate -> normalize -> tokenize -> classify. Validation is soft
by default: a failed check is reported on the result and analysis carries
on with whatever the tokenizer can recover.
"""

from __future__ import annotations

import logging

from varna.models import AnalyzeRequest, RuleVerdict, WordAnalysis
from varna.phonology.queries import are_homorganic, classify
from varna.phonology.tables import PhonologyTables, resolve_tables
from varna.phonology.tokenize import tokenize
from varna.scripts.detect import detect_script
from varna.scripts.transliterate import normalize
from varna.scripts.validate import validate

logger = logging.getLogger(__name__)


class InvalidWordError(ValueError):
    """Raised in strict mode when a word fails validation."""


def analyze_word(
    request: AnalyzeRequest, *, tables: PhonologyTables | None = None
) -> WordAnalysis:
    """Run one word through the full analysis pipeline."""
    resolved = resolve_tables(tables)
    validation = validate(request.word)
    if not validation.is_valid:
        if request.strict:
            raise InvalidWordError(validation.error or "word failed validation")
        logger.debug(
            "continuing with invalid word %r: %s", request.word, validation.error
        )

    normalized = normalize(request.word, request.target_script) or ""
    phonemes = tokenize(normalized if request.normalize else request.word, tables=resolved)
    return WordAnalysis(
        word=request.word,
        script=detect_script(request.word),
        is_valid=validation.is_valid,
        error=validation.error,
        error_type=validation.error_type,
        normalized=normalized,
        phonemes=phonemes,
        vowel_count=sum(1 for phoneme in phonemes if phoneme.category == "vowel"),
        consonant_count=sum(1 for phoneme in phonemes if phoneme.category == "consonant"),
    )


def homorganic_verdict(
    first: str, second: str, *, tables: PhonologyTables | None = None
) -> RuleVerdict:
    """Decide whether two phonemes are savarna, in rule-predicate form."""
    resolved = resolve_tables(tables)
    left = classify(first, tables=resolved)
    right = classify(second, tables=resolved)
    for label, result in ((first, left), (second, right)):
        if result.equivalence_class is None:
            return RuleVerdict(
                applies=False,
                confidence=0.0,
                reason=f"{label!r} is not a classified phoneme",
            )
    if left.script is not right.script:
        return RuleVerdict(
            applies=False,
            confidence=0.0,
            reason=f"{first!r} ({left.script}) and {second!r} ({right.script}) use different scripts",
        )

    if are_homorganic(first, second, tables=resolved):
        return RuleVerdict(
            applies=True,
            confidence=1.0,
            reason=f"{first!r} and {second!r} share a savarna group",
        )
    return RuleVerdict(
        applies=False,
        confidence=1.0,
        reason=f"{first!r} ({left.articulation_place}) and {second!r} "
        f"({right.articulation_place}) are not savarna",
    )
