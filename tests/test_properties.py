from itertools import product

import pytest

from varna.models import Script
from varna.phonology import (
    DEFAULT_TABLES,
    are_homorganic,
    articulation_place_of,
    classify,
    equivalence_class_of,
    tokenize,
)
from varna.scripts import normalize
from varna.scripts.base import CONSONANT_LETTERS, VOWEL_LETTERS

LETTER_PAIRS = [(iast, letter) for iast, letter, _ in VOWEL_LETTERS] + list(CONSONANT_LETTERS)


@pytest.mark.parametrize("script", [Script.IAST, Script.DEVANAGARI])
def test_homorganic_relation_is_symmetric(script: Script) -> None:
    inventory = sorted(DEFAULT_TABLES.inventory(script))

    for first, second in product(inventory, repeat=2):
        assert are_homorganic(first, second) == are_homorganic(second, first)


@pytest.mark.parametrize("script", [Script.IAST, Script.DEVANAGARI])
def test_homorganic_relation_is_reflexive_for_classified_phonemes(script: Script) -> None:
    for phoneme in DEFAULT_TABLES.equivalence_classes[script]:
        assert are_homorganic(phoneme, phoneme)


@pytest.mark.parametrize(("iast", "devanagari"), LETTER_PAIRS)
def test_scripts_agree_on_classification(iast: str, devanagari: str) -> None:
    assert articulation_place_of(iast) == articulation_place_of(devanagari)
    assert classify(iast).is_vowel == classify(devanagari).is_vowel
    assert classify(iast).is_consonant == classify(devanagari).is_consonant

    iast_class = equivalence_class_of(iast)
    devanagari_class = equivalence_class_of(devanagari)
    if iast_class is None:
        assert devanagari_class is None
    else:
        assert {DEFAULT_TABLES.counterparts[member] for member in iast_class} == devanagari_class


@pytest.mark.parametrize(
    "word",
    ["bhagavadgītā", "रामायणम्", "Śiva", "ra\u0304ma", "dharma-kṣetre", "?!", "x y z"],
)
def test_normalization_is_idempotent_for_both_targets(word: str) -> None:
    for target in (Script.IAST, Script.DEVANAGARI):
        once = normalize(word, target)
        assert normalize(once, target) == once


@pytest.mark.parametrize(
    "word", ["bhagavadgītā", "रामायणम्", "ra\u0304ma", "\u0915\u093c", "??", "k\u0310", "ॐ नमः"]
)
def test_tokenization_is_complete(word: str) -> None:
    assert "".join(phoneme.grapheme for phoneme in tokenize(word)) == word
