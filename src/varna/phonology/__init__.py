"""Phoneme tokenization, savarna classification and pratyāhāras."""

from varna.phonology.pratyahara import (
    COMMON_PRATYAHARAS,
    SHIVA_SUTRAS,
    expand_pratyahara,
    in_pratyahara,
    pratyaharas_containing,
)
from varna.phonology.queries import (
    are_homorganic,
    articulation_place_of,
    classify,
    counterpart,
    equivalence_class_of,
    guna_form,
    is_consonant,
    is_guna,
    is_guna_transformation,
    is_ik,
    is_vowel,
    is_vrddhi,
    is_vrddhi_transformation,
    vowel_grade,
    vrddhi_form,
)
from varna.phonology.tables import DEFAULT_TABLES, PhonologyTables, build_tables
from varna.phonology.tokenize import first_vowel, graphemes, tokenize, vowels_of

__all__ = [
    "COMMON_PRATYAHARAS",
    "DEFAULT_TABLES",
    "SHIVA_SUTRAS",
    "PhonologyTables",
    "are_homorganic",
    "articulation_place_of",
    "build_tables",
    "classify",
    "counterpart",
    "equivalence_class_of",
    "expand_pratyahara",
    "first_vowel",
    "graphemes",
    "guna_form",
    "in_pratyahara",
    "is_consonant",
    "is_guna",
    "is_guna_transformation",
    "is_ik",
    "is_vowel",
    "is_vrddhi",
    "is_vrddhi_transformation",
    "pratyaharas_containing",
    "tokenize",
    "vowel_grade",
    "vowels_of",
    "vrddhi_form",
]
