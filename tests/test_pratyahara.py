from varna.models import Script
from varna.phonology import (
    SHIVA_SUTRAS,
    expand_pratyahara,
    in_pratyahara,
    pratyaharas_containing,
)


def test_fourteen_sutras() -> None:
    assert len(SHIVA_SUTRAS) == 14
    assert SHIVA_SUTRAS[0] == (("a", "i", "u"), "ṇ")
    assert SHIVA_SUTRAS[-1] == (("h",), "l")


def test_vowel_groups() -> None:
    assert expand_pratyahara("ac") == ("a", "i", "u", "ṛ", "ḷ", "e", "o", "ai", "au")
    assert expand_pratyahara("ik") == ("i", "u", "ṛ", "ḷ")
    assert expand_pratyahara("ec") == ("e", "o", "ai", "au")


def test_consonant_groups_drop_helper_vowel() -> None:
    hal = expand_pratyahara("hal")

    assert len(hal) == 33
    assert hal[0] == "h"
    assert hal.count("h") == 1
    assert expand_pratyahara("yaṇ") == ("y", "v", "r", "l")
    assert expand_pratyahara("śal") == ("ś", "ṣ", "s", "h")
    assert expand_pratyahara("jhaś") == ("jh", "bh", "gh", "ḍh", "dh", "j", "b", "g", "ḍ", "d")


def test_ambiguous_marker_defaults_to_later_sutra() -> None:
    assert expand_pratyahara("aṇ")[-1] == "l"
    assert len(expand_pratyahara("aṇ")) == 14
    assert expand_pratyahara("aṇ", marker_occurrence=1) == ("a", "i", "u")
    assert expand_pratyahara("aṇ", marker_occurrence=3) == ()


def test_devanagari_names_and_output() -> None:
    expected = ("अ", "इ", "उ", "ऋ", "ऌ", "ए", "ओ", "ऐ", "औ")

    assert expand_pratyahara("अच्", Script.DEVANAGARI) == expected
    assert expand_pratyahara("ac", Script.DEVANAGARI) == expected
    assert expand_pratyahara("हल्") == expand_pratyahara("hal")


def test_savarna_expansion_adds_long_vowels() -> None:
    assert expand_pratyahara("ak", include_savarna=True) == (
        "a", "ā", "i", "ī", "u", "ū", "ṛ", "ṝ", "ḷ", "ḹ",
    )


def test_unknown_names_expand_to_nothing() -> None:
    assert expand_pratyahara("xyz") == ()
    assert expand_pratyahara("a") == ()
    assert expand_pratyahara("") == ()
    assert expand_pratyahara(None) == ()
    assert expand_pratyahara("ka") == ()


def test_membership() -> None:
    assert in_pratyahara("इ", "ac")
    assert in_pratyahara("क", "hal")
    assert in_pratyahara("I", "ik")
    assert not in_pratyahara("k", "ac")
    assert not in_pratyahara("ā", "ac")
    assert in_pratyahara("ā", "ac", include_savarna=True)
    assert not in_pratyahara(None, "ac")


def test_groups_containing_a_phoneme() -> None:
    assert pratyaharas_containing("i") == ("ak", "ac", "aṭ", "aṇ", "ik")
    assert pratyaharas_containing("य") == ("aṭ", "aṇ", "hal", "yaṇ")
    assert pratyaharas_containing("s") == ("hal", "jhal", "śal")
    assert pratyaharas_containing("ā") == ()
    assert pratyaharas_containing("ā", include_savarna=True) == ("ak", "ac", "aṭ", "aṇ")
    assert pratyaharas_containing("x") == ()
    assert pratyaharas_containing(None) == ()
