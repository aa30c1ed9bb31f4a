"""Savarna (homorganic) and articulation tables.

The tables are written once, keyed by IAST, and rendered into Devanagari
through the script inventories, so both scripts always share one structure.
A phoneme's equivalence class is the union of every savarna group that
contains it; this keeps membership symmetric and reflexive.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from varna.models import ArticulationPlace, Script
from varna.scripts.base import CONSONANT_LETTERS, VIRAMA, VOWEL_LETTERS

SAVARNA_GROUPS: dict[str, tuple[str, ...]] = {
    "guttural": ("k", "kh", "g", "gh", "ṅ", "a", "ā"),
    "palatal": ("c", "ch", "j", "jh", "ñ", "i", "ī", "e", "ai"),
    "retroflex": ("ṭ", "ṭh", "ḍ", "ḍh", "ṇ", "ṛ", "ṝ"),
    "dental": ("t", "th", "d", "dh", "n", "l", "s"),
    "labial": ("p", "ph", "b", "bh", "m", "u", "ū", "o", "au"),
    "y": ("y", "i", "ī", "e", "ai"),
    "r": ("r", "ṛ", "ṝ"),
    "v": ("v", "u", "ū", "o", "au"),
    "ś": ("ś", "i", "ī", "e", "ai"),
    "ṣ": ("ṣ", "ṛ", "ṝ"),
    "h": ("h", "a", "ā"),
}

ARTICULATION_PLACES: dict[ArticulationPlace, tuple[str, ...]] = {
    "guttural": ("k", "kh", "g", "gh", "ṅ", "a", "ā", "h"),
    "palatal": ("c", "ch", "j", "jh", "ñ", "i", "ī", "e", "ai", "y", "ś"),
    "retroflex": ("ṭ", "ṭh", "ḍ", "ḍh", "ṇ", "ṛ", "ṝ", "r", "ṣ"),
    "dental": ("t", "th", "d", "dh", "n", "l", "s"),
    "labial": ("p", "ph", "b", "bh", "m", "u", "ū", "o", "au", "v"),
}

VOWEL_GRADES: dict[str, tuple[str, ...]] = {
    "vrddhi": ("ā", "ai", "au"),
    "guna": ("a", "e", "o"),
    "ik": ("i", "ī", "u", "ū", "ṛ", "ṝ", "ḷ", "ḹ"),
}


# Guṇa and vṛddhi replacements; a trailing consonant is written with virama.
VOWEL_GRADATIONS: dict[str, dict[str, str]] = {
    "guna": {
        "i": "e", "ī": "e",
        "u": "o", "ū": "o",
        "ṛ": "ar", "ṝ": "ar",
        "ḷ": "al", "ḹ": "al",
    },
    "vrddhi": {
        "a": "ā", "e": "ai", "o": "au",
        "i": "ai", "ī": "ai",
        "u": "au", "ū": "au",
        "ṛ": "ār", "ṝ": "ār",
        "ḷ": "āl", "ḹ": "āl",
    },
}

VowelLetter = tuple[str, str, str | None]
ConsonantLetter = tuple[str, str]


@dataclass(frozen=True)
class PhonologyTables:
    """Immutable per-script lookup tables, built once and shared."""

    vowels: Mapping[Script, frozenset[str]]
    consonants: Mapping[Script, frozenset[str]]
    equivalence_classes: Mapping[Script, Mapping[str, tuple[str, ...]]]
    articulation_places: Mapping[Script, Mapping[str, ArticulationPlace]]
    vowel_grades: Mapping[str, str]
    gradations: Mapping[str, Mapping[str, str]]
    counterparts: Mapping[str, str]

    def inventory(self, script: Script) -> frozenset[str]:
        """All vowels and consonants known in `script`."""
        return self.vowels.get(script, frozenset()) | self.consonants.get(script, frozenset())


def build_tables(
    *,
    vowels: Iterable[VowelLetter] = VOWEL_LETTERS,
    consonants: Iterable[ConsonantLetter] = CONSONANT_LETTERS,
    groups: Mapping[str, Iterable[str]] = SAVARNA_GROUPS,
    places: Mapping[ArticulationPlace, Iterable[str]] = ARTICULATION_PLACES,
    grades: Mapping[str, Iterable[str]] = VOWEL_GRADES,
    gradations: Mapping[str, Mapping[str, str]] = VOWEL_GRADATIONS,
) -> PhonologyTables:
    """Build tables from literal data; raise ValueError on inconsistent data."""
    vowel_rendering = {iast: letter for iast, letter, _ in vowels}
    consonant_rendering = {iast: letter for iast, letter in consonants}
    rendering = {**vowel_rendering, **consonant_rendering}
    order = {iast: index for index, iast in enumerate(rendering)}

    members_by_phoneme: dict[str, set[str]] = {}
    for name, members in groups.items():
        member_set = set(members)
        _require_known(member_set, rendering, f"savarna group {name!r}")
        for phoneme in member_set:
            members_by_phoneme.setdefault(phoneme, set()).update(member_set)

    iast_classes = {
        phoneme: tuple(sorted(members, key=order.__getitem__))
        for phoneme, members in members_by_phoneme.items()
    }

    iast_places: dict[str, ArticulationPlace] = {}
    for place, members in places.items():
        member_list = list(members)
        _require_known(member_list, rendering, f"articulation place {place!r}")
        for phoneme in member_list:
            if phoneme in iast_places:
                raise ValueError(
                    f"{phoneme!r} is assigned to both {iast_places[phoneme]!r} and {place!r}"
                )
            iast_places[phoneme] = place

    vowel_grades: dict[str, str] = {}
    for grade, members in grades.items():
        member_list = [member for member in members if member in vowel_rendering]
        for phoneme in member_list:
            vowel_grades[phoneme] = grade
            vowel_grades[vowel_rendering[phoneme]] = grade

    counterparts = {**rendering, **{letter: iast for iast, letter in rendering.items()}}

    # Entries naming phonemes outside the inventory are skipped, as for grades.
    rendered_gradations: dict[str, dict[str, str]] = {}
    for grade, replacements in gradations.items():
        forms = rendered_gradations.setdefault(grade, {})
        for vowel, replacement in replacements.items():
            devanagari = _render_replacement(replacement, vowel_rendering, consonant_rendering)
            if vowel not in vowel_rendering or devanagari is None:
                continue
            forms[vowel] = replacement
            forms[vowel_rendering[vowel]] = devanagari

    return PhonologyTables(
        vowels=_freeze(
            {
                Script.IAST: frozenset(vowel_rendering),
                Script.DEVANAGARI: frozenset(vowel_rendering.values()),
            }
        ),
        consonants=_freeze(
            {
                Script.IAST: frozenset(consonant_rendering),
                Script.DEVANAGARI: frozenset(consonant_rendering.values()),
            }
        ),
        equivalence_classes=_freeze(
            {
                Script.IAST: _freeze(iast_classes),
                Script.DEVANAGARI: _freeze(
                    {
                        rendering[phoneme]: tuple(rendering[member] for member in members)
                        for phoneme, members in iast_classes.items()
                    }
                ),
            }
        ),
        articulation_places=_freeze(
            {
                Script.IAST: _freeze(iast_places),
                Script.DEVANAGARI: _freeze(
                    {rendering[phoneme]: place for phoneme, place in iast_places.items()}
                ),
            }
        ),
        vowel_grades=_freeze(vowel_grades),
        gradations=_freeze(
            {grade: _freeze(forms) for grade, forms in rendered_gradations.items()}
        ),
        counterparts=_freeze(counterparts),
    )


def _render_replacement(
    replacement: str,
    vowel_rendering: Mapping[str, str],
    consonant_rendering: Mapping[str, str],
) -> str | None:
    if replacement in vowel_rendering:
        return vowel_rendering[replacement]
    vowel, consonant = replacement[:-1], replacement[-1:]
    if vowel in vowel_rendering and consonant in consonant_rendering:
        return vowel_rendering[vowel] + consonant_rendering[consonant] + VIRAMA
    return None


def _require_known(members: Iterable[str], rendering: Mapping[str, str], label: str) -> None:
    unknown = sorted(member for member in members if member not in rendering)
    if unknown:
        raise ValueError(f"{label} names unknown phonemes: {', '.join(unknown)}")


def _freeze(mapping: dict) -> Mapping:
    return MappingProxyType(mapping)


DEFAULT_TABLES = build_tables()


def resolve_tables(tables: PhonologyTables | None = None) -> PhonologyTables:
    """Return `tables`, or the process-wide default tables."""
    return tables if tables is not None else DEFAULT_TABLES
