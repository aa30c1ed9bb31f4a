"""Śivasūtras and pratyāhāra expansion.

A pratyāhāra names a phoneme group by its first sound and the `it` marker
that closes a later Śivasūtra: ``ac`` runs from ``a`` to the marker ``c``.
Markers themselves never belong to the group.
"""

from __future__ import annotations

from varna.models import Script
from varna.phonology.queries import counterpart
from varna.phonology.tables import PhonologyTables, resolve_tables
from varna.scripts.detect import detect_script
from varna.scripts.segment import segment
from varna.scripts.transliterate import normalize

# (sounds, it marker) for each of the fourteen Śivasūtras.
SHIVA_SUTRAS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("a", "i", "u"), "ṇ"),
    (("ṛ", "ḷ"), "k"),
    (("e", "o"), "ṅ"),
    (("ai", "au"), "c"),
    (("h", "y", "v", "r"), "ṭ"),
    (("l",), "ṇ"),
    (("ñ", "m", "ṅ", "ṇ", "n"), "m"),
    (("jh", "bh"), "ñ"),
    (("gh", "ḍh", "dh"), "ṣ"),
    (("j", "b", "g", "ḍ", "d"), "ś"),
    (("kh", "ph", "ch", "ṭh", "th", "c", "ṭ", "t"), "v"),
    (("k", "p"), "y"),
    (("ś", "ṣ", "s"), "r"),
    (("h",), "l"),
)

# Short vowels that also denote their long counterparts when savarnas are included.
_LONG_COUNTERPARTS = {"a": "ā", "i": "ī", "u": "ū", "ṛ": "ṝ", "ḷ": "ḹ"}

# Names the grammar uses most often, in the order results are reported.
COMMON_PRATYAHARAS: tuple[str, ...] = (
    "ak",
    "ac",
    "aṭ",
    "aṇ",
    "ik",
    "ec",
    "aic",
    "hal",
    "yaṇ",
    "jhal",
    "jhaś",
    "śal",
)


def expand_pratyahara(
    name: object,
    script: Script = Script.IAST,
    *,
    marker_occurrence: int | None = None,
    include_savarna: bool = False,
    tables: PhonologyTables | None = None,
) -> tuple[str, ...]:
    """Expand a pratyāhāra name such as ``ac`` or ``हल्`` into its phonemes.

    The marker ``ṇ`` closes two sūtras; by default the later one (after ``l``)
    is used, and ``marker_occurrence=1`` selects the first. Unknown or
    ill-formed names expand to an empty tuple.
    """
    parsed = _parse_name(name)
    if parsed is None:
        return ()
    start, marker = parsed

    flat = [
        (sutra_index, sound)
        for sutra_index, (sounds, _) in enumerate(SHIVA_SUTRAS)
        for sound in sounds
    ]
    start_position = next(
        (position for position, (_, sound) in enumerate(flat) if sound == start), None
    )
    if start_position is None:
        return ()
    start_sutra = flat[start_position][0]

    candidates = [
        index
        for index, (_, sutra_marker) in enumerate(SHIVA_SUTRAS)
        if sutra_marker == marker and index >= start_sutra
    ]
    if not candidates:
        return ()
    if marker_occurrence is None:
        end_sutra = candidates[-1] if marker == "ṇ" else candidates[0]
    elif 1 <= marker_occurrence <= len(candidates):
        end_sutra = candidates[marker_occurrence - 1]
    else:
        return ()

    phonemes: list[str] = []
    for sutra_index, sound in flat[start_position:]:
        if sutra_index > end_sutra:
            break
        if sound not in phonemes:
            phonemes.append(sound)
        long_vowel = _LONG_COUNTERPARTS.get(sound)
        if include_savarna and long_vowel and long_vowel not in phonemes:
            phonemes.append(long_vowel)

    if script is Script.DEVANAGARI:
        counterparts = resolve_tables(tables).counterparts
        return tuple(counterparts.get(sound, sound) for sound in phonemes)
    return tuple(phonemes)


def in_pratyahara(
    phoneme: object,
    name: object,
    *,
    include_savarna: bool = False,
    tables: PhonologyTables | None = None,
) -> bool:
    """Return True when `phoneme` (either script) belongs to the named group."""
    if detect_script(phoneme) is Script.DEVANAGARI:
        sound = counterpart(phoneme, tables=tables)
    else:
        sound = normalize(phoneme)
    if not sound:
        return False
    return sound in expand_pratyahara(name, include_savarna=include_savarna, tables=tables)


def pratyaharas_containing(
    phoneme: object,
    *,
    include_savarna: bool = False,
    tables: PhonologyTables | None = None,
) -> tuple[str, ...]:
    """Return the names in `COMMON_PRATYAHARAS` whose groups include `phoneme`."""
    return tuple(
        name
        for name in COMMON_PRATYAHARAS
        if in_pratyahara(phoneme, name, include_savarna=include_savarna, tables=tables)
    )


def _parse_name(name: object) -> tuple[str, str] | None:
    if not isinstance(name, str) or detect_script(name) is Script.UNKNOWN:
        return None
    sounds = [unit.key for unit in segment(normalize(name) or "")]
    if len(sounds) < 2:
        return None
    *head, marker = sounds
    # Consonant starts are pronounced with a helper "a": hal = h + a + l.
    if len(head) == 2 and head[1] == "a":
        head = head[:1]
    if len(head) != 1:
        return None
    return head[0], marker
