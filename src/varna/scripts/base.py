"""Character inventories for Devanagari and IAST."""

from __future__ import annotations

DEVANAGARI_BLOCK = ("ऀ", "ॿ")

VIRAMA = "्"
NUKTA = "़"
ANUSVARA = "ं"
VISARGA = "ः"
CANDRABINDU = "ँ"
AVAGRAHA = "ऽ"
OM = "ॐ"
DANDA = "।"
DOUBLE_DANDA = "॥"
UDATTA = "॑"
ANUDATTA = "॒"

# (IAST, independent letter, dependent sign); the inherent vowel has no sign.
VOWEL_LETTERS: tuple[tuple[str, str, str | None], ...] = (
    ("a", "अ", None),
    ("ā", "आ", "ा"),
    ("i", "इ", "ि"),
    ("ī", "ई", "ी"),
    ("u", "उ", "ु"),
    ("ū", "ऊ", "ू"),
    ("ṛ", "ऋ", "ृ"),
    ("ṝ", "ॠ", "ॄ"),
    ("ḷ", "ऌ", "ॢ"),
    ("ḹ", "ॡ", "ॣ"),
    ("e", "ए", "े"),
    ("ai", "ऐ", "ै"),
    ("o", "ओ", "ो"),
    ("au", "औ", "ौ"),
)

CONSONANT_LETTERS: tuple[tuple[str, str], ...] = (
    ("k", "क"),
    ("kh", "ख"),
    ("g", "ग"),
    ("gh", "घ"),
    ("ṅ", "ङ"),
    ("c", "च"),
    ("ch", "छ"),
    ("j", "ज"),
    ("jh", "झ"),
    ("ñ", "ञ"),
    ("ṭ", "ट"),
    ("ṭh", "ठ"),
    ("ḍ", "ड"),
    ("ḍh", "ढ"),
    ("ṇ", "ण"),
    ("t", "त"),
    ("th", "थ"),
    ("d", "द"),
    ("dh", "ध"),
    ("n", "न"),
    ("p", "प"),
    ("ph", "फ"),
    ("b", "ब"),
    ("bh", "भ"),
    ("m", "म"),
    ("y", "य"),
    ("r", "र"),
    ("l", "ल"),
    ("v", "व"),
    ("ś", "श"),
    ("ṣ", "ष"),
    ("s", "स"),
    ("h", "ह"),
)

# Syllable modifiers: anusvara, visarga, candrabindu.
MARK_LETTERS: tuple[tuple[str, str], ...] = (
    ("ṃ", ANUSVARA),
    ("ḥ", VISARGA),
    ("m\u0310", CANDRABINDU),
)

DIGITS: tuple[tuple[str, str], ...] = tuple(
    (str(value), chr(0x0966 + value)) for value in range(10)
)

DEVANAGARI_VOWELS = frozenset(letter for _, letter, _ in VOWEL_LETTERS)
DEVANAGARI_VOWEL_SIGNS = frozenset(sign for _, _, sign in VOWEL_LETTERS if sign)
DEVANAGARI_CONSONANTS = frozenset(letter for _, letter in CONSONANT_LETTERS)
DEVANAGARI_MARKS = frozenset(mark for _, mark in MARK_LETTERS)
DEVANAGARI_ACCENTS = frozenset({UDATTA, ANUDATTA})
DEVANAGARI_DIGITS = frozenset(digit for _, digit in DIGITS)

VOWEL_SIGN_TO_LETTER = {sign: letter for _, letter, sign in VOWEL_LETTERS if sign}

DEVANAGARI_ACCEPTED = (
    DEVANAGARI_VOWELS
    | DEVANAGARI_VOWEL_SIGNS
    | DEVANAGARI_CONSONANTS
    | DEVANAGARI_MARKS
    | DEVANAGARI_ACCENTS
    | DEVANAGARI_DIGITS
    | {VIRAMA, AVAGRAHA, OM, DANDA, DOUBLE_DANDA}
)

_IAST_DIACRITIC_LETTERS = "āīūṛṝḷḹṅñṭḍṇśṣṃḥ"
_IAST_PLAIN_LETTERS = "abcdeghijklmnoprstuvy"

IAST_LETTERS = frozenset(
    _IAST_PLAIN_LETTERS
    + _IAST_PLAIN_LETTERS.upper()
    + _IAST_DIACRITIC_LETTERS
    + _IAST_DIACRITIC_LETTERS.upper()
)
IAST_COMBINING = frozenset({"\u0310"})

IAST_VOWELS = frozenset(iast for iast, _, _ in VOWEL_LETTERS)
IAST_CONSONANTS = frozenset(iast for iast, _ in CONSONANT_LETTERS)
IAST_MARKS = frozenset(iast for iast, _ in MARK_LETTERS)

SEPARATORS = frozenset({"-", "'", "|"})


def is_devanagari_char(char: str) -> bool:
    """Return True when the character falls in the Devanagari Unicode block."""
    return DEVANAGARI_BLOCK[0] <= char <= DEVANAGARI_BLOCK[1]
