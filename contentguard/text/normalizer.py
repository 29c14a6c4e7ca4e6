"""Text normalizer — canonical lowercase ASCII form for term matching.

Defeats the usual filter-evasion tricks: accented letters, zero-width
characters inserted mid-word, Cyrillic/Greek look-alikes, leet speak,
spaced-out letters and stretched words.

Stage order is fixed; each stage assumes the previous one ran:

1. NFKD decomposition
2. strip invisible / control characters and combining marks
3. homoglyph folding (before lowercasing)
4. lowercase
5. leet substitution
6. collapse spaced single letters ("k i l l" -> "kill")
7. squeeze runs of 3+ identical characters to 2
8. anything outside ``[a-z0-9 ]`` becomes a space
9. collapse whitespace and trim

Stages 6-9 repeat until the text stops changing, so ``normalize`` is
idempotent.
"""

from __future__ import annotations

import re
import unicodedata

# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

# Characters that render as nothing and are used to split filtered words.
_INVISIBLE_CHARS = frozenset(
    "\u200b\u200c\u200d\ufeff\u00ad\u034f\u2060\u2061\u2062\u2063\u2064"
)

# Cyrillic and Greek look-alikes -> Latin. Applied before lowercasing so the
# uppercase forms are covered explicitly.
HOMOGLYPH_TABLE = str.maketrans({
    "\u0430": "a", "\u0410": "a",  # Cyrillic a
    "\u0435": "e", "\u0415": "e",  # Cyrillic ie
    "\u0456": "i", "\u0406": "i",  # Cyrillic byelorussian-ukrainian i
    "\u043e": "o", "\u041e": "o",  # Cyrillic o
    "\u0440": "p", "\u0420": "p",  # Cyrillic er
    "\u0441": "c", "\u0421": "c",  # Cyrillic es
    "\u0443": "y", "\u0423": "y",  # Cyrillic u
    "\u0445": "x", "\u0425": "x",  # Cyrillic ha
    "\u0412": "b",  # Cyrillic ve
    "\u041d": "h",  # Cyrillic en
    "\u041a": "k",  # Cyrillic ka
    "\u041c": "m",  # Cyrillic em
    "\u0422": "t",  # Cyrillic te
    "\u03b1": "a",  # Greek alpha
    "\u03b5": "e",  # Greek epsilon
    "\u03bf": "o",  # Greek omicron
})

LEET_TABLE = str.maketrans({
    "4": "a", "@": "a",
    "3": "e", "€": "e",
    "1": "i", "!": "i", "|": "i",
    "0": "o",
    "5": "s", "$": "s",
    "7": "t", "+": "t",
    "8": "b",
    "6": "g", "9": "g",
    "2": "z",
})

_SPACED_LETTERS_RE = re.compile(r"\b([a-z])\s+(?=[a-z]\b)")
_REPEAT_RE = re.compile(r"(.)\1{2,}")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9 ]")
_WHITESPACE_RE = re.compile(r"\s+")


def _is_invisible(ch: str) -> bool:
    if ch in _INVISIBLE_CHARS:
        return True
    category = unicodedata.category(ch)
    if category == "Cf":
        return True
    if category == "Cc":
        return not ch.isspace()
    return category == "Mn"


def strip_invisible(text: str) -> str:
    """Drop zero-width, format, control (non-whitespace) and combining characters."""
    return "".join(ch for ch in text if not _is_invisible(ch))


def _collapse(text: str) -> str:
    text = _SPACED_LETTERS_RE.sub(r"\1", text)
    text = _REPEAT_RE.sub(r"\1\1", text)
    text = _NON_ALNUM_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize(text: str | None) -> str:
    """Return the canonical comparison form of *text*.

    ``None`` and the empty string both normalize to ``""``.
    """
    if not text:
        return ""

    normalized = unicodedata.normalize("NFKD", text)
    normalized = strip_invisible(normalized)
    normalized = normalized.translate(HOMOGLYPH_TABLE)
    normalized = normalized.lower()
    normalized = normalized.translate(LEET_TABLE)

    previous = None
    while normalized != previous:
        previous = normalized
        normalized = _collapse(normalized)
    return normalized
