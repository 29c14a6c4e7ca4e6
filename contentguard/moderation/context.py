"""Context detection — signals that soften or harden a term hit.

All predicates look at the raw text, lowercased, not the normalized form:
emoji, apostrophes and exact titles are lost by normalization.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from contentguard.catalog.catalog import TermCatalog

BANTER_INDICATORS: frozenset[str] = frozenset({
    "lol", "lmao", "haha", "hehe", "jk", "just kidding", "kidding",
    "joking", "just joking", "no offense", "just saying",
    "\U0001F602",  # face with tears of joy
    "\U0001F923",  # rolling on the floor laughing
    "\U0001F605",  # grinning face with sweat
    "\U0001F606",  # grinning squinting face
    "\U0001F604",  # grinning face with smiling eyes
    "\U0001F601",  # beaming face
    "\U0001F643",  # upside-down face
    "\U0001F609",  # winking face
    "\U0001F61C",  # winking face with tongue
    "\U0001F61D",  # squinting face with tongue
    "\U0001F92A",  # zany face
    "\u2764\ufe0f",  # red heart
    "\U0001F480",  # skull
    "\U0001F4AF",  # hundred points
    "\U0001F44D",  # thumbs up
    "\U0001F525",  # fire
    "\U0001F60E",  # smiling face with sunglasses
})

_SELF_REFERENCE_RE = re.compile(r"\b(i\b|i'm\b|i am\b|me\b|myself\b)")
_INSULT_RE = re.compile(r"\b(idiot|stupid|dumb|moron|fool)\b")

ATTACK_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\byou\s+are\s+(a\s+|an\s+)?(stupid|idiot|moron|dumb|fool|loser)"),
    re.compile(r"\byou'?re\s+(a\s+|an\s+)?(stupid|idiot|moron|dumb|fool|loser)"),
    re.compile(r"\bgo\s+(die|kill yourself|f+u+c+k+ yourself)"),
    re.compile(r"\bkill yourself\b"),
    re.compile(r"\bf+u+c+k+\s+you\b"),
)


@dataclass(frozen=True)
class ContextSignals:
    book_context: bool = False
    friendly_banter: bool = False
    self_deprecating: bool = False
    targeted_attack: bool = False


class ContextClassifier:
    """Evaluates the context predicates against one catalog's whitelists."""

    def __init__(self, catalog: TermCatalog) -> None:
        self._catalog = catalog

    def is_book_context(self, text: str) -> bool:
        """Whitelisted phrase or book title present ("To Kill a Mockingbird")."""
        lowered = text.lower()
        return any(p in lowered for p in self._catalog.book_whitelist) or any(
            t in lowered for t in self._catalog.book_titles_whitelist
        )

    @staticmethod
    def is_friendly_banter(text: str) -> bool:
        lowered = text.lower()
        return any(marker in lowered for marker in BANTER_INDICATORS)

    @staticmethod
    def is_self_deprecating(text: str) -> bool:
        """Needs both a self-reference and an insult word."""
        lowered = text.lower()
        return bool(_SELF_REFERENCE_RE.search(lowered)) and bool(_INSULT_RE.search(lowered))

    @staticmethod
    def is_targeted_attack(text: str) -> bool:
        lowered = text.lower()
        return any(p.search(lowered) for p in ATTACK_PATTERNS)

    def classify(self, text: str) -> ContextSignals:
        return ContextSignals(
            book_context=self.is_book_context(text),
            friendly_banter=self.is_friendly_banter(text),
            self_deprecating=self.is_self_deprecating(text),
            targeted_attack=self.is_targeted_attack(text),
        )
