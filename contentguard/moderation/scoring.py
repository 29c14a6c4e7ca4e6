"""Scoring engine — ordered rule pipeline over one piece of text.

Rules run in a fixed order against a shared :class:`RuleResult`. A rule may
return a finished result instead of ``None``, which stops the pipeline; only
the critical-term rule does so today.

Rule weights:

=====================  =========================================
critical term          score 100, blocks, stops the pipeline
high term              +40 (+80 targeted, +15 banter, 0 joking
                       about oneself); skipped in book context
medium term            +25 (+40 targeted); skipped in banter
troll pattern          +30 each
spam pattern           +35 each
more than 2 URLs       +10 per URL
off-topic keyword      +10 each
shouting               +15
repeated characters    +10
=====================  =========================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from contentguard.catalog.catalog import TermCatalog
from contentguard.moderation.context import ContextClassifier, ContextSignals
from contentguard.moderation.models import Category, RuleResult, Severity
from contentguard.text.matcher import approx_match
from contentguard.text.normalizer import normalize

MAX_SCORE = 100
BLOCK_THRESHOLD = 75

_URL_RE = re.compile(r"https?://", re.IGNORECASE)
_REPEATED_CHAR_RE = re.compile(r"(.)\1{4,}")

TROLL_LABEL = "troll_pattern"
SPAM_LABEL = "spam_pattern"


@dataclass(frozen=True)
class ScoringInput:
    raw: str
    normalized: str
    signals: ContextSignals


Rule = Callable[[ScoringInput, RuleResult], Optional[RuleResult]]


class ScoringEngine:
    """Deterministic scorer bound to one :class:`TermCatalog`."""

    def __init__(self, catalog: TermCatalog) -> None:
        self.catalog = catalog
        self.context = ContextClassifier(catalog)
        self.rules: tuple[Rule, ...] = (
            self._critical_terms,
            self._high_terms,
            self._medium_terms,
            self._troll_patterns,
            self._spam_patterns,
            self._url_count,
            self._off_topic_keywords,
            self._shouting,
            self._repeated_characters,
        )

    def score(self, raw: Optional[str], normalized: Optional[str] = None) -> RuleResult:
        """Run every rule over *raw* and return the clamped result.

        *normalized* may be passed when the caller already normalized *raw*.
        Empty or ``None`` text scores 0 / CLEAN.
        """
        if not raw:
            return RuleResult()

        data = ScoringInput(
            raw=raw,
            normalized=normalize(raw) if normalized is None else normalized,
            signals=self.context.classify(raw),
        )
        result = RuleResult()
        for rule in self.rules:
            verdict = rule(data, result)
            if verdict is not None:
                return verdict

        result.score = max(0, min(result.score, MAX_SCORE))
        result.should_block = result.should_block or result.score >= BLOCK_THRESHOLD
        return result

    # -- term rules ----------------------------------------------------------

    def _critical_terms(self, data: ScoringInput, result: RuleResult) -> Optional[RuleResult]:
        for term in self.catalog.critical:
            if approx_match(data.normalized, term.normalized):
                return RuleResult(
                    score=MAX_SCORE,
                    category=Category.TOXIC,
                    severity=Severity.CRITICAL,
                    matched_terms=[term.text],
                    should_block=True,
                )
        return None

    def _high_terms(self, data: ScoringInput, result: RuleResult) -> None:
        signals = data.signals
        if signals.book_context:
            return
        for term in self.catalog.high:
            if not approx_match(data.normalized, term.normalized):
                continue
            result.add_term(term.text)
            if signals.self_deprecating and signals.friendly_banter:
                continue
            if signals.friendly_banter:
                result.score += 15
            elif signals.targeted_attack:
                result.score += 80
            else:
                result.score += 40
            result.classify(Category.TOXIC, Severity.HIGH)

    def _medium_terms(self, data: ScoringInput, result: RuleResult) -> None:
        signals = data.signals
        if signals.friendly_banter:
            return
        for term in self.catalog.medium:
            if not approx_match(data.normalized, term.normalized):
                continue
            result.add_term(term.text)
            result.score += 40 if signals.targeted_attack else 25
            result.classify(Category.TOXIC, Severity.MEDIUM)

    # -- pattern rules -------------------------------------------------------

    def _troll_patterns(self, data: ScoringInput, result: RuleResult) -> None:
        for pattern in self.catalog.troll_patterns:
            if pattern.search(data.raw):
                result.add_term(TROLL_LABEL)
                result.score += 30
                result.classify(Category.TOXIC, Severity.MEDIUM)

    def _spam_patterns(self, data: ScoringInput, result: RuleResult) -> None:
        for pattern in self.catalog.spam_patterns:
            if pattern.search(data.raw):
                result.add_term(SPAM_LABEL)
                result.score += 35
                result.classify(Category.SPAM, Severity.MEDIUM)

    @staticmethod
    def _url_count(data: ScoringInput, result: RuleResult) -> None:
        url_count = len(_URL_RE.findall(data.raw))
        if url_count > 2:
            result.score += url_count * 10
            result.classify(Category.SPAM, Severity.LOW)

    def _off_topic_keywords(self, data: ScoringInput, result: RuleResult) -> None:
        for keyword in self.catalog.off_topic_keywords:
            if keyword.normalized in data.normalized:
                result.score += 10
                result.classify(Category.OFF_TOPIC, Severity.LOW)

    # -- style rules ---------------------------------------------------------

    @staticmethod
    def _shouting(data: ScoringInput, result: RuleResult) -> None:
        # Ratio over the full length, spaces and punctuation included.
        raw = data.raw
        caps_ratio = sum(1 for c in raw if c.isupper()) * 100 // max(len(raw), 1)
        if caps_ratio > 50 and len(raw) > 20:
            result.score += 15

    @staticmethod
    def _repeated_characters(data: ScoringInput, result: RuleResult) -> None:
        if _REPEATED_CHAR_RE.search(data.raw):
            result.score += 10
