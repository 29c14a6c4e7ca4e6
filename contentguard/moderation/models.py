"""Data models for the content moderation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Decision(Enum):
    APPROVE = "APPROVE"
    FLAG = "FLAG"  # Held for human review
    BLOCK = "BLOCK"


class Category(Enum):
    CLEAN = "CLEAN"
    TOXIC = "TOXIC"
    SPAM = "SPAM"
    OFF_TOPIC = "OFF_TOPIC"


class Severity(Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


DEFAULT_REPUTATION = 50


@dataclass
class ModerationRequest:
    """A piece of user content to moderate."""

    text: Optional[str]
    user_reputation: Optional[int] = DEFAULT_REPUTATION  # 0-100
    content_type: str = "review"  # "review" | "listing_title" | "listing_description" | "message"
    context: Optional[str] = None  # reserved for the AI fallback


@dataclass
class RuleResult:
    """Outcome of the scoring pipeline, before reputation is applied."""

    score: int = 0
    category: Category = Category.CLEAN
    severity: Severity = Severity.LOW
    matched_terms: list[str] = field(default_factory=list)
    should_block: bool = False

    def add_term(self, term: str) -> None:
        """Record *term* once, keeping first-seen order."""
        if term not in self.matched_terms:
            self.matched_terms.append(term)

    def classify(self, category: Category, severity: Severity) -> None:
        """Set category and severity unless an earlier rule already did."""
        if self.category == Category.CLEAN:
            self.category = category
            self.severity = severity


@dataclass
class ModerationResponse:
    """Final moderation verdict returned to callers."""

    decision: Decision
    category: Category
    severity: Severity
    score: int
    matched_terms: Optional[list[str]]
    reason: str
    ai_used: bool = False
    processing_time_ms: int = 0

    def to_dict(self) -> dict:
        return {
            "decision": self.decision.value,
            "category": self.category.value,
            "severity": self.severity.value,
            "score": self.score,
            "matched_terms": self.matched_terms,
            "reason": self.reason,
            "ai_used": self.ai_used,
            "processing_time_ms": self.processing_time_ms,
        }


@dataclass
class QuickCheckResult:
    """Allow / review answer for inline validation."""

    allowed: bool
    needs_review: bool
