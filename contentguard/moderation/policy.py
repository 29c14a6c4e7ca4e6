"""Decision policy — turns a rule score into APPROVE / FLAG / BLOCK.

Thresholds at neutral reputation (50):

- 0-25: APPROVE
- 26-74: FLAG for human review
- 75-100: BLOCK

The approve threshold shifts by up to 5 points with the submitter's
reputation: 20 at reputation 0, 30 at reputation 100. The block threshold
does not move.
"""

from __future__ import annotations

from dataclasses import dataclass

from contentguard.moderation.models import DEFAULT_REPUTATION, Decision, RuleResult
from contentguard.moderation.scoring import BLOCK_THRESHOLD

APPROVE_THRESHOLD = 25

REASON_GUIDELINES = "Content violates community guidelines"
REASON_MULTIPLE = "Multiple policy violations detected"
REASON_CLEAN = "Content appears clean"
REASON_REVIEW = "Content flagged for human review"


@dataclass(frozen=True)
class PolicyOutcome:
    decision: Decision
    reason: str
    ai_used: bool = False


def clamp_reputation(user_reputation: int | None) -> int:
    if user_reputation is None:
        return DEFAULT_REPUTATION
    return max(0, min(100, user_reputation))


def approve_threshold(user_reputation: int | None = DEFAULT_REPUTATION) -> int:
    """Highest score still approved for a submitter with this reputation."""
    reputation_factor = (clamp_reputation(user_reputation) - 50) / 100
    return int(APPROVE_THRESHOLD + reputation_factor * 10)


def decide(result: RuleResult, user_reputation: int | None = DEFAULT_REPUTATION) -> PolicyOutcome:
    if result.should_block:
        return PolicyOutcome(Decision.BLOCK, REASON_GUIDELINES)
    if result.score >= BLOCK_THRESHOLD:
        return PolicyOutcome(Decision.BLOCK, REASON_MULTIPLE)
    if result.score <= approve_threshold(user_reputation):
        return PolicyOutcome(Decision.APPROVE, REASON_CLEAN)
    # Uncertain zone: an AI classifier would be consulted here.
    return PolicyOutcome(Decision.FLAG, REASON_REVIEW)


def is_blocked(result: RuleResult) -> bool:
    return result.should_block or result.score >= BLOCK_THRESHOLD


def is_reviewable(result: RuleResult) -> bool:
    return APPROVE_THRESHOLD <= result.score < BLOCK_THRESHOLD
