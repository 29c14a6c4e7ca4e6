"""Tests for the decision policy."""

from contentguard.moderation.models import Decision, RuleResult
from contentguard.moderation.policy import (
    REASON_CLEAN,
    REASON_GUIDELINES,
    REASON_MULTIPLE,
    REASON_REVIEW,
    approve_threshold,
    clamp_reputation,
    decide,
    is_blocked,
    is_reviewable,
)


def test_approve_threshold_follows_reputation():
    assert approve_threshold(50) == 25
    assert approve_threshold(0) == 20
    assert approve_threshold(100) == 30
    assert approve_threshold(45) == 24
    assert approve_threshold(None) == 25


def test_reputation_is_clamped():
    assert clamp_reputation(150) == 100
    assert clamp_reputation(-5) == 0
    assert clamp_reputation(None) == 50
    assert approve_threshold(150) == 30
    assert approve_threshold(-5) == 20


def test_decision_bands_at_neutral_reputation():
    assert decide(RuleResult(score=0)).decision == Decision.APPROVE
    assert decide(RuleResult(score=25)).decision == Decision.APPROVE
    assert decide(RuleResult(score=26)).decision == Decision.FLAG
    assert decide(RuleResult(score=74)).decision == Decision.FLAG
    assert decide(RuleResult(score=75)).decision == Decision.BLOCK
    assert decide(RuleResult(score=100)).decision == Decision.BLOCK


def test_reasons():
    assert decide(RuleResult(score=0)).reason == REASON_CLEAN
    assert decide(RuleResult(score=40)).reason == REASON_REVIEW
    assert decide(RuleResult(score=80)).reason == REASON_MULTIPLE
    assert decide(RuleResult(score=100, should_block=True)).reason == REASON_GUIDELINES


def test_should_block_overrides_score():
    outcome = decide(RuleResult(score=10, should_block=True))
    assert outcome.decision == Decision.BLOCK
    assert outcome.reason == REASON_GUIDELINES


def test_reputation_shifts_approve_band_only():
    result = RuleResult(score=28)
    assert decide(result, 50).decision == Decision.FLAG
    assert decide(result, 100).decision == Decision.APPROVE
    assert decide(RuleResult(score=22), 0).decision == Decision.FLAG
    # block threshold never moves
    assert decide(RuleResult(score=75), 100).decision == Decision.BLOCK
    assert decide(RuleResult(score=74), 0).decision == Decision.FLAG


def test_ai_is_never_used():
    for score in (0, 50, 100):
        assert decide(RuleResult(score=score)).ai_used is False


def test_is_blocked():
    assert is_blocked(RuleResult(score=75))
    assert is_blocked(RuleResult(score=0, should_block=True))
    assert not is_blocked(RuleResult(score=74))


def test_is_reviewable():
    assert is_reviewable(RuleResult(score=25))
    assert is_reviewable(RuleResult(score=74))
    assert not is_reviewable(RuleResult(score=24))
    assert not is_reviewable(RuleResult(score=75))
