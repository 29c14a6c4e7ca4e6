"""Content moderation: context signals, rule scoring and the decision policy."""

from contentguard.moderation.models import (
    Category,
    Decision,
    ModerationRequest,
    ModerationResponse,
    QuickCheckResult,
    RuleResult,
    Severity,
)
from contentguard.moderation.moderator import ContentModerator

__all__ = [
    "Category",
    "ContentModerator",
    "Decision",
    "ModerationRequest",
    "ModerationResponse",
    "QuickCheckResult",
    "RuleResult",
    "Severity",
]
