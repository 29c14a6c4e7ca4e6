"""Pydantic models for API request/response serialization.

These models mirror the contentguard dataclasses and provide JSON
serialization and request validation for the FastAPI endpoints.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Content moderation models
# ---------------------------------------------------------------------------


class ModerationCheckRequest(BaseModel):
    """Mirrors contentguard.moderation.models.ModerationRequest."""

    text: str = Field(..., min_length=1, max_length=10000)
    content_type: Literal["review", "listing_title", "listing_description", "message"] = "review"
    user_reputation: int = Field(50, ge=0, le=100)
    context: Optional[str] = Field(None, max_length=500)


class ModerationCheckResponse(BaseModel):
    """Mirrors contentguard.moderation.models.ModerationResponse."""

    decision: Literal["APPROVE", "FLAG", "BLOCK"]
    category: Literal["CLEAN", "TOXIC", "SPAM", "OFF_TOPIC"]
    severity: Literal["LOW", "MEDIUM", "HIGH", "CRITICAL"]
    score: int = Field(..., ge=0, le=100)
    matched_terms: Optional[list[str]] = None
    reason: str = ""
    ai_used: bool = False
    processing_time_ms: int = 0


class QuickCheckResponse(BaseModel):
    """Mirrors contentguard.moderation.models.QuickCheckResult."""

    allowed: bool
    needs_review: bool


class CatalogSummaryResponse(BaseModel):
    """Mirrors contentguard.catalog.TermCatalog.summary()."""

    source: str = ""
    degraded: bool = False
    critical: int = 0
    high: int = 0
    medium: int = 0
    book_whitelist: int = 0
    book_titles_whitelist: int = 0
    troll_patterns: int = 0
    spam_patterns: int = 0
    off_topic_keywords: int = 0
