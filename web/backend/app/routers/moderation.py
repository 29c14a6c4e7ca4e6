"""Content moderation router -- check user content before it is published.

Prefix: ``/api/content-moderation``
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from contentguard.moderation.models import ModerationRequest
from contentguard.moderation.moderator import ContentModerator
from web.backend.app.models.api import (
    CatalogSummaryResponse,
    ModerationCheckRequest,
    ModerationCheckResponse,
    QuickCheckResponse,
)

router = APIRouter(prefix="/api/content-moderation", tags=["content-moderation"])

# Shared moderator instance; the app lifespan creates it before serving.
_moderator: Optional[ContentModerator] = None


def get_moderator() -> ContentModerator:
    """Return the singleton ContentModerator instance."""
    global _moderator
    if _moderator is None:
        _moderator = ContentModerator()
    return _moderator


@router.post(
    "/check",
    response_model=ModerationCheckResponse,
    summary="Check content for policy violations",
)
def check_content(
    request: ModerationCheckRequest,
    moderator: ContentModerator = Depends(get_moderator),
):
    """Return decision (APPROVE/FLAG/BLOCK), category, severity and matched terms.

    Use this before submitting reviews, listing descriptions or messages.
    """
    response = moderator.moderate(
        ModerationRequest(
            text=request.text,
            user_reputation=request.user_reputation,
            content_type=request.content_type,
            context=request.context,
        )
    )
    return ModerationCheckResponse(**response.to_dict())


@router.post(
    "/quick-check",
    response_model=QuickCheckResponse,
    summary="Quick approve/reject check",
)
def quick_check(
    text: str = Query(..., max_length=10000),
    moderator: ContentModerator = Depends(get_moderator),
):
    """Lightweight allow/review answer for inline validation (e.g. as the user types)."""
    result = moderator.quick_check(text)
    return QuickCheckResponse(allowed=result.allowed, needs_review=result.needs_review)


@router.get(
    "/catalog",
    response_model=CatalogSummaryResponse,
    summary="Term catalog status",
)
def catalog_status(moderator: ContentModerator = Depends(get_moderator)):
    """Entry counts of the active catalog and whether it is running on the fallback tier."""
    return CatalogSummaryResponse(**moderator.catalog.summary())
