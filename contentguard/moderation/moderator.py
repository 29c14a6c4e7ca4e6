"""Content moderator — the entry point for moderating user content.

Wraps the scoring engine and decision policy behind the calls the write
paths use:

- :meth:`ContentModerator.moderate` for a full verdict
- :meth:`ContentModerator.should_block` / :meth:`ContentModerator.needs_review`
  for inline validation
- :meth:`ContentModerator.quick_check` for the allow/review pair

None of these raise for any text. A fault inside the engine is logged and the
content is sent to human review rather than failing the caller's request.

The moderator keeps no per-call state; the catalog is swapped as a whole on
:meth:`ContentModerator.reload_catalog`, so one instance can serve many
threads.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Optional

from contentguard.catalog.catalog import TermCatalog, load_catalog
from contentguard.config import Settings, get_settings
from contentguard.moderation.models import (
    DEFAULT_REPUTATION,
    Category,
    Decision,
    ModerationRequest,
    ModerationResponse,
    QuickCheckResult,
    RuleResult,
    Severity,
)
from contentguard.moderation.policy import (
    REASON_REVIEW,
    clamp_reputation,
    decide,
    is_blocked,
    is_reviewable,
)
from contentguard.moderation.scoring import ScoringEngine

logger = logging.getLogger(__name__)


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _coerce_reputation(value: Any) -> int:
    if value is None:
        return DEFAULT_REPUTATION
    try:
        return clamp_reputation(int(value))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_REPUTATION


class ContentModerator:
    """Stateless moderator bound to a term catalog."""

    def __init__(
        self,
        catalog: TermCatalog | None = None,
        *,
        catalog_path: str | Path | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        if catalog is None:
            catalog = load_catalog(catalog_path or self._settings.catalog_path)
        self._engine = ScoringEngine(catalog)

    # -- catalog -------------------------------------------------------------

    @property
    def catalog(self) -> TermCatalog:
        return self._engine.catalog

    def reload_catalog(self, path: str | Path | None = None) -> TermCatalog:
        """Load a fresh catalog and swap it in; in-flight calls keep the old one."""
        catalog = load_catalog(path or self._settings.catalog_path)
        self._engine = ScoringEngine(catalog)
        return catalog

    # -- scoring -------------------------------------------------------------

    def _prepare(self, text: Any) -> str:
        # Fuzzy matching is O(words x terms); bound the input.
        return _coerce_text(text)[: self._settings.max_input_chars]

    def _evaluate(self, text: Any) -> Optional[RuleResult]:
        """Score *text*; None if the engine failed."""
        try:
            return self._engine.score(self._prepare(text))
        except Exception:
            logger.exception("Moderation engine failed")
            return None

    # -- public API ----------------------------------------------------------

    def moderate(self, request: ModerationRequest) -> ModerationResponse:
        """Return the full moderation verdict for *request*."""
        start = time.monotonic()
        content_type = getattr(request, "content_type", "review")

        result = self._evaluate(getattr(request, "text", None))
        if result is None:
            response = ModerationResponse(
                decision=Decision.FLAG,
                category=Category.CLEAN,
                severity=Severity.LOW,
                score=0,
                matched_terms=None,
                reason=REASON_REVIEW,
            )
        else:
            reputation = _coerce_reputation(getattr(request, "user_reputation", None))
            outcome = decide(result, reputation)
            response = ModerationResponse(
                decision=outcome.decision,
                category=result.category,
                severity=result.severity,
                score=result.score,
                matched_terms=list(result.matched_terms) or None,
                reason=outcome.reason,
                ai_used=outcome.ai_used,
            )
        response.processing_time_ms = int((time.monotonic() - start) * 1000)

        if response.decision != Decision.APPROVE:
            logger.info(
                "Content %s (score: %d, category: %s, type: %s)",
                response.decision.value,
                response.score,
                response.category.value,
                content_type,
                extra={
                    "decision": response.decision.value,
                    "score": response.score,
                    "category": response.category.value,
                    "content_type": content_type,
                },
            )
        return response

    def should_block(self, text: Any) -> bool:
        """True if *text* would be blocked at neutral reputation."""
        result = self._evaluate(text)
        return result is not None and is_blocked(result)

    def needs_review(self, text: Any) -> bool:
        """True if *text* scores in the review band (25-74)."""
        result = self._evaluate(text)
        return result is None or is_reviewable(result)

    def quick_check(self, text: Any) -> QuickCheckResult:
        """Allow/review pair for lightweight inline validation."""
        result = self._evaluate(text)
        if result is None:
            return QuickCheckResult(allowed=True, needs_review=True)
        blocked = is_blocked(result)
        return QuickCheckResult(
            allowed=not blocked,
            needs_review=not blocked and is_reviewable(result),
        )
