"""Term catalog — the classified terms and patterns the scoring rules consult.

The catalog has two tiers. A small built-in critical tier is always present;
an enriched tier is read from a YAML (or JSON) document. When the document
cannot be read or does not validate, the catalog falls back to the built-in
tier alone and is marked ``degraded``. Loading never raises.

A catalog is immutable once built and can be shared across threads.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from contentguard.catalog.schema import CatalogDocument
from contentguard.text.normalizer import normalize

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "blocked_terms.yaml"

# Always blocked, whatever the catalog document says.
FALLBACK_CRITICAL_TERMS: tuple[str, ...] = (
    "kill yourself",
    "kill urself",
    "commit suicide",
    "child porn",
    "child exploitation",
    "i will kill you",
    "gonna kill you",
)


@dataclass(frozen=True)
class Term:
    """A catalog entry: original spelling plus its normalized form."""

    text: str
    normalized: str


def _terms(values: list[str] | tuple[str, ...]) -> tuple[Term, ...]:
    seen: set[str] = set()
    terms: list[Term] = []
    for value in values:
        normalized = normalize(value)
        if not normalized or normalized in seen:
            continue
        seen.add(normalized)
        terms.append(Term(text=value, normalized=normalized))
    return tuple(terms)


def _compile_patterns(name: str, patterns: list[str]) -> tuple[re.Pattern[str], ...]:
    """Compile a pattern set; a single bad pattern drops the whole set."""
    try:
        return tuple(re.compile(p, re.IGNORECASE) for p in patterns)
    except re.error as e:
        logger.error("Invalid regex in %s (%s); %s disabled", name, e, name)
        return ()


class TermCatalog:
    """Read-only view over a catalog document."""

    def __init__(
        self,
        document: CatalogDocument | None = None,
        *,
        source: str = "",
        degraded: bool = False,
    ) -> None:
        document = document or CatalogDocument()
        self.source = source
        self.degraded = degraded

        self.critical = _terms(list(document.critical) + list(FALLBACK_CRITICAL_TERMS))
        self.high = _terms(document.high)
        self.medium = _terms(document.medium)
        self.off_topic_keywords = _terms(document.off_topic_keywords)
        self.book_whitelist = tuple(p.lower() for p in document.book_whitelist if p.strip())
        self.book_titles_whitelist = tuple(
            t.lower() for t in document.book_titles_whitelist if t.strip()
        )
        self.troll_patterns = _compile_patterns("troll_patterns", document.troll_patterns)
        self.spam_patterns = _compile_patterns("spam_patterns", document.spam_patterns)

    @classmethod
    def fallback(cls, source: str = "") -> TermCatalog:
        """Catalog holding only the built-in critical tier."""
        return cls(source=source, degraded=True)

    def summary(self) -> dict:
        """Per-list sizes plus load status."""
        return {
            "source": self.source,
            "degraded": self.degraded,
            "critical": len(self.critical),
            "high": len(self.high),
            "medium": len(self.medium),
            "book_whitelist": len(self.book_whitelist),
            "book_titles_whitelist": len(self.book_titles_whitelist),
            "troll_patterns": len(self.troll_patterns),
            "spam_patterns": len(self.spam_patterns),
            "off_topic_keywords": len(self.off_topic_keywords),
        }


def load_catalog(path: str | Path | None = None) -> TermCatalog:
    """Build a catalog from the document at *path* (packaged default if None).

    Any read, parse or validation failure yields :meth:`TermCatalog.fallback`.
    """
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH
    try:
        data = yaml.safe_load(catalog_path.read_text(encoding="utf-8"))
        document = CatalogDocument.model_validate(data)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
        logger.error(
            "Failed to load term catalog from %s: %s",
            catalog_path,
            e,
            extra={"catalog_path": str(catalog_path), "degraded": True},
        )
        catalog = TermCatalog.fallback(source=str(catalog_path))
        logger.warning(
            "Moderation running with %d fallback critical terms only", len(catalog.critical)
        )
        return catalog

    catalog = TermCatalog(document, source=str(catalog_path))
    logger.info(
        "Loaded term catalog: %d critical, %d high, %d medium, %d phrase whitelist, %d title whitelist",
        len(catalog.critical),
        len(catalog.high),
        len(catalog.medium),
        len(catalog.book_whitelist),
        len(catalog.book_titles_whitelist),
        extra={"catalog_path": str(catalog_path), "degraded": False},
    )
    return catalog
