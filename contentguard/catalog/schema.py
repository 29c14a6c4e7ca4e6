"""Schema for the term-catalog document.

The document is a flat mapping of list-valued keys. Every key is optional
and defaults to an empty list; unknown keys are ignored so catalogs can
carry comments or metadata sections.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

CATALOG_KEYS = (
    "critical",
    "high",
    "medium",
    "book_whitelist",
    "book_titles_whitelist",
    "troll_patterns",
    "spam_patterns",
    "off_topic_keywords",
)


class CatalogDocument(BaseModel):
    """Parsed ``blocked_terms`` document."""

    model_config = ConfigDict(extra="ignore")

    critical: list[str] = Field(default_factory=list, description="Terms that block on sight.")
    high: list[str] = Field(default_factory=list, description="Severe abuse and profanity.")
    medium: list[str] = Field(default_factory=list, description="Insults and mild profanity.")
    book_whitelist: list[str] = Field(
        default_factory=list,
        description="Phrases that put high terms in a harmless book context (e.g. 'killer plot').",
    )
    book_titles_whitelist: list[str] = Field(
        default_factory=list,
        description="Titles containing high terms (e.g. 'To Kill a Mockingbird').",
    )
    troll_patterns: list[str] = Field(default_factory=list, description="Regexes for trolling.")
    spam_patterns: list[str] = Field(default_factory=list, description="Regexes for spam.")
    off_topic_keywords: list[str] = Field(
        default_factory=list, description="Keywords that mark content as off-topic."
    )


def get_schema() -> dict:
    """Return the JSON Schema of the catalog document."""
    return CatalogDocument.model_json_schema()
