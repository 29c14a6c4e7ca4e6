"""Term catalog — tiered terms, whitelists and patterns with a fail-closed fallback."""

from contentguard.catalog.catalog import (
    DEFAULT_CATALOG_PATH,
    FALLBACK_CRITICAL_TERMS,
    Term,
    TermCatalog,
    load_catalog,
)
from contentguard.catalog.schema import CatalogDocument, get_schema

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "FALLBACK_CRITICAL_TERMS",
    "CatalogDocument",
    "Term",
    "TermCatalog",
    "get_schema",
    "load_catalog",
]
