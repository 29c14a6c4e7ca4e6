"""Text canonicalization and approximate matching."""

from contentguard.text.matcher import approx_match, levenshtein, similarity
from contentguard.text.normalizer import normalize

__all__ = ["approx_match", "levenshtein", "normalize", "similarity"]
