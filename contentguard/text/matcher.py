"""Approximate term matching over normalized text.

Both sides are expected to be outputs of :func:`contentguard.text.normalizer.normalize`.
"""

from __future__ import annotations

SIMILARITY_THRESHOLD = 0.85


def levenshtein(a: str, b: str) -> int:
    """Minimum number of single-character edits turning *a* into *b*."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """``1 - distance / max(len)``; 1.0 for equal strings, 0.0 if either is empty."""
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - levenshtein(a, b) / max(len(a), len(b))


def _within_threshold(a: str, b: str) -> bool:
    # edit distance is at least the length difference
    longest = max(len(a), len(b))
    if abs(len(a) - len(b)) > longest * (1 - SIMILARITY_THRESHOLD):
        return False
    return similarity(a, b) >= SIMILARITY_THRESHOLD


def _keeps_word_edges(window: list[str], keyword_words: list[str]) -> bool:
    return all(
        w[0] == k[0] and w[-1] == k[-1]
        for w, k in zip(window, keyword_words)
    )


def approx_match(normalized_text: str, normalized_keyword: str) -> bool:
    """Return True if *normalized_keyword* occurs in *normalized_text*.

    Matches on, in order:

    - exact substring
    - any single word within :data:`SIMILARITY_THRESHOLD` of the keyword
      (catches "killyourself" for "kill yourself")
    - for multi-word keywords, a run of the same number of words within the
      threshold whose words keep the keyword words' first and last letters
      (catches "kall yourself" but not "fill you")
    """
    if not normalized_keyword or not normalized_text:
        return False

    if normalized_keyword in normalized_text:
        return True

    words = normalized_text.split()
    for word in set(words):
        if _within_threshold(word, normalized_keyword):
            return True

    keyword_words = normalized_keyword.split()
    n = len(keyword_words)
    if n < 2:
        return False
    for start in range(len(words) - n + 1):
        window = words[start:start + n]
        if not _keeps_word_edges(window, keyword_words):
            continue
        if _within_threshold(" ".join(window), normalized_keyword):
            return True
    return False
