"""
Text utilities for comparing spreadsheet headers.

Used by the column mapper to score a header against field aliases.
"""

import re
from typing import Optional

from rapidfuzz.distance import Levenshtein

# Score given when one normalized string contains the other
SUBSTRING_SIMILARITY = 0.9

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")


def normalize_header(value: Optional[str]) -> str:
    """
    Normalize a header or alias for comparison.

    Lowercases and strips every character outside a-z and 0-9:
    - "Inv #" → "inv"
    - "Customer Name" → "customername"
    - "Fecha Emisión" → "fechaemisin"

    Args:
        value: Raw header text (None is treated as empty)

    Returns:
        Normalized string, possibly empty
    """
    if not value:
        return ""
    return _NON_ALPHANUMERIC.sub("", str(value).lower())


def levenshtein_distance(a: str, b: str) -> int:
    """Plain edit distance (insert, delete, substitute all cost 1; no transpositions)."""
    return Levenshtein.distance(a, b)


def calculate_similarity(a: Optional[str], b: Optional[str]) -> float:
    """
    Similarity between two headers in [0, 1].

    Both strings are normalized first, then:
    - identical → 1.0
    - one contains the other → 0.9
    - otherwise 1 - distance / longest length

    An empty normalized string is contained in any other string, so "#"
    scores 0.9 against everything.

    Args:
        a: First header
        b: Second header

    Returns:
        Similarity score
    """
    s1 = normalize_header(a)
    s2 = normalize_header(b)

    if s1 == s2:
        return 1.0
    if s1 in s2 or s2 in s1:
        return SUBSTRING_SIMILARITY

    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 1.0

    return 1 - levenshtein_distance(s1, s2) / max_len
