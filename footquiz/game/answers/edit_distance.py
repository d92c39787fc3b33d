from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)
