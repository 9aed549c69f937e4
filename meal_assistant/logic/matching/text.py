"""Ingredient name normalization and edit-distance similarity."""
from __future__ import annotations
import re

__all__ = ["normalize_ingredient_name", "levenshtein_distance", "string_similarity"]

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_ingredient_name(name: str) -> str:
    """Lowercase, drop everything but letters/digits/spaces, collapse whitespace."""
    if not isinstance(name, str):
        return ""
    n = _NON_ALNUM.sub("", name.lower().strip())
    return _WHITESPACE.sub(" ", n).strip()


def levenshtein_distance(a: str, b: str) -> int:
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(a) + 1))
    for i, cb in enumerate(b, start=1):
        current = [i]
        for j, ca in enumerate(a, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], current[j - 1], previous[j]) + 1)
        previous = current
    return previous[-1]


def string_similarity(a: str, b: str) -> float:
    """1 - levenshtein / longest length; two empty strings are identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1 - levenshtein_distance(a, b) / longest
