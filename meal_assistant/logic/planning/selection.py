"""Random selection helpers driven by an injectable random source.

A random source is any object with a `random()` method returning a float
in [0, 1), such as `random.Random`. Every draw in the planner goes through
one, so tests can script the sequence.
"""
from __future__ import annotations
import random
from typing import List, Optional, Sequence, TypeVar

__all__ = ["default_rng", "pick_uniform", "shuffle", "pick_with_favorites_weight"]

T = TypeVar("T")


def default_rng(rng=None):
    return rng if rng is not None else random.Random()


def pick_uniform(items: Sequence[T], rng) -> Optional[T]:
    if not items:
        return None
    index = min(int(rng.random() * len(items)), len(items) - 1)
    return items[index]


def shuffle(items: Sequence[T], rng) -> List[T]:
    """Fisher-Yates shuffle into a new list."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = min(int(rng.random() * (i + 1)), i)
        result[i], result[j] = result[j], result[i]
    return result


def pick_with_favorites_weight(candidates: Sequence[T], favorites_weight: float, rng) -> Optional[T]:
    """Pick one candidate, leaning towards favorites.

    favorites_weight is the percent chance (0-100) of drawing from the
    favorites. Weight 0 or no favorites: uniform over everything. Weight 100
    or nothing but favorites: uniform over the favorites.
    """
    if not candidates:
        return None
    favorites = [c for c in candidates if c.is_favorite]
    others = [c for c in candidates if not c.is_favorite]

    if not favorites or favorites_weight <= 0:
        return pick_uniform(candidates, rng)
    if favorites_weight >= 100 or not others:
        return pick_uniform(favorites, rng)
    if rng.random() * 100 < favorites_weight:
        return pick_uniform(favorites, rng)
    return pick_uniform(others, rng)
