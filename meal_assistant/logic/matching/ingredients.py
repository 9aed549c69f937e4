"""Resolve recipe ingredients against the pantry.

Strategies are tried in order and the first hit wins:
  1. exact   - normalized names are equal                     (score 1.0)
  2. partial - one name's words are a word-prefix of the other (score 0.8)
               "chicken" ~ "chicken breast", but not "butter" ~ "peanut butter"
  3. fuzzy   - best Levenshtein similarity above 0.6           (score similarity * 0.6)

Only pantry items with quantity > 0 are considered.
"""
from __future__ import annotations
from typing import List, NamedTuple, Optional, Sequence

from meal_assistant.utilities.constants import (
    EXACT_MATCH_SCORE,
    FUZZY_MATCH_THRESHOLD,
    FUZZY_SCORE_FACTOR,
    MATCH_EXACT,
    MATCH_FUZZY,
    MATCH_PARTIAL,
    PARTIAL_MATCH_SCORE,
)
from .text import normalize_ingredient_name, string_similarity
from .units import quantity_covers

__all__ = ["IngredientMatch", "NO_MATCH", "is_word_prefix", "match_ingredient",
           "scale_quantity", "has_enough_ingredient"]


class IngredientMatch(NamedTuple):
    match: Optional[object]
    match_type: str
    score: float


# match_type is meaningless when score is 0; callers check the score
NO_MATCH = IngredientMatch(None, MATCH_EXACT, 0)


def _words(name: str) -> List[str]:
    return [w for w in normalize_ingredient_name(name).split(" ") if w]


def is_word_prefix(shorter: Sequence[str], longer: Sequence[str]) -> bool:
    if len(shorter) > len(longer):
        return False
    return all(shorter[i] == longer[i] for i in range(len(shorter)))


def match_ingredient(recipe_ingredient, ingredients_on_hand) -> IngredientMatch:
    """Find the pantry item standing in for recipe_ingredient."""
    normalized = normalize_ingredient_name(recipe_ingredient.name)
    recipe_words = _words(recipe_ingredient.name)
    stocked = [i for i in ingredients_on_hand if i.quantity > 0]

    for on_hand in stocked:
        if normalize_ingredient_name(on_hand.name) == normalized:
            return IngredientMatch(on_hand, MATCH_EXACT, EXACT_MATCH_SCORE)

    if recipe_words:
        for on_hand in stocked:
            on_hand_words = _words(on_hand.name)
            if not on_hand_words:
                continue
            if is_word_prefix(recipe_words, on_hand_words) or is_word_prefix(on_hand_words, recipe_words):
                return IngredientMatch(on_hand, MATCH_PARTIAL, PARTIAL_MATCH_SCORE)

    best, best_similarity = None, 0.0
    for on_hand in stocked:
        similarity = string_similarity(normalized, normalize_ingredient_name(on_hand.name))
        # strict '>' keeps the first item on ties
        if similarity > FUZZY_MATCH_THRESHOLD and similarity > best_similarity:
            best, best_similarity = on_hand, similarity
    if best is not None:
        return IngredientMatch(best, MATCH_FUZZY, best_similarity * FUZZY_SCORE_FACTOR)

    return NO_MATCH


def scale_quantity(quantity: float, target_servings: int, recipe_servings: int) -> float:
    return quantity * (target_servings / max(recipe_servings or 1, 1))


def has_enough_ingredient(on_hand, required, target_servings: int, recipe_servings: int) -> bool:
    """Whether on_hand covers `required` scaled from recipe_servings to target_servings.

    "To taste" ingredients (no quantity) only need to be present. Units that
    cannot be compared are assumed sufficient.
    """
    if on_hand.quantity <= 0:
        return False
    if required.quantity is None:
        return True
    needed = scale_quantity(required.quantity, target_servings, recipe_servings)
    return quantity_covers(on_hand.quantity, on_hand.unit, needed, required.unit)
