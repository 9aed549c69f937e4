"""Rank catalog recipes by how much of them the pantry can cover."""
from __future__ import annotations
import logging
from typing import List, Optional

from meal_assistant.logic.matching.ingredients import has_enough_ingredient, match_ingredient, scale_quantity

__all__ = ["MatchedIngredient", "Deduction", "RecipeMatchScore", "score_recipes_by_ingredients"]

logger = logging.getLogger(__name__)


class MatchedIngredient:
    def __init__(self, ingredient_name: str, match_type: str, score: float):
        self.ingredient_name = ingredient_name
        self.match_type = match_type
        self.score = score

    def __repr__(self) -> str:
        return f"MatchedIngredient({self.ingredient_name!r}, {self.match_type}, {self.score:.2f})"


class Deduction:
    """Quantity to take from a pantry item if the recipe is chosen."""

    def __init__(self, ingredient_id: str, quantity: float, unit: Optional[str]):
        self.ingredient_id = ingredient_id
        self.quantity = quantity
        self.unit = unit

    def __repr__(self) -> str:
        return f"Deduction({self.ingredient_id!r}, {self.quantity:g} {self.unit or ''})"


class RecipeMatchScore:
    def __init__(self, recipe_id: str, recipe_title: str, ingredient_score: float,
                 matched_ingredients: List[MatchedIngredient], required_quantities: List[Deduction]):
        self.recipe_id = recipe_id
        self.recipe_title = recipe_title
        # 0-1 share of the recipe's non-optional ingredients the pantry covers
        self.ingredient_score = ingredient_score
        self.matched_ingredients = matched_ingredients
        self.required_quantities = required_quantities

    def __repr__(self) -> str:
        return f"RecipeMatchScore({self.recipe_title!r}, {self.ingredient_score:.2f})"


def score_recipes_by_ingredients(recipes, ingredients_on_hand, servings: int) -> List[RecipeMatchScore]:
    """Score every recipe against the pantry, best first.

    Recipes without a single usable non-optional ingredient are left out.
    Ties keep catalog order.
    """
    scores: List[RecipeMatchScore] = []
    for recipe in recipes:
        required = recipe.required_ingredients
        matched: List[MatchedIngredient] = []
        deductions: List[Deduction] = []
        total = 0.0
        for ingredient in required:
            result = match_ingredient(ingredient, ingredients_on_hand)
            if result.match is None or result.score <= 0:
                continue
            if not has_enough_ingredient(result.match, ingredient, servings, recipe.servings):
                continue
            matched.append(MatchedIngredient(ingredient.name, result.match_type, result.score))
            total += result.score
            if ingredient.quantity is not None:
                deductions.append(Deduction(
                    result.match.id,
                    scale_quantity(ingredient.quantity, servings, recipe.servings),
                    ingredient.unit,
                ))
        if matched:
            scores.append(RecipeMatchScore(
                recipe.id, recipe.title, total / max(len(required), 1), matched, deductions,
            ))
    scores.sort(key=lambda s: s.ingredient_score, reverse=True)
    logger.debug("Scored %d of %d recipes against %d pantry items",
                 len(scores), len(recipes), len(ingredients_on_hand))
    return scores
