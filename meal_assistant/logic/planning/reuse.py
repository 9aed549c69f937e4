"""Reuse spacing: once every recipe is used, bring back the one used longest ago."""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple

from meal_assistant.utilities.constants import (
    REUSE_DISTANCE_WEIGHT,
    REUSE_FAVORITE_MAX_BONUS,
    REUSE_RULE_BONUS,
    REUSE_TOP_CANDIDATES,
)
from .selection import pick_uniform

__all__ = ["RecipeUsageTracker"]


class RecipeUsageTracker:
    """Remembers the slot index at which each recipe was last placed."""

    def __init__(self, current_slot_index: int = 0):
        self.last_used_at: Dict[str, int] = {}
        self.current_slot_index = current_slot_index

    @classmethod
    def from_meals(cls, meals) -> "RecipeUsageTracker":
        """Seed from meals already proposed, in placement order."""
        meals = list(meals)
        tracker = cls(current_slot_index=len(meals))
        for index, meal in enumerate(meals):
            tracker.last_used_at[meal.recipe_id] = index
        return tracker

    def record(self, recipe_id: str):
        """Place recipe_id at the current index and advance."""
        self.last_used_at[recipe_id] = self.current_slot_index
        self.current_slot_index += 1

    def distance(self, recipe_id: str, recipe_count: int) -> int:
        last = self.last_used_at.get(recipe_id)
        if last is None:
            # never used ranks above any earlier use
            return self.current_slot_index + recipe_count
        return self.current_slot_index - last

    def reuse_score(self, recipe, recipe_count: int, rule_tags: Iterable[str], favorites_weight: float) -> float:
        score = self.distance(recipe.id, recipe_count) * REUSE_DISTANCE_WEIGHT
        if recipe.has_any_tag(rule_tags):
            score += REUSE_RULE_BONUS
        if recipe.is_favorite:
            score += (favorites_weight / 100) * REUSE_FAVORITE_MAX_BONUS
        return score

    def rank(self, recipes, rule_tags: Iterable[str], favorites_weight: float) -> List[Tuple[float, object]]:
        recipes = list(recipes)
        tags = list(rule_tags)
        scored = [(self.reuse_score(r, len(recipes), tags, favorites_weight), r) for r in recipes]
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return scored

    def pick_for_reuse(self, recipes, rule_tags: Iterable[str], favorites_weight: float, rng) -> Optional[object]:
        """Uniform pick among the top three reuse scores."""
        ranked = self.rank(recipes, rule_tags, favorites_weight)
        top = [recipe for _, recipe in ranked[:REUSE_TOP_CANDIDATES]]
        return pick_uniform(top, rng)
