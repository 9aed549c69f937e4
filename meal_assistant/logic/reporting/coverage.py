"""Plan coverage, ingredient usage and completion warnings.

Everything here is derived from the finished plan; nothing is tracked
incrementally during generation.
"""
from __future__ import annotations
from typing import List

from meal_assistant.domain.Plan import IngredientUsage, PlanCoverage
from meal_assistant.utilities.constants import MEAL_MATCH_FALLBACK, MEAL_MATCH_INGREDIENT, MEAL_MATCH_TAG

__all__ = ["compute_coverage", "compute_ingredient_usage", "build_completion_warnings"]


def compute_coverage(proposed_meals, total_slots: int) -> PlanCoverage:
    by_type = {MEAL_MATCH_INGREDIENT: 0, MEAL_MATCH_TAG: 0, MEAL_MATCH_FALLBACK: 0}
    for meal in proposed_meals:
        if meal.match_type in by_type:
            by_type[meal.match_type] += 1
    return PlanCoverage(
        total_slots=total_slots,
        filled_slots=len(proposed_meals),
        ingredient_matches=by_type[MEAL_MATCH_INGREDIENT],
        tag_matches=by_type[MEAL_MATCH_TAG],
        fallbacks=by_type[MEAL_MATCH_FALLBACK],
        rejected=sum(1 for m in proposed_meals if m.is_rejected),
    )


def compute_ingredient_usage(original_items, pantry) -> List[IngredientUsage]:
    """Diff every configured pantry item against what is left in the run's snapshot."""
    usage: List[IngredientUsage] = []
    for original in original_items:
        item = pantry.get(original.id)
        remaining = item.quantity if item is not None else 0
        usage.append(IngredientUsage(
            ingredient_id=original.id,
            ingredient_name=original.name,
            original_quantity=original.quantity,
            used_quantity=original.quantity - remaining,
            remaining_quantity=remaining,
            unit=original.unit,
        ))
    return usage


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def build_completion_warnings(total_slots: int, unfilled: int, recipe_count: int, kept_existing: int = 0) -> List[str]:
    warnings: List[str] = []
    if recipe_count == 0:
        warnings.append("No recipes found in your collection.")
    if kept_existing > 0:
        warnings.append(f"Kept {_plural(kept_existing, 'existing meal')} in your calendar.")
    if unfilled > 0:
        warnings.append(f"Could not fill {_plural(unfilled, 'slot')}. Please add more recipes to your collection.")
    elif total_slots > recipe_count:
        warnings.append(
            f"Some recipes are used multiple times because there are more slots ({total_slots}) "
            f"than available recipes ({recipe_count})."
        )
    return warnings
