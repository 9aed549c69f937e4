"""Swap candidates for a proposed meal."""
from __future__ import annotations
from typing import Iterable, List

from meal_assistant.domain.MealPlanConfig import rule_tags, rules_for_weekday
from meal_assistant.infra.Recipe_Repository import JsonRecipeRepository
from meal_assistant.utilities.config import ALTERNATIVES_LIMIT

__all__ = ["find_alternative_recipes", "order_alternatives"]


def order_alternatives(recipes, current_recipe_id: str, weekday: int, day_tag_rules,
                       used_recipe_ids: Iterable[str], limit: int = ALTERNATIVES_LIMIT) -> list:
    """Catalog minus the current and used recipes, weekday tag matches first.

    The partition is stable, so catalog order holds inside both groups.
    """
    excluded = set(used_recipe_ids)
    excluded.add(current_recipe_id)
    candidates = [r for r in recipes if r.id not in excluded]
    tags = rule_tags(rules_for_weekday(day_tag_rules, weekday))
    if tags:
        matching = [r for r in candidates if r.has_any_tag(tags)]
        others = [r for r in candidates if not r.has_any_tag(tags)]
        candidates = matching + others
    return candidates[:max(limit, 0)]


async def find_alternative_recipes(current_recipe_id: str, weekday: int, day_tag_rules,
                                   used_recipe_ids: Iterable[str], limit: int = ALTERNATIVES_LIMIT,
                                   *, catalog=None) -> List:
    catalog = catalog if catalog is not None else JsonRecipeRepository()
    recipes = await catalog.get_all()
    return order_alternatives(recipes, current_recipe_id, weekday, day_tag_rules, used_recipe_ids, limit)
