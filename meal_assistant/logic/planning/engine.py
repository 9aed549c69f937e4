"""Meal plan generation.

A run assigns one recipe per (date, slot) obligation in three greedy phases
over a shared list of pending slots and a shared set of used recipes:

  1. ingredient - recipes the pantry can cook, drawing the pantry down
  2. tag        - recipes carrying the weekday's required, then preferred, tags
  3. fallback   - any unused recipe, or the one reused with the widest spacing

Nothing committed by an earlier phase is revisited by a later one. The
catalog fetch is the only await; the rest is synchronous and touches no
state outside the run.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional

from meal_assistant.domain.MealPlanConfig import MealPlanConfig, rule_tags
from meal_assistant.domain.Pantry import PantrySnapshot
from meal_assistant.domain.Plan import GeneratedMealPlan, ProposedMeal, SlotToFill
from meal_assistant.events.Event_Bus import GLOBAL_EVENT_BUS, PANTRY_DEPLETED, PLAN_GENERATED
from meal_assistant.infra.Recipe_Repository import JsonRecipeRepository
from meal_assistant.logic.reporting.coverage import (
    build_completion_warnings,
    compute_coverage,
    compute_ingredient_usage,
)
from meal_assistant.utilities.constants import (
    MEAL_MATCH_FALLBACK,
    MEAL_MATCH_INGREDIENT,
    MEAL_MATCH_TAG,
    PRIORITY_PREFERRED,
    PRIORITY_REQUIRED,
)
from .reuse import RecipeUsageTracker
from .scoring import score_recipes_by_ingredients
from .selection import default_rng, pick_with_favorites_weight, shuffle
from .slots import generate_slot_list, sort_by_date_and_slot

__all__ = ["generate_meal_plan", "MealPlanRun"]

logger = logging.getLogger(__name__)


def _meal_key(meal) -> tuple:
    if isinstance(meal, dict):
        return (meal.get("date"), meal.get("slot_id", meal.get("slotId")))
    return (meal.date, meal.slot_id)


class MealPlanRun:
    """State of one generation run: pantry snapshot, pending slots, used recipes."""

    def __init__(self, config: MealPlanConfig, meal_slots, recipes, tag_names_by_id=None, rng=None,
                 exclude_recipe_ids: Optional[Iterable[str]] = None, event_bus=None):
        self.config = config
        self.meal_slots = list(meal_slots)
        self.recipes = list(recipes)
        self.recipes_by_id = {}
        for recipe in self.recipes:
            self.recipes_by_id.setdefault(recipe.id, recipe)
        self.tag_names: Dict[str, str] = dict(tag_names_by_id or {})
        self.rng = default_rng(rng)
        self.event_bus = event_bus or GLOBAL_EVENT_BUS
        self.pantry = PantrySnapshot(config.ingredients_on_hand, event_bus=self.event_bus)
        # locked meals count as used so they are not proposed twice
        self.used_recipes = set(exclude_recipe_ids or ())
        self.proposed: List[ProposedMeal] = []
        self.all_slots: List[SlotToFill] = generate_slot_list(
            config.start_date, config.end_date, config.selected_slots, config.skipped_weekdays, self.meal_slots,
        )
        self.pending: List[SlotToFill] = list(self.all_slots)
        self.kept_existing = 0

    # --- helpers -------------------------------------------------------------
    def _tag_name(self, tag_id: str) -> str:
        return self.tag_names.get(tag_id, tag_id)

    def _assign(self, slot: SlotToFill, recipe, match_type: str, matched_ingredients=None, matched_tags=None):
        self.used_recipes.add(recipe.id)
        self.pending.remove(slot)
        meal = ProposedMeal(
            date=slot.date,
            slot_id=slot.slot_id,
            slot_name=slot.slot_name,
            recipe_id=recipe.id,
            recipe_title=recipe.title,
            servings=self.config.default_servings,
            match_type=match_type,
            matched_ingredients=matched_ingredients,
            matched_tags=matched_tags,
        )
        self.proposed.append(meal)
        logger.debug("%s %s -> %s (%s)", slot.date, slot.slot_id, recipe.title, match_type)
        return meal

    def _unused(self, recipes=None) -> list:
        return [r for r in (self.recipes if recipes is None else recipes) if r.id not in self.used_recipes]

    def keep_existing(self, existing_meals):
        """Drop obligations already covered by meals in the calendar."""
        occupied = {_meal_key(m) for m in existing_meals or ()}
        if not occupied:
            return
        before = len(self.pending)
        self.pending = [s for s in self.pending if s.key not in occupied]
        self.kept_existing = before - len(self.pending)

    # --- phase 1 -------------------------------------------------------------
    def assign_by_ingredients(self):
        if not self.config.ingredients_on_hand:
            logger.info("No ingredients on hand, skipping ingredient phase")
            return
        scores = score_recipes_by_ingredients(self.recipes, self.pantry.items, self.config.default_servings)
        attempts = shuffle(self.pending, self.rng)[:min(len(scores), len(self.pending))]
        assigned = 0
        for slot in attempts:
            if self.pantry.all_depleted():
                logger.info("Pantry depleted with %d slots left", len(self.pending))
                self.event_bus.publish(PANTRY_DEPLETED, {"remaining_slots": len(self.pending)})
                break
            candidates = []
            for score in scores:
                recipe = self.recipes_by_id.get(score.recipe_id)
                if recipe is None or recipe.id in self.used_recipes:
                    continue
                if self.pantry.can_supply_all(score.required_quantities):
                    candidates.append((score, recipe))
            if not candidates:
                continue
            tags = rule_tags(self.config.rules_for(slot.weekday))
            preferred = [c for c in candidates if c[1].has_any_tag(tags)] if tags else []
            pool = preferred or candidates
            recipe = pick_with_favorites_weight([r for _, r in pool], self.config.favorites_weight, self.rng)
            score = next(s for s, r in pool if r is recipe)
            self.pantry.deduct_all(score.required_quantities)
            self._assign(slot, recipe, MEAL_MATCH_INGREDIENT,
                         matched_ingredients=[m.ingredient_name for m in score.matched_ingredients])
            assigned += 1
        logger.info("Ingredient phase filled %d slots (%d recipes usable)", assigned, len(scores))

    # --- phase 2 -------------------------------------------------------------
    def assign_by_tags(self):
        assigned = 0
        for slot in list(self.pending):
            rules = self.config.rules_for(slot.weekday)
            if not rules:
                continue
            for priority in (PRIORITY_REQUIRED, PRIORITY_PREFERRED):
                tags = rule_tags(r for r in rules if r.priority == priority)
                if not tags:
                    continue
                candidates = [r for r in self._unused() if r.has_any_tag(tags)]
                if not candidates:
                    continue
                recipe = pick_with_favorites_weight(candidates, self.config.favorites_weight, self.rng)
                self._assign(slot, recipe, MEAL_MATCH_TAG,
                             matched_tags=[self._tag_name(t) for t in recipe.matching_tags(tags)])
                assigned += 1
                break
        logger.info("Tag phase filled %d slots", assigned)

    # --- phase 3 -------------------------------------------------------------
    def assign_fallbacks(self):
        tracker = RecipeUsageTracker.from_meals(self.proposed)
        reused = 0
        for slot in list(self.pending):
            recipe = pick_with_favorites_weight(self._unused(), self.config.favorites_weight, self.rng)
            if recipe is None:
                tags = rule_tags(self.config.rules_for(slot.weekday))
                recipe = tracker.pick_for_reuse(self.recipes, tags, self.config.favorites_weight, self.rng)
                if recipe is None:
                    continue
                reused += 1
            tracker.record(recipe.id)
            self._assign(slot, recipe, MEAL_MATCH_FALLBACK)
        logger.info("Fallback phase reused %d recipes, %d slots still open", reused, len(self.pending))

    # --- result --------------------------------------------------------------
    def result(self) -> GeneratedMealPlan:
        warnings = build_completion_warnings(
            total_slots=len(self.all_slots),
            unfilled=len(self.pending),
            recipe_count=len(self.recipes),
            kept_existing=self.kept_existing,
        )
        for warning in warnings:
            logger.warning(warning)
        meals = sort_by_date_and_slot(self.proposed, self.meal_slots)
        plan = GeneratedMealPlan(
            proposed_meals=meals,
            ingredient_usage=compute_ingredient_usage(self.config.ingredients_on_hand, self.pantry),
            warnings=warnings,
            coverage=compute_coverage(meals, len(self.all_slots)),
        )
        self.event_bus.publish(PLAN_GENERATED, {
            "start_date": self.config.start_date.isoformat(),
            "end_date": self.config.end_date.isoformat(),
            "total_slots": plan.coverage.total_slots,
            "filled_slots": plan.coverage.filled_slots,
            "warnings": list(warnings),
        })
        return plan

    def execute(self, existing_meals=None) -> GeneratedMealPlan:
        if not self.config.overwrite_mode:
            self.keep_existing(existing_meals)
        logger.info("Planning %d slots from %d recipes", len(self.pending), len(self.recipes))
        self.assign_by_ingredients()
        self.assign_by_tags()
        self.assign_fallbacks()
        return self.result()


async def generate_meal_plan(config: MealPlanConfig, meal_slots, tag_names_by_id=None, *, catalog=None,
                             rng=None, exclude_recipe_ids=None, existing_meals=None,
                             event_bus=None) -> GeneratedMealPlan:
    """Propose a recipe for every slot of config's date range.

    Raises InvalidConfig before touching the catalog when config is
    malformed. Catalog errors propagate unchanged. Planning shortfalls never
    raise; they come back as warnings on the plan.
    """
    config.validate()
    catalog = catalog if catalog is not None else JsonRecipeRepository()
    recipes = await catalog.get_all()
    run = MealPlanRun(config, meal_slots, recipes, tag_names_by_id, rng=rng,
                      exclude_recipe_ids=exclude_recipe_ids, event_bus=event_bus)
    return run.execute(existing_meals)
