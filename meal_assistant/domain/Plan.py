"""Plan domain entities: slot obligations, proposed meals and the generated plan."""
from typing import List, Optional
from uuid import uuid4


class SlotToFill:
    """One (date, slot) obligation still waiting for a recipe."""

    def __init__(self, date: str, slot_id: str, slot_name: str, weekday: int):
        self.date = date
        self.slot_id = slot_id
        self.slot_name = slot_name
        self.weekday = weekday

    @property
    def key(self) -> tuple:
        return (self.date, self.slot_id)

    def __eq__(self, other) -> bool:
        return isinstance(other, SlotToFill) and self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"SlotToFill({self.date!r}, {self.slot_id!r})"

    def to_dict(self):
        return {"date": self.date, "slot_id": self.slot_id, "slot_name": self.slot_name, "weekday": self.weekday}


class ProposedMeal:
    def __init__(self, date: str, slot_id: str, slot_name: str, recipe_id: str, recipe_title: str,
                 servings: int, match_type: str, matched_ingredients: Optional[List[str]] = None,
                 matched_tags: Optional[List[str]] = None, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.date = date
        self.slot_id = slot_id
        self.slot_name = slot_name
        self.recipe_id = recipe_id
        self.recipe_title = recipe_title
        self.servings = servings
        self.match_type = match_type
        self.matched_ingredients = matched_ingredients
        self.matched_tags = matched_tags
        # UI state, carried through untouched
        self.is_rejected = False
        self.is_locked = False

    def __repr__(self) -> str:
        return f"ProposedMeal({self.date} {self.slot_id}: {self.recipe_title!r} [{self.match_type}])"

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date,
            "slot_id": self.slot_id,
            "slot_name": self.slot_name,
            "recipe_id": self.recipe_id,
            "recipe_title": self.recipe_title,
            "servings": self.servings,
            "match_type": self.match_type,
            "matched_ingredients": self.matched_ingredients,
            "matched_tags": self.matched_tags,
            "is_rejected": self.is_rejected,
            "is_locked": self.is_locked,
        }


class IngredientUsage:
    def __init__(self, ingredient_id: str, ingredient_name: str, original_quantity: float,
                 used_quantity: float, remaining_quantity: float, unit: Optional[str]):
        self.ingredient_id = ingredient_id
        self.ingredient_name = ingredient_name
        self.original_quantity = original_quantity
        self.used_quantity = used_quantity
        self.remaining_quantity = remaining_quantity
        self.unit = unit

    def __repr__(self) -> str:
        return (f"IngredientUsage({self.ingredient_name!r}: used {self.used_quantity:g}, "
                f"remaining {self.remaining_quantity:g} {self.unit or ''})")

    def to_dict(self):
        return {
            "ingredient_id": self.ingredient_id,
            "ingredient_name": self.ingredient_name,
            "original_quantity": self.original_quantity,
            "used_quantity": self.used_quantity,
            "remaining_quantity": self.remaining_quantity,
            "unit": self.unit,
        }


class PlanCoverage:
    def __init__(self, total_slots: int = 0, filled_slots: int = 0, ingredient_matches: int = 0,
                 tag_matches: int = 0, fallbacks: int = 0, rejected: int = 0):
        self.total_slots = total_slots
        self.filled_slots = filled_slots
        self.ingredient_matches = ingredient_matches
        self.tag_matches = tag_matches
        self.fallbacks = fallbacks
        self.rejected = rejected

    def __repr__(self) -> str:
        return f"PlanCoverage({self.filled_slots}/{self.total_slots})"

    def to_dict(self):
        return dict(vars(self))


class GeneratedMealPlan:
    def __init__(self, proposed_meals: List[ProposedMeal], ingredient_usage: List[IngredientUsage],
                 warnings: List[str], coverage: PlanCoverage):
        self.proposed_meals = proposed_meals
        self.ingredient_usage = ingredient_usage
        self.warnings = warnings
        self.coverage = coverage

    def to_dict(self):
        return {
            "proposed_meals": [m.to_dict() for m in self.proposed_meals],
            "ingredient_usage": [u.to_dict() for u in self.ingredient_usage],
            "warnings": list(self.warnings),
            "coverage": self.coverage.to_dict(),
        }
