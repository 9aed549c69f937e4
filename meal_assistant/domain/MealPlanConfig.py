"""Meal plan generation input: date range, slot selection, pantry, day tag rules."""
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence

from meal_assistant.domain.Pantry import IngredientOnHand
from meal_assistant.utilities.config import DEFAULT_FAVORITES_WEIGHT, DEFAULT_SERVINGS
from meal_assistant.utilities.constants import DATE_FORMAT, PRIORITY_PREFERRED, PRIORITY_REQUIRED


class InvalidConfig(ValueError):
    """Raised when a MealPlanConfig cannot describe a plan (e.g. end before start)."""


def _parse_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value), DATE_FORMAT).date()
    except ValueError:
        raise InvalidConfig(f"Invalid date {value!r} (expected YYYY-MM-DD)")


class MealSlot:
    """Slot definition from the calendar settings (Breakfast, Lunch, ...)."""

    def __init__(self, id: str, name: str = "", order: int = 0):
        self.id = id
        self.name = name or id
        self.order = order

    def __repr__(self) -> str:
        return f"MealSlot({self.id!r}, {self.name!r}, order={self.order})"

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return MealSlot(id=str(d["id"]), name=d.get("name", ""), order=int(d.get("order", 0)))

    def to_dict(self):
        return {"id": self.id, "name": self.name, "order": self.order}


class DayTagRule:
    def __init__(self, weekday: int, tags: Optional[Sequence[str]] = None, priority: str = PRIORITY_PREFERRED):
        # 0 = Sunday ... 6 = Saturday
        self.weekday = weekday
        self.tags = list(tags) if tags else []
        self.priority = priority

    def __repr__(self) -> str:
        return f"DayTagRule(weekday={self.weekday}, tags={self.tags!r}, priority={self.priority!r})"

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return DayTagRule(
            weekday=int(d.get("weekday", d.get("day_of_week", d.get("dayOfWeek", 0)))),
            tags=d.get("tags", []),
            priority=d.get("priority", PRIORITY_PREFERRED),
        )

    def to_dict(self):
        return {"weekday": self.weekday, "tags": self.tags, "priority": self.priority}


def rules_for_weekday(rules: Iterable[DayTagRule], weekday: int) -> List[DayTagRule]:
    return [rule for rule in rules if rule.weekday == weekday]


def rule_tags(rules: Iterable[DayTagRule]) -> List[str]:
    """Union of the rules' tag ids, first occurrence order."""
    seen = []
    for rule in rules:
        for tag in rule.tags:
            if tag not in seen:
                seen.append(tag)
    return seen


class MealPlanConfig:
    """Immutable input of one generation run. Never mutated by the planner."""

    def __init__(self, start_date, end_date, selected_slots: Sequence[str],
                 skipped_weekdays: Optional[Sequence[int]] = None,
                 ingredients_on_hand: Optional[Sequence[IngredientOnHand]] = None,
                 day_tag_rules: Optional[Sequence[DayTagRule]] = None,
                 default_servings: int = DEFAULT_SERVINGS, favorites_weight: int = DEFAULT_FAVORITES_WEIGHT,
                 overwrite_mode: bool = True):
        self.start_date = _parse_date(start_date)
        self.end_date = _parse_date(end_date)
        # a slot selected twice is still one obligation per day
        self.selected_slots = tuple(dict.fromkeys(selected_slots or ()))
        self.skipped_weekdays = frozenset(skipped_weekdays or ())
        self.ingredients_on_hand = tuple(ingredients_on_hand or ())
        self.day_tag_rules = tuple(day_tag_rules or ())
        self.default_servings = default_servings
        self.favorites_weight = favorites_weight
        # False = keep meals already in the calendar, only fill the gaps
        self.overwrite_mode = overwrite_mode

    def validate(self) -> "MealPlanConfig":
        if self.end_date < self.start_date:
            raise InvalidConfig(
                f"end_date {self.end_date.isoformat()} is before start_date {self.start_date.isoformat()}"
            )
        if not self.selected_slots:
            raise InvalidConfig("At least one meal slot must be selected")
        bad_days = sorted(d for d in self.skipped_weekdays if not 0 <= d <= 6)
        if bad_days:
            raise InvalidConfig(f"Skipped weekdays must be between 0 and 6: {bad_days}")
        for rule in self.day_tag_rules:
            if not 0 <= rule.weekday <= 6:
                raise InvalidConfig(f"Day tag rule weekday must be between 0 and 6: {rule.weekday}")
            if rule.priority not in (PRIORITY_REQUIRED, PRIORITY_PREFERRED):
                raise InvalidConfig(f"Unknown day tag rule priority: {rule.priority!r}")
        if not 0 <= self.favorites_weight <= 100:
            raise InvalidConfig(f"favorites_weight must be between 0 and 100: {self.favorites_weight}")
        if self.default_servings < 1:
            raise InvalidConfig(f"default_servings must be at least 1: {self.default_servings}")
        return self

    def rules_for(self, weekday: int) -> List[DayTagRule]:
        return rules_for_weekday(self.day_tag_rules, weekday)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return MealPlanConfig(
            start_date=d["start_date"],
            end_date=d["end_date"],
            selected_slots=d.get("selected_slots", []),
            skipped_weekdays=d.get("skipped_weekdays", []),
            ingredients_on_hand=[IngredientOnHand.from_dict(i) for i in d.get("ingredients_on_hand", [])],
            day_tag_rules=[DayTagRule.from_dict(r) for r in d.get("day_tag_rules", [])],
            default_servings=d.get("default_servings", DEFAULT_SERVINGS),
            favorites_weight=d.get("favorites_weight", DEFAULT_FAVORITES_WEIGHT),
            overwrite_mode=d.get("overwrite_mode", True),
        )
