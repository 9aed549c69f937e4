"""
Input validation schemas using Pydantic for the planning endpoints.
"""
from datetime import date
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from meal_assistant.domain.MealPlanConfig import DayTagRule, MealPlanConfig, MealSlot
from meal_assistant.domain.Pantry import IngredientOnHand
from meal_assistant.utilities.config import ALTERNATIVES_LIMIT, DEFAULT_FAVORITES_WEIGHT, DEFAULT_SERVINGS


class IngredientOnHandInput(BaseModel):
    """Schema for a pantry ingredient."""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0)
    unit: Optional[str] = Field(None, max_length=20)

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    def to_domain(self) -> IngredientOnHand:
        return IngredientOnHand(id=self.id, name=self.name, quantity=self.quantity, unit=self.unit)


class DayTagRuleInput(BaseModel):
    """Schema for a weekday tag rule (0 = Sunday ... 6 = Saturday)."""
    weekday: int = Field(..., ge=0, le=6)
    tags: List[str] = Field(default_factory=list)
    priority: Literal['required', 'preferred'] = 'preferred'

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        """Ensure tags are non-empty strings."""
        return [tag.strip() for tag in v if tag and tag.strip()]

    def to_domain(self) -> DayTagRule:
        return DayTagRule(weekday=self.weekday, tags=self.tags, priority=self.priority)


class MealSlotInput(BaseModel):
    """Schema for a slot definition from the calendar settings."""
    id: str = Field(..., min_length=1)
    name: str = ""
    order: int = 0

    def to_domain(self) -> MealSlot:
        return MealSlot(id=self.id, name=self.name, order=self.order)


class MealPlanConfigInput(BaseModel):
    """Schema for meal plan generation settings."""
    start_date: date
    end_date: date
    selected_slots: List[str] = Field(..., min_length=1)
    skipped_weekdays: List[int] = Field(default_factory=list)
    ingredients_on_hand: List[IngredientOnHandInput] = Field(default_factory=list)
    day_tag_rules: List[DayTagRuleInput] = Field(default_factory=list)
    default_servings: int = Field(DEFAULT_SERVINGS, ge=1, le=50)
    favorites_weight: int = Field(DEFAULT_FAVORITES_WEIGHT, ge=0, le=100)
    overwrite_mode: bool = True

    @field_validator('selected_slots')
    @classmethod
    def dedupe_slots(cls, v):
        """Each slot id once, in selection order."""
        return list(dict.fromkeys(v))

    @field_validator('skipped_weekdays')
    @classmethod
    def validate_weekdays(cls, v):
        """Weekday indices must be 0..6."""
        for d in v:
            if not 0 <= d <= 6:
                raise ValueError(f'Weekday must be between 0 and 6: {d}')
        return v

    @model_validator(mode='after')
    def check_date_range(self):
        if self.end_date < self.start_date:
            raise ValueError('end_date must be on or after start_date')
        return self

    def to_domain(self) -> MealPlanConfig:
        return MealPlanConfig(
            start_date=self.start_date,
            end_date=self.end_date,
            selected_slots=self.selected_slots,
            skipped_weekdays=self.skipped_weekdays,
            ingredients_on_hand=[i.to_domain() for i in self.ingredients_on_hand],
            day_tag_rules=[r.to_domain() for r in self.day_tag_rules],
            default_servings=self.default_servings,
            favorites_weight=self.favorites_weight,
            overwrite_mode=self.overwrite_mode,
        )


class ExistingMealInput(BaseModel):
    date: str
    slot_id: str


class GeneratePlanRequest(BaseModel):
    """Body of POST /api/meal-plan/generate."""
    config: MealPlanConfigInput
    meal_slots: List[MealSlotInput] = Field(default_factory=list)
    tag_names: Dict[str, str] = Field(default_factory=dict)
    exclude_recipe_ids: List[str] = Field(default_factory=list)
    existing_meals: List[ExistingMealInput] = Field(default_factory=list)
    seed: Optional[int] = None


class AlternativesRequest(BaseModel):
    """Body of POST /api/meal-plan/alternatives."""
    current_recipe_id: str
    weekday: int = Field(..., ge=0, le=6)
    day_tag_rules: List[DayTagRuleInput] = Field(default_factory=list)
    used_recipe_ids: List[str] = Field(default_factory=list)
    limit: int = Field(ALTERNATIVES_LIMIT, ge=1, le=100)
