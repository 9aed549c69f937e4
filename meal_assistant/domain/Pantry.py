"""Pantry snapshot: the ingredient pool owned by a single plan generation run."""
import logging
from typing import Dict, Iterable, List, Optional

from meal_assistant.events.Event_Bus import GLOBAL_EVENT_BUS, PANTRY_ITEM_USED_UP
from meal_assistant.logic.matching.units import (
    canonical_unit,
    convert_from_base_unit,
    convert_to_base_unit,
    convert_unit,
    quantity_covers,
    units_compatible,
)

logger = logging.getLogger(__name__)


class IngredientOnHand:
    def __init__(self, id: str = "", name: str = "", quantity: float = 0, unit: Optional[str] = None,
                 original_quantity: Optional[float] = None):
        self.id = id
        self.name = name
        self.quantity = quantity
        self.unit = unit or None
        # Kept for reporting while `quantity` is drawn down
        self.original_quantity = quantity if original_quantity is None else original_quantity

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity:g} {self.unit or ''}".rstrip()

    __repr__ = __str__

    def copy(self) -> "IngredientOnHand":
        return IngredientOnHand(self.id, self.name, self.quantity, self.unit, self.quantity)

    @staticmethod
    def from_dict(data):
        '''Creates an IngredientOnHand from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        try:
            quantity = float(d.get("quantity") or 0)
        except (TypeError, ValueError):
            quantity = 0.0
        original = d.get("original_quantity", d.get("originalQuantity"))
        return IngredientOnHand(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            quantity=quantity,
            unit=d.get("unit") or None,
            original_quantity=float(original) if original is not None else None,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "original_quantity": self.original_quantity,
        }


class PantrySnapshot:
    """Mutable clone of the configured pantry.

    The caller's items are copied on construction and never touched again.
    Quantities only go down and never below zero.
    """

    def __init__(self, items: Iterable[IngredientOnHand] = (), event_bus=None):
        self.items: List[IngredientOnHand] = [item.copy() for item in items]
        self._by_id: Dict[str, IngredientOnHand] = {}
        for item in self.items:
            self._by_id.setdefault(item.id, item)
        self._event_bus = event_bus or GLOBAL_EVENT_BUS

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def get(self, ingredient_id: str) -> Optional[IngredientOnHand]:
        return self._by_id.get(ingredient_id)

    def available(self) -> List[IngredientOnHand]:
        return [item for item in self.items if item.quantity > 0]

    def all_depleted(self) -> bool:
        return all(item.quantity <= 0 for item in self.items)

    def can_supply(self, deduction) -> bool:
        '''True if the deduction's pantry item is still present and holds enough of it.'''
        item = self.get(deduction.ingredient_id)
        if item is None or item.quantity <= 0:
            return False
        return quantity_covers(item.quantity, item.unit, deduction.quantity, deduction.unit)

    def can_supply_all(self, deductions) -> bool:
        '''
        True if every pantry item can cover the sum of the deductions drawing on it.
        Amounts are added up in the item's own unit; a deduction that cannot be
        expressed in that unit is assumed covered, as in can_supply.
        '''
        demand: Dict[str, float] = {}
        for deduction in deductions:
            item = self.get(deduction.ingredient_id)
            if item is None or item.quantity <= 0:
                return False
            amount = convert_unit(deduction.quantity, deduction.unit, item.unit)
            demand[item.id] = demand.get(item.id, 0.0) + (amount or 0.0)
        return all(self.get(item_id).quantity >= needed for item_id, needed in demand.items())

    def deduct(self, deduction):
        '''
        Removes a recipe's requirement from the matching pantry item.
        Same or incompatible units subtract the raw quantity; compatible units
        go through base units and come back in the pantry item's own unit.
        '''
        item = self.get(deduction.ingredient_id)
        if item is None or item.quantity <= 0:
            return
        remaining = None
        same_unit = canonical_unit(item.unit) == canonical_unit(deduction.unit)
        if not same_unit and units_compatible(item.unit, deduction.unit):
            pool_base = convert_to_base_unit(item.quantity, item.unit)
            required_base = convert_to_base_unit(deduction.quantity, deduction.unit)
            if pool_base is not None and required_base is not None:
                remaining = convert_from_base_unit(max(0.0, pool_base - required_base), item.unit)
        if remaining is None:
            remaining = item.quantity - deduction.quantity
        item.quantity = max(0, remaining)
        if item.quantity <= 0:
            self._notify_depleted(item)

    def deduct_all(self, deductions):
        for deduction in deductions:
            self.deduct(deduction)

    def _notify_depleted(self, item: IngredientOnHand):
        logger.debug("Pantry item used up: %s", item.name)
        self._event_bus.publish(PANTRY_ITEM_USED_UP, {
            "ingredient_id": item.id,
            "name": item.name,
            "original_quantity": item.original_quantity,
            "unit": item.unit,
        })

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
