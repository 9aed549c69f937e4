"""Expand a date range and slot selection into (date, slot) obligations."""
from __future__ import annotations
from datetime import date, timedelta
from typing import Dict, Iterable, List, Sequence

from meal_assistant.domain.Plan import SlotToFill
from meal_assistant.utilities.constants import DATE_FORMAT, UNKNOWN_SLOT_ORDER

__all__ = ["weekday_index", "each_day", "generate_slot_list", "slot_order_map", "sort_by_date_and_slot"]


def weekday_index(d: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return d.isoweekday() % 7


def each_day(start: date, end: date):
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def generate_slot_list(start: date, end: date, selected_slots: Sequence[str],
                       skipped_weekdays: Iterable[int], meal_slots) -> List[SlotToFill]:
    """One SlotToFill per selected slot for every non-skipped day in [start, end].

    Slots come out in the order they were selected, not their display order.
    """
    skipped = set(skipped_weekdays)
    names: Dict[str, str] = {s.id: s.name for s in meal_slots}
    slots: List[SlotToFill] = []
    for day in each_day(start, end):
        weekday = weekday_index(day)
        if weekday in skipped:
            continue
        date_str = day.strftime(DATE_FORMAT)
        for slot_id in dict.fromkeys(selected_slots):
            slots.append(SlotToFill(date_str, slot_id, names.get(slot_id, slot_id), weekday))
    return slots


def slot_order_map(meal_slots) -> Dict[str, int]:
    return {s.id: s.order for s in meal_slots}


def sort_by_date_and_slot(meals, meal_slots):
    order = slot_order_map(meal_slots)
    return sorted(meals, key=lambda m: (m.date, order.get(m.slot_id, UNKNOWN_SLOT_ORDER)))
