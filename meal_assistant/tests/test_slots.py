import unittest
from datetime import date
from meal_assistant.domain.MealPlanConfig import MealSlot
from meal_assistant.logic.planning.slots import generate_slot_list, sort_by_date_and_slot, weekday_index
from fakes import DEFAULT_SLOTS


class _Meal:
    def __init__(self, date, slot_id):
        self.date = date
        self.slot_id = slot_id


class TestSlotList(unittest.TestCase):

    def test_weekday_index_starts_on_sunday(self):
        self.assertEqual(weekday_index(date(2024, 1, 7)), 0)
        self.assertEqual(weekday_index(date(2024, 1, 8)), 1)
        self.assertEqual(weekday_index(date(2024, 1, 13)), 6)

    def test_one_entry_per_day_and_slot(self):
        slots = generate_slot_list(date(2024, 1, 7), date(2024, 1, 13), ["lunch", "dinner"], [], DEFAULT_SLOTS)
        self.assertEqual(len(slots), 14)
        self.assertEqual(len(set(slots)), 14)
        self.assertEqual(slots[0].slot_name, "Lunch")

    def test_skipped_weekdays_are_left_out(self):
        # skip Sunday and Saturday
        slots = generate_slot_list(date(2024, 1, 7), date(2024, 1, 13), ["dinner"], [0, 6], DEFAULT_SLOTS)
        self.assertEqual([s.date for s in slots],
                         ["2024-01-08", "2024-01-09", "2024-01-10", "2024-01-11", "2024-01-12"])
        self.assertEqual({s.weekday for s in slots}, {1, 2, 3, 4, 5})

    def test_slots_follow_selection_order(self):
        slots = generate_slot_list(date(2024, 1, 8), date(2024, 1, 8), ["dinner", "breakfast"], [], DEFAULT_SLOTS)
        self.assertEqual([s.slot_id for s in slots], ["dinner", "breakfast"])

    def test_single_day_range(self):
        slots = generate_slot_list(date(2024, 1, 8), date(2024, 1, 8), ["lunch"], [], DEFAULT_SLOTS)
        self.assertEqual(len(slots), 1)

    def test_unknown_slot_uses_id_as_name(self):
        [slot] = generate_slot_list(date(2024, 1, 8), date(2024, 1, 8), ["snack"], [], DEFAULT_SLOTS)
        self.assertEqual(slot.slot_name, "snack")


class TestSortMeals(unittest.TestCase):

    def test_sorted_by_date_then_slot_order(self):
        meals = [
            _Meal("2024-01-09", "breakfast"),
            _Meal("2024-01-08", "dinner"),
            _Meal("2024-01-08", "snack"),
            _Meal("2024-01-08", "breakfast"),
        ]
        ordered = sort_by_date_and_slot(meals, DEFAULT_SLOTS)
        self.assertEqual([(m.date, m.slot_id) for m in ordered], [
            ("2024-01-08", "breakfast"),
            ("2024-01-08", "dinner"),
            ("2024-01-08", "snack"),
            ("2024-01-09", "breakfast"),
        ])

    def test_custom_slot_order(self):
        slots = [MealSlot("dinner", "Dinner", 0), MealSlot("lunch", "Lunch", 1)]
        ordered = sort_by_date_and_slot([_Meal("2024-01-08", "lunch"), _Meal("2024-01-08", "dinner")], slots)
        self.assertEqual([m.slot_id for m in ordered], ["dinner", "lunch"])


if __name__ == '__main__':
    unittest.main()
