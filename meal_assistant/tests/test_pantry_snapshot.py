import unittest
from meal_assistant.domain.Pantry import IngredientOnHand, PantrySnapshot
from meal_assistant.events.Event_Bus import EventBus, PANTRY_ITEM_USED_UP
from meal_assistant.logic.planning.scoring import Deduction
from fakes import on_hand


class TestPantrySnapshot(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.used_up = []
        self.bus.subscribe(PANTRY_ITEM_USED_UP, lambda name, payload: self.used_up.append(payload))
        self.items = [
            on_hand("rice", "Rice", 500, "g"),
            on_hand("flour", "Flour", 1, "kg"),
            on_hand("eggs", "Eggs", 3, "each"),
        ]
        self.pantry = PantrySnapshot(self.items, event_bus=self.bus)

    def test_snapshot_is_a_copy(self):
        self.pantry.deduct(Deduction("rice", 200, "g"))
        self.assertEqual(self.items[0].quantity, 500)
        self.assertEqual(self.pantry.get("rice").quantity, 300)
        self.assertEqual(self.pantry.get("rice").original_quantity, 500)

    def test_deduct_converts_compatible_units(self):
        self.pantry.deduct(Deduction("flour", 250, "g"))
        self.assertAlmostEqual(self.pantry.get("flour").quantity, 0.75)
        self.assertEqual(self.pantry.get("flour").unit, "kg")

    def test_deduct_incompatible_units_subtracts_raw_and_clamps(self):
        self.pantry.deduct(Deduction("eggs", 200, "g"))
        self.assertEqual(self.pantry.get("eggs").quantity, 0)
        self.assertEqual([p["ingredient_id"] for p in self.used_up], ["eggs"])
        self.assertEqual(self.used_up[0]["original_quantity"], 3)

    def test_never_negative(self):
        self.pantry.deduct(Deduction("rice", 900, "g"))
        self.assertEqual(self.pantry.get("rice").quantity, 0)
        self.pantry.deduct(Deduction("rice", 100, "g"))
        self.assertEqual(self.pantry.get("rice").quantity, 0)
        self.assertEqual(len(self.used_up), 1)

    def test_can_supply(self):
        self.assertTrue(self.pantry.can_supply(Deduction("rice", 500, "g")))
        self.assertFalse(self.pantry.can_supply(Deduction("rice", 501, "g")))
        self.assertTrue(self.pantry.can_supply(Deduction("flour", 2, "cup")))
        self.assertFalse(self.pantry.can_supply(Deduction("saffron", 1, "g")))

    def test_can_supply_all_adds_up_demand_per_item(self):
        # two recipe ingredients resolved to the same 500 g of rice
        self.assertTrue(self.pantry.can_supply_all([Deduction("rice", 200, "g"), Deduction("rice", 300, "g")]))
        self.assertFalse(self.pantry.can_supply_all([Deduction("rice", 300, "g"), Deduction("rice", 300, "g")]))

    def test_can_supply_all_converts_to_item_unit(self):
        self.assertTrue(self.pantry.can_supply_all([Deduction("flour", 600, "g"), Deduction("flour", 0.4, "kg")]))
        self.assertFalse(self.pantry.can_supply_all([Deduction("flour", 600, "g"), Deduction("flour", 500, "g")]))

    def test_can_supply_all_incomparable_units_assumed_covered(self):
        self.assertTrue(self.pantry.can_supply_all([Deduction("eggs", 3, "each"), Deduction("eggs", 200, "g")]))
        self.assertFalse(self.pantry.can_supply_all([Deduction("saffron", 1, "g")]))
        self.assertTrue(self.pantry.can_supply_all([]))

    def test_all_depleted(self):
        self.assertFalse(self.pantry.all_depleted())
        self.pantry.deduct_all([Deduction("rice", 500, "g"), Deduction("flour", 1, "kg"), Deduction("eggs", 3, "each")])
        self.assertTrue(self.pantry.all_depleted())
        self.assertEqual(self.pantry.available(), [])

    def test_duplicate_ids_resolve_to_first(self):
        pantry = PantrySnapshot([on_hand("x", "Rice", 1, "kg"), on_hand("x", "Basmati", 2, "kg")], event_bus=self.bus)
        self.assertEqual(pantry.get("x").name, "Rice")
        self.assertEqual(len(pantry), 2)


class TestIngredientOnHand(unittest.TestCase):

    def test_from_dict(self):
        item = IngredientOnHand.from_dict({"id": 7, "name": "Milk", "quantity": "2", "unit": "cup"})
        self.assertEqual(item.id, "7")
        self.assertEqual(item.quantity, 2.0)
        self.assertEqual(item.original_quantity, 2.0)

    def test_bad_quantity_is_zero(self):
        self.assertEqual(IngredientOnHand.from_dict({"name": "Milk", "quantity": "lots"}).quantity, 0.0)


if __name__ == '__main__':
    unittest.main()
