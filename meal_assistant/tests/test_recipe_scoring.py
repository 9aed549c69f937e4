import unittest
from meal_assistant.domain.Ingredient import Ingredient
from meal_assistant.logic.planning.scoring import score_recipes_by_ingredients
from fakes import on_hand, recipe


class TestRecipeScoring(unittest.TestCase):

    def setUp(self):
        self.pantry = [
            on_hand("rice", "Rice", 500, "g"),
            on_hand("chicken", "Chicken Breast", 2, "each"),
        ]

    def test_recipe_without_matches_is_left_out(self):
        recipes = [recipe("salad", [("lettuce", 1, "each")])]
        self.assertEqual(score_recipes_by_ingredients(recipes, self.pantry, 4), [])

    def test_score_is_share_of_required_ingredients(self):
        recipes = [recipe("fried-rice", [("rice", 200, "g"), ("egg", 2, "each"),
                                         Ingredient("scallion", 1, "each", is_optional=True)])]
        [score] = score_recipes_by_ingredients(recipes, self.pantry, 4)
        # rice matched out of two required ingredients
        self.assertAlmostEqual(score.ingredient_score, 0.5)
        self.assertEqual([m.ingredient_name for m in score.matched_ingredients], ["rice"])
        [deduction] = score.required_quantities
        self.assertEqual(deduction.ingredient_id, "rice")
        self.assertEqual(deduction.quantity, 200)
        self.assertEqual(deduction.unit, "g")

    def test_deductions_scale_with_servings(self):
        recipes = [recipe("rice-bowl", [("rice", 100, "g")], servings=2)]
        [score] = score_recipes_by_ingredients(recipes, self.pantry, 4)
        self.assertEqual(score.required_quantities[0].quantity, 200)

    def test_insufficient_quantity_does_not_count(self):
        recipes = [recipe("risotto", [("rice", 800, "g")])]
        self.assertEqual(score_recipes_by_ingredients(recipes, self.pantry, 4), [])

    def test_sorted_best_first_and_stable(self):
        recipes = [
            recipe("a", [("rice", 100, "g"), ("beans", 1, "can")]),
            recipe("b", [("rice", 100, "g")]),
            recipe("c", [("rice", 50, "g"), ("beans", 1, "can")]),
        ]
        scores = score_recipes_by_ingredients(recipes, self.pantry, 4)
        self.assertEqual([s.recipe_id for s in scores], ["b", "a", "c"])
        self.assertAlmostEqual(scores[1].ingredient_score, scores[2].ingredient_score)

    def test_to_taste_ingredient_matches_without_deduction(self):
        pantry = self.pantry + [on_hand("salt", "Salt", 1, None)]
        recipes = [recipe("seasoned-rice", [("rice", 100, "g"), ("salt",)])]
        [score] = score_recipes_by_ingredients(recipes, pantry, 4)
        self.assertEqual(score.ingredient_score, 1.0)
        self.assertEqual([d.ingredient_id for d in score.required_quantities], ["rice"])


if __name__ == '__main__':
    unittest.main()
