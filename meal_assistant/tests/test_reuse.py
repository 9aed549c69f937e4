import unittest
from types import SimpleNamespace
from meal_assistant.logic.planning.reuse import RecipeUsageTracker
from fakes import SequenceRandom, recipe


class TestRecipeUsageTracker(unittest.TestCase):

    def setUp(self):
        self.early = recipe("early")
        self.recent = recipe("recent")
        self.tracker = RecipeUsageTracker(current_slot_index=10)
        self.tracker.last_used_at = {"early": 1, "recent": 5}

    def test_longer_ago_scores_higher(self):
        early = self.tracker.reuse_score(self.early, 2, [], 0)
        recent = self.tracker.reuse_score(self.recent, 2, [], 0)
        self.assertEqual(early, 90)
        self.assertEqual(recent, 50)

    def test_never_used_ranks_first(self):
        fresh = recipe("fresh")
        ranked = self.tracker.rank([self.recent, self.early, fresh], [], 0)
        self.assertEqual([r.id for _, r in ranked], ["fresh", "early", "recent"])

    def test_rule_tag_and_favorite_bonus(self):
        tagged = recipe("recent", tags=["t-quick"], is_favorite=True)
        score = self.tracker.reuse_score(tagged, 2, ["t-quick"], 50)
        self.assertEqual(score, 50 + 5 + 5)

    def test_record_advances_index(self):
        self.tracker.record("recent")
        self.assertEqual(self.tracker.last_used_at["recent"], 10)
        self.assertEqual(self.tracker.current_slot_index, 11)
        self.assertEqual(self.tracker.distance("recent", 2), 1)

    def test_pick_among_top_three(self):
        recipes = [recipe(f"r{i}") for i in range(5)]
        tracker = RecipeUsageTracker.from_meals(
            [SimpleNamespace(recipe_id=r.id) for r in recipes]
        )
        # r0 was placed first, so it is the stalest
        self.assertEqual(tracker.pick_for_reuse(recipes, [], 0, SequenceRandom([0.0])).id, "r0")
        self.assertEqual(tracker.pick_for_reuse(recipes, [], 0, SequenceRandom([0.99])).id, "r2")

    def test_pick_from_nothing(self):
        self.assertIsNone(self.tracker.pick_for_reuse([], [], 0, SequenceRandom()))


if __name__ == '__main__':
    unittest.main()
