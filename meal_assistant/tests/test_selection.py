import random
import unittest
from meal_assistant.logic.planning.selection import pick_uniform, pick_with_favorites_weight, shuffle
from fakes import SequenceRandom, recipe


class TestPickUniform(unittest.TestCase):

    def test_empty(self):
        self.assertIsNone(pick_uniform([], SequenceRandom([0.5])))

    def test_index_from_draw(self):
        items = ["a", "b", "c", "d"]
        self.assertEqual(pick_uniform(items, SequenceRandom([0.0])), "a")
        self.assertEqual(pick_uniform(items, SequenceRandom([0.5])), "c")
        self.assertEqual(pick_uniform(items, SequenceRandom([0.9999])), "d")

    def test_draw_of_one_stays_in_range(self):
        self.assertEqual(pick_uniform(["a", "b"], SequenceRandom([1.0])), "b")


class TestShuffle(unittest.TestCase):

    def test_is_permutation_and_leaves_input_alone(self):
        items = list(range(10))
        shuffled = shuffle(items, random.Random(3))
        self.assertEqual(sorted(shuffled), items)
        self.assertEqual(items, list(range(10)))

    def test_same_seed_same_order(self):
        self.assertEqual(shuffle(range(20), random.Random(7)), shuffle(range(20), random.Random(7)))


class TestFavoritesWeight(unittest.TestCase):

    def setUp(self):
        self.candidates = [
            recipe("plain-1"),
            recipe("fav-1", is_favorite=True),
            recipe("plain-2"),
            recipe("fav-2", is_favorite=True),
        ]

    def test_weight_100_always_picks_a_favorite(self):
        rng = random.Random(1)
        for _ in range(50):
            self.assertTrue(pick_with_favorites_weight(self.candidates, 100, rng).is_favorite)

    def test_weight_0_is_uniform_over_all(self):
        picks = {pick_with_favorites_weight(self.candidates, 0, SequenceRandom([v])).id
                 for v in (0.0, 0.3, 0.6, 0.9)}
        self.assertEqual(picks, {"plain-1", "fav-1", "plain-2", "fav-2"})

    def test_partial_weight_splits_on_first_draw(self):
        # 0.2 * 100 < 70 -> favorites, 0.8 * 100 >= 70 -> others
        self.assertTrue(pick_with_favorites_weight(self.candidates, 70, SequenceRandom([0.2, 0.0])).is_favorite)
        self.assertFalse(pick_with_favorites_weight(self.candidates, 70, SequenceRandom([0.8, 0.0])).is_favorite)

    def test_no_favorites(self):
        plain = [c for c in self.candidates if not c.is_favorite]
        self.assertEqual(pick_with_favorites_weight(plain, 100, SequenceRandom([0.0])).id, "plain-1")

    def test_only_favorites(self):
        favorites = [c for c in self.candidates if c.is_favorite]
        self.assertEqual(pick_with_favorites_weight(favorites, 10, SequenceRandom([0.9])).id, "fav-2")

    def test_empty(self):
        self.assertIsNone(pick_with_favorites_weight([], 50, SequenceRandom()))


if __name__ == '__main__':
    unittest.main()
