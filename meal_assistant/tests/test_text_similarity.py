import unittest
from meal_assistant.logic.matching.text import levenshtein_distance, normalize_ingredient_name, string_similarity


class TestNormalize(unittest.TestCase):

    def test_lowercases_and_strips_punctuation(self):
        self.assertEqual(normalize_ingredient_name("  Chicken-Breast (Boneless)! "), "chickenbreast boneless")

    def test_collapses_whitespace(self):
        self.assertEqual(normalize_ingredient_name("red \t  bell\npepper"), "red bell pepper")

    def test_keeps_digits(self):
        self.assertEqual(normalize_ingredient_name("7-Up"), "7up")


class TestSimilarity(unittest.TestCase):

    def test_levenshtein(self):
        self.assertEqual(levenshtein_distance("kitten", "sitting"), 3)
        self.assertEqual(levenshtein_distance("", "abc"), 3)
        self.assertEqual(levenshtein_distance("flour", "flour"), 0)

    def test_similarity_bounds(self):
        self.assertEqual(string_similarity("", ""), 1.0)
        self.assertEqual(string_similarity("abc", "abc"), 1.0)
        self.assertEqual(string_similarity("abc", "xyz"), 0.0)

    def test_similarity_uses_longest_length(self):
        self.assertAlmostEqual(string_similarity("tomato", "tomate"), 1 - 1 / 6)
        self.assertAlmostEqual(string_similarity("onion", "onions"), 1 - 1 / 6)


if __name__ == '__main__':
    unittest.main()
