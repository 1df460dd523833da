import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atscore.semantic.similarity import calculate_similarity, find_matching_phrases, overlap  # noqa: E402


class OverlapTests(unittest.TestCase):
    def test_formula(self):
        self.assertAlmostEqual(overlap(["a", "b"], ["b", "c"]), 0.5)
        self.assertAlmostEqual(overlap(["a", "b", "c", "d"], ["a"]), 0.5)

    def test_duplicates_are_ignored(self):
        self.assertAlmostEqual(overlap(["a", "a", "b"], ["a", "b"]), 1.0)

    def test_empty_side_scores_zero(self):
        self.assertEqual(overlap([], ["a"]), 0.0)
        self.assertEqual(overlap(["a"], []), 0.0)

    def test_symmetric(self):
        pairs = [
            (["python", "aws"], ["aws", "docker", "sql"]),
            (["a", "b", "c"], ["c"]),
            (["x"], ["y"]),
            (["go", "rust", "c++", "java", "sql"], ["sql", "java"]),
        ]
        for left, right in pairs:
            self.assertEqual(overlap(left, right), overlap(right, left))

    def test_never_above_one(self):
        self.assertLessEqual(overlap(["a", "b", "c"], ["c", "b", "a"]), 1.0)


class CalculateSimilarityTests(unittest.TestCase):
    def test_score_and_matched_phrases(self):
        result = calculate_similarity("Built Python services on AWS cloud", "Python services on AWS")
        self.assertAlmostEqual(result.score, 3 / (5 ** 0.5 * 3 ** 0.5))
        self.assertEqual(result.matched_phrases, ["Built Python services on AWS cloud"])
        self.assertEqual(result.source_text, "Built Python services on AWS cloud")
        self.assertEqual(result.target_text, "Python services on AWS")

    def test_unrelated_texts(self):
        result = calculate_similarity("Baked bread every morning", "Kubernetes cluster operations")
        self.assertEqual(result.score, 0.0)
        self.assertEqual(result.matched_phrases, [])

    def test_matched_phrases_are_deduplicated(self):
        phrases = find_matching_phrases(
            ["Python services on AWS"],
            ["Python services on AWS", " Python services on AWS "],
        )
        self.assertEqual(phrases, ["Python services on AWS"])


if __name__ == "__main__":
    unittest.main()
