import random
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atscore.suggestions import generate_bullet_suggestions, generate_gap_suggestions  # noqa: E402


class FirstChoice:
    def choice(self, seq):
        return seq[0]


class GapSuggestionTests(unittest.TestCase):
    def test_missing_skills_named_up_to_three(self):
        suggestions = generate_gap_suggestions(
            ["aws", "docker", "kubernetes", "terraform"],
            skills_score=90.0,
            experience_score=90.0,
            keywords_score=90.0,
        )
        self.assertEqual(suggestions.top_actions, ["Add missing skills: aws, docker, kubernetes"])
        self.assertEqual(
            suggestions.bullets,
            ["• Developed proficiency in aws through hands-on projects and training"],
        )

    def test_all_thresholds_triggered(self):
        suggestions = generate_gap_suggestions([], skills_score=79.9, experience_score=69.9, keywords_score=59.9)
        self.assertEqual(len(suggestions.top_actions), 3)
        self.assertEqual(len(suggestions.bullets), 2)
        self.assertEqual(
            suggestions.top_actions[-1], "Expand technical skills section with relevant technologies"
        )

    def test_nothing_to_suggest(self):
        suggestions = generate_gap_suggestions([], skills_score=80.0, experience_score=70.0, keywords_score=60.0)
        self.assertEqual(suggestions.top_actions, [])
        self.assertEqual(suggestions.bullets, [])


class BulletSuggestionTests(unittest.TestCase):
    def test_single_keyword_is_padded(self):
        bullets = generate_bullet_suggestions("Worked on backend systems", ["Python"], "senior", rng=FirstChoice())
        self.assertEqual(
            bullets,
            [
                "• Architected Python-based solutions that transformed architecture, "
                "resulting in 50% improvement in scalability",
                "• Architected cross-functional team initiatives that improved system performance by 25%",
                "• Spearheaded automated testing processes, reducing deployment time by 40%",
            ],
        )

    def test_at_most_three_keyword_bullets(self):
        bullets = generate_bullet_suggestions(
            "Worked on backend systems", ["Python", "SQL", "AWS", "Docker"], "entry", rng=FirstChoice()
        )
        self.assertEqual(len(bullets), 3)
        self.assertTrue(bullets[0].startswith("• Assisted Python-based"))
        self.assertTrue(bullets[2].startswith("• Contributed AWS-based"))

    def test_two_keywords_give_four_bullets(self):
        bullets = generate_bullet_suggestions("Worked on backend systems", ["Go", "Rust"], "mid", rng=FirstChoice())
        self.assertEqual(len(bullets), 4)

    def test_unknown_level_uses_mid_verbs(self):
        bullets = generate_bullet_suggestions("Worked on backend systems", ["Go"], "principal", rng=FirstChoice())
        self.assertTrue(bullets[0].startswith("• Led Go-based"))

    def test_seeded_random_is_reproducible(self):
        keywords = ["Python", "SQL"]
        first = generate_bullet_suggestions("Worked on backend systems", keywords, "mid", rng=random.Random(7))
        second = generate_bullet_suggestions("Worked on backend systems", keywords, "mid", rng=random.Random(7))
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
