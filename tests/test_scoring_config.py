import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atscore.core.config import scoring as scoring_config  # noqa: E402
from atscore.core.config.scoring import clear_scoring_config_cache, get_scoring_config, get_scoring_value  # noqa: E402
from atscore.schemas import ScoringWeights  # noqa: E402
from atscore.scoring import load_scoring_weights  # noqa: E402
from atscore.taxonomy import LocalTaxonomy  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def setUp(self):
        clear_scoring_config_cache()

    def tearDown(self):
        clear_scoring_config_cache()

    def _with_config(self, content: str):
        handle = tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False, encoding="utf-8")
        handle.write(content)
        handle.close()
        self.addCleanup(Path(handle.name).unlink)
        return patch.object(scoring_config, "_config_path", return_value=Path(handle.name))

    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("weights.skills"), 0.4)
        self.assertEqual(get_scoring_value("weights.unknown", "fallback"), "fallback")

    def test_repo_weights_match_defaults(self):
        self.assertEqual(load_scoring_weights(), ScoringWeights())

    def test_missing_file_falls_back_to_defaults(self):
        with patch.object(scoring_config, "_config_path", return_value=Path("/nonexistent/scoring.yaml")):
            with self.assertRaises(RuntimeError):
                get_scoring_config()
            with self.assertLogs("atscore.scoring.config", level="WARNING"):
                weights = load_scoring_weights()
            taxonomy = LocalTaxonomy.from_config()
        self.assertEqual(weights, ScoringWeights())
        self.assertEqual(taxonomy.as_mapping(), {})

    def test_invalid_yaml_raises(self):
        with self._with_config("weights: [unclosed"):
            with self.assertRaises(RuntimeError):
                get_scoring_config()

    def test_invalid_weights_fall_back_to_defaults(self):
        with self._with_config("weights:\n  skills: -1\n"):
            self.assertEqual(load_scoring_weights(), ScoringWeights())

    def test_custom_weights_and_synonyms(self):
        content = (
            "weights:\n  skills: 0.5\n  experience: 0.3\n  education: 0.1\n  keywords: 0.1\n"
            "skill_synonyms:\n  Kubernetes: [k8s]\n  postgresql: postgres\n"
        )
        with self._with_config(content):
            weights = load_scoring_weights()
            taxonomy = LocalTaxonomy.from_config()
        self.assertEqual(weights.skills, 0.5)
        self.assertEqual(taxonomy.synonyms_for("kubernetes"), ["k8s"])
        self.assertEqual(taxonomy.synonyms_for("PostgreSQL"), ["postgres"])


if __name__ == "__main__":
    unittest.main()
