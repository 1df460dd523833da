import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

# Keep API tests deterministic and independent of request volume.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("ENTITY_EXTRACTOR", "pattern")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from atscore.core.config import scoring as scoring_config  # noqa: E402
from atscore.main import app  # noqa: E402


class ScoreApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.resume_text = (
            "Jane Doe\n"
            "Skills\n"
            "Python, SQL, Docker\n"
            "Experience\n"
            "Built Python services on AWS for payments\n"
            "Education\n"
            "BSc Computer Science\n"
        )
        cls.job_text = "Must have Python. Experience with AWS and Kubernetes. 3+ years experience required."

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"status": "healthy", "scoringConfig": "loaded", "entityExtractor": "pattern"},
        )

    def test_health_reports_default_scoring_when_config_missing(self):
        scoring_config.clear_scoring_config_cache()
        try:
            with patch.object(scoring_config, "_config_path", return_value=Path("/nonexistent/scoring.yaml")):
                response = self.client.get("/v1/health")
        finally:
            scoring_config.clear_scoring_config_cache()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")
        self.assertEqual(response.json()["scoringConfig"], "defaults")

    def test_score_contract_shape(self):
        response = self.client.post(
            "/v1/score",
            json={"resume": {"text": self.resume_text}, "jobDescription": {"text": self.job_text}},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        data = body["data"]
        self.assertIsInstance(data["overall"], int)
        self.assertEqual(set(data["sections"]), {"skills", "experience", "education", "keywords"})
        self.assertEqual(data["missingKeywords"], ["kubernetes"])
        self.assertIn("topActions", data["suggestions"])
        self.assertIn("timestamp", data)
        self.assertNotIn("debug", data)
        for gate in data["gates"]:
            self.assertEqual("impact" in gate, not gate["passed"])

    def test_score_with_debug(self):
        response = self.client.post(
            "/v1/score",
            json={
                "resume": {"text": self.resume_text},
                "jobDescription": {"text": self.job_text},
                "includeDebug": True,
            },
        )
        self.assertEqual(response.status_code, 200)
        debug = response.json()["data"]["debug"]
        self.assertEqual(debug["weights"]["skills"], 0.4)
        self.assertIn("processingInfo", debug)

    def test_short_text_is_rejected(self):
        response = self.client.post(
            "/v1/score",
            json={"resume": {"text": "tiny"}, "jobDescription": {"text": self.job_text}},
        )
        self.assertEqual(response.status_code, 422)

    def test_bulk_score(self):
        response = self.client.post(
            "/v1/score/bulk",
            json={
                "resumes": [{"text": self.resume_text, "title": "Backend"}, {"text": "Experience\nBarista at a cafe"}],
                "jobDescription": {"text": self.job_text},
            },
        )
        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual([entry["resumeTitle"] for entry in data["results"]], ["Backend", "Resume 2"])
        self.assertEqual(data["summary"]["totalResumes"], 2)
        self.assertEqual(data["summary"]["successfulScores"], 2)

    def test_bulk_limit(self):
        resumes = [{"text": self.resume_text}] * 6
        response = self.client.post(
            "/v1/score/bulk",
            json={"resumes": resumes, "jobDescription": {"text": self.job_text}},
        )
        self.assertEqual(response.status_code, 422)

    def test_suggest_bullets(self):
        response = self.client.post(
            "/v1/score/suggest-bullets",
            json={
                "resumeSectionText": "Worked on backend payment systems",
                "targetKeywords": ["Python", "Kafka"],
                "experienceLevel": "senior",
            },
        )
        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(len(data["bullets"]), 4)
        self.assertTrue(data["bullets"][0].startswith("• Architected Python-based"))
        self.assertEqual(data["experienceLevel"], "senior")

    def test_suggest_bullets_requires_keywords(self):
        response = self.client.post(
            "/v1/score/suggest-bullets",
            json={"resumeSectionText": "Worked on backend payment systems", "targetKeywords": []},
        )
        self.assertEqual(response.status_code, 422)

    def test_weights(self):
        response = self.client.get("/v1/score/weights")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["data"]["weights"],
            {"skills": 0.4, "experience": 0.35, "education": 0.1, "keywords": 0.15},
        )


if __name__ == "__main__":
    unittest.main()
