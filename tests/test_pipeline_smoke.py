import os
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

import jobsync.main  # noqa: F401,E402
from jobsync.core.scoring import get_scoring_value  # noqa: E402


class PipelineSmokeTests(unittest.TestCase):
    def test_safe_imports_and_routes_registered(self):
        self.assertEqual(get_scoring_value("resume.weights.ats"), 0.2)
        paths = set(jobsync.main.app.openapi()["paths"])
        for path in ("/v1/health", "/v1/resume/analyze", "/v1/resume/history", "/v1/interview/start", "/v1/dashboard"):
            self.assertIn(path, paths)


if __name__ == "__main__":
    unittest.main()
