import os
import sys
import unittest
import uuid
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

from fastapi.testclient import TestClient  # noqa: E402

from jobsync.api.v1 import interview as interview_api  # noqa: E402
from jobsync.main import app  # noqa: E402
from jobsync.storage import SQLiteStore  # noqa: E402

RESUME_TEXT = (
    "Jane Doe\njane@example.com\n"
    "Experience\nSoftware Engineer at Acme 2019 - 2023\n"
    "Built javascript and react dashboards."
)
JD_TEXT = "Looking for javascript, react, and docker skills. 3 years of experience required."


class ApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.store = SQLiteStore(":memory:")
        app.state.store = cls.store
        app.state.practices = {}
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls):
        app.state.store = None
        cls.store.close()

    def setUp(self):
        self.email = f"user-{uuid.uuid4().hex[:8]}@example.com"
        response = self.client.post(
            "/v1/auth/register",
            json={"email": self.email, "password": "secret1", "confirmPassword": "secret1", "name": "Jane"},
        )
        self.assertEqual(response.status_code, 200)
        self.user_id = response.json()["id"]
        self.headers = {"X-User-Id": self.user_id}

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy", "database": "ok"})

    def test_auth_errors(self):
        duplicate = self.client.post("/v1/auth/register", json={"email": self.email, "password": "secret1"})
        self.assertEqual(duplicate.status_code, 409)

        short = self.client.post("/v1/auth/register", json={"email": "x@example.com", "password": "123"})
        self.assertEqual(short.status_code, 400)

        mismatch = self.client.post(
            "/v1/auth/register",
            json={"email": "y@example.com", "password": "secret1", "confirmPassword": "secret2"},
        )
        self.assertEqual(mismatch.status_code, 400)

        login = self.client.post("/v1/auth/login", json={"email": self.email, "password": "secret1"})
        self.assertEqual(login.status_code, 200)
        self.assertEqual(login.json()["id"], self.user_id)

        bad_login = self.client.post("/v1/auth/login", json={"email": self.email, "password": "wrong-pass"})
        self.assertEqual(bad_login.status_code, 401)

    def test_user_header_is_required(self):
        response = self.client.get("/v1/progress")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "No user logged in")

        unknown = self.client.get("/v1/progress", headers={"X-User-Id": "user_unknown"})
        self.assertEqual(unknown.status_code, 401)

    def test_resume_analysis_is_saved_and_feeds_dashboard(self):
        empty = self.client.get("/v1/resume/latest", headers=self.headers)
        self.assertEqual(empty.status_code, 200)
        self.assertIsNone(empty.json())

        response = self.client.post(
            "/v1/resume/analyze",
            headers=self.headers,
            json={"resumeText": RESUME_TEXT, "jobDescriptionText": JD_TEXT, "fileName": "jane.pdf"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["id"].startswith("analysis_"))
        self.assertEqual(body["fileName"], "jane.pdf")
        self.assertEqual(body["keywordScore"], 66)
        self.assertEqual(body["skillGaps"][0]["name"], "Docker")
        for key in ("overallScore", "atsScore", "experienceScore", "recommendations", "timestamp"):
            self.assertIn(key, body)

        latest = self.client.get("/v1/resume/latest", headers=self.headers).json()
        self.assertEqual(latest["id"], body["id"])

        history = self.client.get("/v1/resume/history", headers=self.headers).json()
        self.assertEqual([item["id"] for item in history], [body["id"]])

        progress = self.client.get("/v1/progress", headers=self.headers).json()
        self.assertEqual(len(progress), 1)
        self.assertEqual(progress[0]["resumeScore"], body["overallScore"])
        self.assertEqual(progress[0]["interviewScore"], 0)

        dashboard = self.client.get("/v1/dashboard", headers=self.headers).json()
        self.assertTrue(dashboard["hasAnalysis"])
        self.assertEqual(dashboard["readinessScore"], body["overallScore"])
        self.assertEqual(dashboard["roadmap"][0]["skill"], "Docker")
        self.assertEqual(dashboard["roadmap"][0]["priority"], "High")
        self.assertEqual(dashboard["progress"]["resumeScores"], [body["overallScore"]])

    def test_resume_files_are_extracted_and_analyzed(self):
        response = self.client.post(
            "/v1/resume/analyze-files",
            headers=self.headers,
            files={
                "resume": ("resume.txt", RESUME_TEXT.encode("utf-8"), "text/plain"),
                "jobDescription": ("jd.txt", JD_TEXT.encode("utf-8"), "text/plain"),
            },
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["fileName"], "resume.txt")
        self.assertEqual(body["jdFileName"], "jd.txt")
        self.assertEqual(body["keywordScore"], 66)

        rejected = self.client.post(
            "/v1/resume/analyze-files",
            headers=self.headers,
            files={
                "resume": ("resume.doc", b"legacy", "application/msword"),
                "jobDescription": ("jd.txt", JD_TEXT.encode("utf-8"), "text/plain"),
            },
        )
        self.assertEqual(rejected.status_code, 400)

    def test_interview_flow(self):
        start = self.client.post("/v1/interview/start", headers=self.headers, json={"type": "behavioral"})
        self.assertEqual(start.status_code, 200)
        body = start.json()
        self.assertEqual(body["state"], "in_progress")
        self.assertEqual(body["effects"][0]["kind"], "show_question")
        self.assertEqual(body["effects"][0]["total"], 5)

        draft = self.client.post("/v1/interview/answer", headers=self.headers, json={"text": "First draft."})
        self.assertEqual(draft.json()["session"]["answers"][0]["text"], "First draft.")
        self.assertEqual(draft.json()["effects"], [])

        moved = self.client.post("/v1/interview/next", headers=self.headers, json={}).json()
        self.assertEqual(moved["session"]["currentQuestionIndex"], 1)

        back = self.client.post("/v1/interview/previous", headers=self.headers, json={"text": ""}).json()
        self.assertEqual(back["effects"][0]["answerText"], "First draft.")

        skipped = self.client.post("/v1/interview/skip", headers=self.headers, json={"text": "First draft."}).json()
        self.assertEqual(skipped["session"]["answers"][0]["status"], "skipped")

        final = None
        for _ in range(4):
            final = self.client.post(
                "/v1/interview/next", headers=self.headers, json={"text": "I implemented a fix."}
            ).json()
        self.assertEqual(final["state"], "completed")
        self.assertEqual(final["effects"][0]["kind"], "show_results")
        self.assertEqual(final["result"]["answeredQuestions"], 4)
        self.assertEqual(final["result"]["skippedQuestions"], 1)

        results = self.client.get("/v1/interview/results", headers=self.headers).json()
        self.assertEqual(len(results), 1)
        self.assertTrue(results[0]["id"].startswith("interview_"))

        transcript = self.client.get("/v1/interview/transcript", headers=self.headers)
        self.assertEqual(transcript.status_code, 200)
        self.assertIn("**Your Answer:** I implemented a fix.", transcript.json()["transcript"])

        dashboard = self.client.get("/v1/dashboard", headers=self.headers).json()
        self.assertEqual(dashboard["interviewsCompleted"], 1)
        self.assertEqual(dashboard["latestInterviewScore"], final["result"]["scores"]["overall"])

        reset = self.client.post("/v1/interview/reset", headers=self.headers).json()
        self.assertEqual(reset["state"], "not_started")
        self.assertEqual(reset["effects"], [{"kind": "show_selection"}])
        self.assertNotIn(self.user_id, app.state.practices)

        after_reset = self.client.get("/v1/interview/transcript", headers=self.headers)
        self.assertEqual(after_reset.status_code, 200)

    def test_practice_map_is_bounded(self):
        with mock.patch.object(interview_api, "MAX_ACTIVE_PRACTICES", 2):
            app.state.practices = {}
            self.client.post("/v1/interview/start", headers=self.headers, json={"type": "technical"})
            for _ in range(2):
                other = self.client.post(
                    "/v1/auth/register",
                    json={"email": f"other-{uuid.uuid4().hex[:8]}@example.com", "password": "secret1"},
                ).json()
                self.client.get("/v1/interview/state", headers={"X-User-Id": other["id"]})
            self.assertEqual(len(app.state.practices), 2)
            self.assertNotIn(self.user_id, app.state.practices)

        state = self.client.get("/v1/interview/state", headers=self.headers).json()
        self.assertEqual(state["state"], "not_started")

    def test_transcript_missing_before_any_interview(self):
        response = self.client.get("/v1/interview/transcript", headers=self.headers)
        self.assertEqual(response.status_code, 404)

    def test_invalid_interview_type_is_rejected(self):
        response = self.client.post("/v1/interview/start", headers=self.headers, json={"type": "riddles"})
        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()
