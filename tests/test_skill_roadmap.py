import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jobsync.matching import analyze_resume, analyze_skill_gaps, build_skill_roadmap  # noqa: E402
from jobsync.presentation import build_dashboard, progress_series, readiness_score  # noqa: E402
from jobsync.schemas import ProgressEntry, SkillGap  # noqa: E402
from jobsync.storage import SQLiteStore  # noqa: E402


def gap(name, value):
    return SkillGap(name=name, current=80 - value, required=80, gap=value)


class SkillGapTests(unittest.TestCase):
    def test_duplicates_are_dropped_and_order_is_stable(self):
        gaps = analyze_skill_gaps(["python", " python ", "docker", "node", "aws"], ["python", "aws"])
        self.assertEqual([item.name for item in gaps], ["Docker", "Node", "Python", "Aws"])
        self.assertEqual([item.gap for item in gaps], [80, 80, 0, 0])

    def test_multi_word_names_are_title_cased(self):
        (item,) = analyze_skill_gaps(["machine  learning"], [])
        self.assertEqual(item.name, "Machine Learning")


class RoadmapTests(unittest.TestCase):
    def test_only_gaps_above_twenty_are_planned(self):
        roadmap = build_skill_roadmap([gap("Docker", 80), gap("Git", 20), gap("Communication", 30), gap("Css", 0)])
        self.assertEqual([item.skill for item in roadmap], ["Docker", "Communication"])
        self.assertEqual([item.order for item in roadmap], [1, 2])

    def test_priority_timeframe_and_milestones(self):
        high, medium = build_skill_roadmap([gap("Communication", 30), gap("Docker", 80)])
        self.assertEqual((high.skill, high.priority, high.timeframe), ("Docker", "High", "2-3 months"))
        self.assertEqual([milestone.week for milestone in high.milestones], [2, 4, 6, 8])
        self.assertEqual(high.milestones[0].target, "Docker - Level 1")
        self.assertEqual(high.resources, ["Online Courses", "Practice Projects", "Industry Resources"])

        self.assertEqual((medium.priority, medium.timeframe), ("Medium", "1-2 months"))
        self.assertEqual(len(medium.milestones), 2)
        self.assertEqual(medium.resources[0], "Presentation Skills Course")


class DashboardTests(unittest.TestCase):
    def setUp(self):
        self.store = SQLiteStore(":memory:")
        user = self.store.register_user("dee@example.com", "dashboard")
        self.data = self.store.for_user(user.id)

    def tearDown(self):
        self.store.close()

    def test_empty_dashboard(self):
        view = build_dashboard(self.data)
        self.assertFalse(view.has_analysis)
        self.assertEqual(view.readiness_score, 0)
        self.assertIsNone(view.interpretation)
        self.assertEqual(view.roadmap, [])
        self.assertEqual(view.progress.dates, [])
        self.assertIsNone(view.latest_interview_score)
        self.assertEqual(readiness_score(None), 0)

    def test_dashboard_reflects_latest_analysis(self):
        analysis = analyze_resume(
            "I have experience with javascript and react",
            "Looking for javascript, react, and docker skills",
        )
        self.data.save_resume_analysis(analysis)
        self.data.save_progress_entry(
            ProgressEntry(resume_score=analysis.overall_score, overall_score=analysis.overall_score)
        )
        view = build_dashboard(self.data)
        self.assertTrue(view.has_analysis)
        self.assertEqual(view.readiness_score, analysis.overall_score)
        self.assertEqual(view.skill_gaps[0].name, "Docker")
        self.assertEqual(view.roadmap[0].skill, "Docker")
        self.assertEqual(view.progress.resume_scores, [analysis.overall_score])

    def test_progress_series_keeps_entry_order(self):
        series = progress_series(
            [
                ProgressEntry(date="Mar 1", resume_score=60, overall_score=60),
                ProgressEntry(date="Mar 2", interview_score=72, overall_score=72),
            ]
        )
        self.assertEqual(series.dates, ["Mar 1", "Mar 2"])
        self.assertEqual(series.resume_scores, [60, 0])
        self.assertEqual(series.interview_scores, [0, 72])
        self.assertEqual(series.overall_readiness, [60, 72])


if __name__ == "__main__":
    unittest.main()
