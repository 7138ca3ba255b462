from __future__ import annotations

from pydantic import Field

from jobsync.matching import build_skill_roadmap, score_interpretation
from jobsync.schemas import AnalysisResult, ProgressEntry, ProgressSeries, RoadmapItem, SkillGap
from jobsync.schemas.base import CamelModel
from jobsync.storage import PersistenceStore


class DashboardView(CamelModel):
    readiness_score: int = 0
    interpretation: str | None = None
    has_analysis: bool = False
    skill_gaps: list[SkillGap] = Field(default_factory=list)
    roadmap: list[RoadmapItem] = Field(default_factory=list)
    progress: ProgressSeries = Field(default_factory=ProgressSeries)
    interviews_completed: int = 0
    latest_interview_score: int | None = None


def readiness_score(latest: AnalysisResult | None) -> int:
    if latest is None:
        return 0
    return latest.overall_score


def progress_series(entries: list[ProgressEntry]) -> ProgressSeries:
    return ProgressSeries(
        dates=[entry.date or "" for entry in entries],
        resume_scores=[entry.resume_score for entry in entries],
        interview_scores=[entry.interview_score for entry in entries],
        overall_readiness=[entry.overall_score for entry in entries],
    )


def build_dashboard(store: PersistenceStore) -> DashboardView:
    latest = store.get_latest_resume_analysis()
    interviews = store.get_all_interview_results()
    skill_gaps = sorted(latest.skill_gaps, key=lambda item: item.gap, reverse=True) if latest else []
    return DashboardView(
        readiness_score=readiness_score(latest),
        interpretation=score_interpretation(latest.overall_score) if latest else None,
        has_analysis=latest is not None,
        skill_gaps=skill_gaps,
        roadmap=build_skill_roadmap(skill_gaps),
        progress=progress_series(store.get_user_progress()),
        interviews_completed=len(interviews),
        latest_interview_score=interviews[-1].scores.overall if interviews else None,
    )
