from .accounts import UserRecord
from .analysis import (
    SKILL_LEVEL_REQUIRED,
    AnalysisResult,
    ATSFactors,
    RoadmapItem,
    RoadmapMilestone,
    SkillGap,
    StoredAnalysis,
)
from .interview import (
    Answer,
    AnswerStatus,
    InterviewResult,
    InterviewScores,
    InterviewSession,
    InterviewType,
    SessionStatus,
    StoredInterviewResult,
)
from .progress import ProgressEntry, ProgressSeries

__all__ = [
    "UserRecord",
    "SKILL_LEVEL_REQUIRED",
    "AnalysisResult",
    "ATSFactors",
    "RoadmapItem",
    "RoadmapMilestone",
    "SkillGap",
    "StoredAnalysis",
    "Answer",
    "AnswerStatus",
    "InterviewResult",
    "InterviewScores",
    "InterviewSession",
    "InterviewType",
    "SessionStatus",
    "StoredInterviewResult",
    "ProgressEntry",
    "ProgressSeries",
]
