from .analyzer import analyze_resume, overall_score, score_interpretation
from .ats import ats_feedback, ats_score, detect_ats_factors
from .experience import (
    ExperienceAssessment,
    assess_experience,
    extract_experience_years,
    extract_required_years,
)
from .keywords import KEYWORD_VOCABULARY, extract_keywords, keyword_score, match_keywords
from .roadmap import build_skill_roadmap
from .skill_gaps import analyze_skill_gaps

__all__ = [
    "analyze_resume",
    "overall_score",
    "score_interpretation",
    "ats_feedback",
    "ats_score",
    "detect_ats_factors",
    "ExperienceAssessment",
    "assess_experience",
    "extract_experience_years",
    "extract_required_years",
    "KEYWORD_VOCABULARY",
    "extract_keywords",
    "keyword_score",
    "match_keywords",
    "build_skill_roadmap",
    "analyze_skill_gaps",
]
