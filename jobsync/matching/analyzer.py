from __future__ import annotations

import logging
import math

from jobsync.core.scoring import get_scoring_value
from jobsync.schemas import AnalysisResult, SkillGap

from .ats import ats_feedback, ats_score, detect_ats_factors
from .experience import ExperienceAssessment, assess_experience, extract_experience_years, extract_required_years
from .keywords import DEFAULT_KEYWORD_SCORE, extract_keywords, keyword_feedback, keyword_score, match_keywords
from .skill_gaps import analyze_skill_gaps

logger = logging.getLogger(__name__)


def overall_score(ats: int, keyword: int, experience: int) -> int:
    w_ats = float(get_scoring_value("resume.weights.ats", 0.2))
    w_keyword = float(get_scoring_value("resume.weights.keyword", 0.4))
    w_experience = float(get_scoring_value("resume.weights.experience", 0.4))
    return math.floor(ats * w_ats + keyword * w_keyword + experience * w_experience)


def score_interpretation(score: int) -> str:
    if score >= 85:
        return "Excellent match! Your resume strongly aligns with this role."
    if score >= 70:
        return "Good match with room for optimization."
    if score >= 55:
        return "Moderate match. Consider targeted improvements."
    return "Significant gaps identified. Review recommendations below."


def _recommendations(
    *,
    ats: int,
    keyword: int,
    overall: int,
    missing_keywords: list[str],
    experience: ExperienceAssessment,
    skill_gaps: list[SkillGap],
) -> list[str]:
    recommendations: list[str] = []
    if ats < 80:
        recommendations.append("Ensure your resume has clear sections: Contact, Summary, Experience, Education, Skills")
    if keyword < 70:
        if missing_keywords:
            recommendations.append(f"Include these missing keywords: {', '.join(missing_keywords[:5])}")
        recommendations.append("Add relevant technical skills and certifications mentioned in the JD")
    if experience.score < 75:
        recommendations.append("Quantify your achievements with specific metrics and numbers")
        recommendations.append("Highlight projects that demonstrate relevant skills")
    if experience.gap is not None and experience.gap > 0:
        recommendations.append(
            f"Highlight {experience.gap} additional year(s) of relevant experience or showcase adjacent work "
            "to meet the requirement."
        )
    if experience.required is None and experience.years == 0:
        recommendations.append(
            "Explicitly mention internship durations, project timelines, or freelance engagements "
            "to give reviewers confidence in your experience level."
        )
    if overall < 70:
        recommendations.append("Tailor your professional summary to match the role requirements")
    for skill in [gap for gap in skill_gaps if gap.gap > 0][:3]:
        recommendations.append(f"Consider adding {skill.name} to your skillset (mentioned in job description)")
    return recommendations


def analyze_resume(resume_text: str, jd_text: str, *, current_year: int | None = None) -> AnalysisResult:
    """Score a resume against a job description.

    Total over any text input: empty or malformed documents produce low
    scores rather than errors.
    """
    resume_text = resume_text or ""
    jd_text = jd_text or ""

    factors = detect_ats_factors(resume_text)
    ats = ats_score(factors)

    jd_keywords = extract_keywords(jd_text)
    resume_keywords = extract_keywords(resume_text)
    matched = match_keywords(jd_keywords, resume_keywords)
    missing = [keyword for keyword in jd_keywords if keyword not in matched]
    default_keyword_score = int(get_scoring_value("resume.keyword_default_score", DEFAULT_KEYWORD_SCORE))
    keyword = keyword_score(matched, jd_keywords, default=default_keyword_score)

    experience = assess_experience(
        extract_experience_years(resume_text, current_year=current_year),
        extract_required_years(jd_text),
    )

    overall = overall_score(ats, keyword, experience.score)
    skill_gaps = analyze_skill_gaps(jd_keywords, matched)

    logger.info(
        "resume_analysis_complete overall=%s ats=%s keyword=%s experience=%s jd_keywords=%s",
        overall,
        ats,
        keyword,
        experience.score,
        len(jd_keywords),
    )
    return AnalysisResult(
        overall_score=overall,
        ats_score=ats,
        keyword_score=keyword,
        experience_score=experience.score,
        ats_feedback=ats_feedback(ats),
        keyword_feedback=keyword_feedback(keyword, matched, jd_keywords, missing),
        experience_feedback=experience.feedback,
        recommendations=_recommendations(
            ats=ats,
            keyword=keyword,
            overall=overall,
            missing_keywords=missing,
            experience=experience,
            skill_gaps=skill_gaps,
        ),
        skill_gaps=skill_gaps,
        matched_keywords=matched,
        missing_keywords=missing,
        experience_years=experience.years,
        required_years=experience.required,
    )
