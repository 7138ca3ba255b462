"""Heuristic grading of free-text interview answers.

Three axes are scored per answer and averaged over the answered questions:
clarity (length band, punctuation, capitalisation, examples, professional
vocabulary), structure (STAR components present) and confidence (response
time band, confident versus hesitant wording, length). Skipped or blank
answers count toward the totals but never toward the axis averages.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from jobsync.core.numbers import clamp_int, round_half_up
from jobsync.schemas import Answer, InterviewResult, InterviewScores, InterviewSession

logger = logging.getLogger(__name__)

_EXAMPLE_PHRASES = ("for example", "specifically", "in particular", "such as", "like when")
_PROFESSIONAL_WORDS = ("implemented", "developed", "managed", "achieved", "collaborated", "led")
_STAR_INDICATORS: dict[str, tuple[str, ...]] = {
    "situation": ("situation", "when", "during", "at the time", "context"),
    "task": ("task", "responsibility", "goal", "objective", "needed to"),
    "action": ("action", "did", "implemented", "decided", "approached", "steps"),
    "result": ("result", "outcome", "achieved", "success", "learned", "impact"),
}
_CONFIDENCE_WORDS = ("confident", "sure", "definitely", "successfully", "effectively")
_HESITATION_WORDS = ("um", "uh", "maybe", "i think", "probably", "i guess")

_MIN_RESPONSE_MS = 10_000
_MAX_RESPONSE_MS = 180_000
_MAX_RECOMMENDATIONS = 4


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _count_present(text: str, words: tuple[str, ...]) -> int:
    return sum(1 for word in words if word in text)


def _clarity(answer: Answer) -> int:
    text = answer.text.strip()
    lowered = text.lower()
    words = answer.word_count
    if 50 <= words <= 200:
        score = 30
    elif 25 <= words < 50:
        score = 20
    elif 200 < words <= 300:
        score = 25
    else:
        score = 10
    if any(mark in text for mark in ".!?"):
        score += 20
    if text[:1].isupper():
        score += 10
    if any(phrase in lowered for phrase in _EXAMPLE_PHRASES):
        score += 20
    score += min(_count_present(lowered, _PROFESSIONAL_WORDS) * 5, 20)
    return min(score, 100)


def _structure(answer: Answer) -> int:
    lowered = answer.text.lower()
    matched = sum(
        1 for indicators in _STAR_INDICATORS.values() if any(word in lowered for word in indicators)
    )
    return matched * 25


def _confidence(answer: Answer) -> int:
    lowered = answer.text.lower()
    if _MIN_RESPONSE_MS <= answer.response_time <= _MAX_RESPONSE_MS:
        score = 40
    elif answer.response_time < _MIN_RESPONSE_MS:
        score = 20
    else:
        score = 15
    score += _count_present(lowered, _CONFIDENCE_WORDS) * 10
    score -= _count_present(lowered, _HESITATION_WORDS) * 5
    if answer.word_count >= 30:
        score += 20
    return clamp_int(score, 0, 100)


def _average(values: list[int]) -> int:
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))


def clarity_score(answers: list[Answer]) -> int:
    return _average([_clarity(answer) for answer in answers])


def structure_score(answers: list[Answer]) -> int:
    return _average([_structure(answer) for answer in answers])


def confidence_score(answers: list[Answer]) -> int:
    return _average([_confidence(answer) for answer in answers])


def interview_grade(overall: int) -> str:
    if overall >= 85:
        return "Excellent Performance"
    if overall >= 75:
        return "Good Performance"
    if overall >= 60:
        return "Satisfactory Performance"
    return "Needs Improvement"


def interview_recommendations(overall: int, answers: list[Answer]) -> list[str]:
    recommendations: list[str] = []
    if overall < 60:
        recommendations.append("Practice the STAR method (Situation, Task, Action, Result) for structured responses")
        recommendations.append("Prepare specific examples from your experience before the interview")
    if overall < 75:
        recommendations.append("Work on providing more detailed explanations with concrete examples")
        recommendations.append("Practice speaking clearly and at an appropriate pace")

    if answers:
        average_words = sum(answer.word_count for answer in answers) / len(answers)
        if average_words < 50:
            recommendations.append("Provide more detailed responses - aim for 50-150 words per answer")
        elif average_words > 200:
            recommendations.append("Practice being more concise - aim to answer questions in 50-150 words")

        average_time = sum(answer.response_time for answer in answers) / len(answers)
        if average_time < _MIN_RESPONSE_MS:
            recommendations.append("Take a moment to think before responding to show thoughtfulness")
        elif average_time > _MAX_RESPONSE_MS:
            recommendations.append("Practice your responses to reduce thinking time during interviews")

    if not recommendations:
        recommendations.append("Excellent performance! Continue practicing to maintain your skills")
        recommendations.append("Consider preparing for more advanced or role-specific questions")
    return recommendations[:_MAX_RECOMMENDATIONS]


def scorable_answers(session: InterviewSession) -> list[Answer]:
    return [
        answer
        for answer in session.answers
        if answer is not None and answer.status == "answered" and answer.text.strip()
    ]


def score_interview(session: InterviewSession, *, completed_at: datetime | None = None) -> InterviewResult:
    completed_at = completed_at or session.end_time or _utc_now()
    answered = scorable_answers(session)

    clarity = clarity_score(answered)
    structure = structure_score(answered)
    confidence = confidence_score(answered)
    overall = round_half_up((clarity + structure + confidence) / 3)

    total_time = max(0, int((completed_at - session.start_time).total_seconds() * 1000))
    average_response = (
        sum(answer.response_time for answer in answered) / len(answered) if answered else 0.0
    )
    logger.info(
        "interview_scored type=%s answered=%s/%s overall=%s",
        session.type,
        len(answered),
        len(session.questions),
        overall,
    )
    return InterviewResult(
        type=session.type,
        total_questions=len(session.questions),
        answered_questions=len(answered),
        skipped_questions=len(session.questions) - len(answered),
        total_time=total_time,
        average_response_time=average_response,
        scores=InterviewScores(
            overall=overall,
            clarity=clarity,
            structure=structure,
            confidence=confidence,
        ),
        grade=interview_grade(overall),
        answers=[answer for answer in session.answers if answer is not None],
        recommendations=interview_recommendations(overall, answered),
        completed_at=completed_at,
    )
