from .practice import InterviewPractice
from .questions import INTERVIEW_TITLES, QUESTION_BANK, mixed_question_pool
from .scoring import (
    clarity_score,
    confidence_score,
    interview_grade,
    interview_recommendations,
    score_interview,
    structure_score,
)
from .session import (
    Transition,
    advance,
    complete,
    count_words,
    draw_questions,
    record_answer,
    reset,
    retreat,
    shuffle_questions,
    skip,
    start_interview,
)
from .transcript import format_duration, render_transcript

__all__ = [
    "InterviewPractice",
    "INTERVIEW_TITLES",
    "QUESTION_BANK",
    "mixed_question_pool",
    "clarity_score",
    "confidence_score",
    "interview_grade",
    "interview_recommendations",
    "score_interview",
    "structure_score",
    "Transition",
    "advance",
    "complete",
    "count_words",
    "draw_questions",
    "record_answer",
    "reset",
    "retreat",
    "shuffle_questions",
    "skip",
    "start_interview",
    "format_duration",
    "render_transcript",
]
