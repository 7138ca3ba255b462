"""Interview practice state machine.

States are ``None`` (not started), an ``in_progress`` session and a
``completed`` session. Every transition is a pure function that returns the
next session plus the render effects for the presentation layer; completing
a session scores it before the transition is returned.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TypeVar

from jobsync.core.errors import ValidationError
from jobsync.presentation.effects import Effect, ShowQuestion, ShowResults, ShowSelection
from jobsync.schemas import Answer, AnswerStatus, InterviewResult, InterviewSession, InterviewType

from .questions import QUESTION_BANK, mixed_question_pool
from .scoring import score_interview

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Transition:
    session: InterviewSession | None
    effects: tuple[Effect, ...] = ()
    result: InterviewResult | None = None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _elapsed_ms(start: datetime, end: datetime) -> int:
    return max(0, int((end - start).total_seconds() * 1000))


def count_words(text: str) -> int:
    stripped = (text or "").strip()
    return len(stripped.split()) if stripped else 0


def shuffle_questions(items: list[T], rng: random.Random | None = None) -> list[T]:
    """Fisher-Yates shuffle into a new list."""
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def draw_questions(interview_type: str, rng: random.Random | None = None) -> list[str]:
    if interview_type == "mixed":
        return shuffle_questions(mixed_question_pool(), rng)
    if interview_type not in QUESTION_BANK:
        raise ValidationError(f"Unknown interview type '{interview_type}'.")
    return list(QUESTION_BANK[interview_type])


def _show_question(session: InterviewSession, answer_text: str = "") -> ShowQuestion:
    return ShowQuestion(
        interview_type=session.type,
        index=session.current_question_index,
        total=len(session.questions),
        question=session.current_question,
        answer_text=answer_text,
        can_go_back=session.current_question_index > 0,
        is_last=session.is_last_question,
    )


def start_interview(
    interview_type: InterviewType,
    *,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> Transition:
    now = now or _utc_now()
    questions = draw_questions(interview_type, rng)
    session = InterviewSession(
        type=interview_type,
        questions=questions,
        current_question_index=0,
        answers=[None] * len(questions),
        start_time=now,
        question_start_time=now,
    )
    logger.info("interview_started type=%s questions=%s", interview_type, len(questions))
    return Transition(session=session, effects=(_show_question(session),))


def record_answer(
    session: InterviewSession,
    text: str,
    status: AnswerStatus = "answered",
    *,
    now: datetime | None = None,
) -> InterviewSession:
    if session.is_completed:
        return session
    now = now or _utc_now()
    text = text or ""
    index = session.current_question_index
    answer = Answer(
        question_index=index,
        question=session.questions[index],
        text=text,
        status=status,
        response_time=_elapsed_ms(session.question_start_time, now),
        word_count=count_words(text),
        timestamp=now,
    )
    answers = list(session.answers)
    if len(answers) < len(session.questions):
        answers.extend([None] * (len(session.questions) - len(answers)))
    answers[index] = answer
    return session.model_copy(update={"answers": answers})


def _finish(session: InterviewSession, now: datetime) -> Transition:
    completed = session.model_copy(update={"status": "completed", "end_time": now})
    result = score_interview(completed, completed_at=now)
    return Transition(session=completed, effects=(ShowResults(result=result),), result=result)


def advance(
    session: InterviewSession | None,
    text: str,
    *,
    now: datetime | None = None,
    status: AnswerStatus = "answered",
) -> Transition:
    if session is None or session.is_completed:
        return Transition(session=session)
    now = now or _utc_now()
    recorded = record_answer(session, text, status, now=now)
    if recorded.is_last_question:
        return _finish(recorded, now)
    moved = recorded.model_copy(
        update={
            "current_question_index": recorded.current_question_index + 1,
            "question_start_time": now,
        }
    )
    return Transition(session=moved, effects=(_show_question(moved),))


def skip(session: InterviewSession | None, text: str, *, now: datetime | None = None) -> Transition:
    return advance(session, text, now=now, status="skipped")


def retreat(session: InterviewSession | None, text: str, *, now: datetime | None = None) -> Transition:
    if session is None or session.is_completed:
        return Transition(session=session)
    now = now or _utc_now()
    recorded = record_answer(session, text, now=now)
    if recorded.current_question_index == 0:
        return Transition(session=recorded)
    target = recorded.current_question_index - 1
    moved = recorded.model_copy(update={"current_question_index": target, "question_start_time": now})
    previous = moved.answer_at(target)
    return Transition(session=moved, effects=(_show_question(moved, previous.text if previous else ""),))


def complete(session: InterviewSession | None, text: str, *, now: datetime | None = None) -> Transition:
    if session is None or session.is_completed:
        return Transition(session=session)
    now = now or _utc_now()
    return _finish(record_answer(session, text, now=now), now)


def reset(session: InterviewSession | None = None) -> Transition:
    if session is not None:
        logger.info("interview_reset type=%s status=%s", session.type, session.status)
    return Transition(session=None, effects=(ShowSelection(),))
