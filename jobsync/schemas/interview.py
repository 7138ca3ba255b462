from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from .base import FrozenCamelModel

InterviewType = Literal["behavioral", "technical", "situational", "mixed"]
AnswerStatus = Literal["answered", "skipped"]
SessionStatus = Literal["in_progress", "completed"]


class Answer(FrozenCamelModel):
    question_index: int = Field(ge=0)
    question: str
    text: str = ""
    status: AnswerStatus = "answered"
    response_time: int = Field(default=0, ge=0, description="Milliseconds spent on the question.")
    word_count: int = Field(default=0, ge=0)
    timestamp: datetime


class InterviewSession(FrozenCamelModel):
    type: InterviewType
    questions: list[str]
    current_question_index: int = Field(default=0, ge=0)
    answers: list[Answer | None] = Field(default_factory=list)
    start_time: datetime
    question_start_time: datetime
    status: SessionStatus = "in_progress"
    end_time: datetime | None = None

    @property
    def current_question(self) -> str:
        return self.questions[self.current_question_index]

    @property
    def is_last_question(self) -> bool:
        return self.current_question_index >= len(self.questions) - 1

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"

    def answer_at(self, index: int) -> Answer | None:
        if 0 <= index < len(self.answers):
            return self.answers[index]
        return None


class InterviewScores(FrozenCamelModel):
    overall: int = Field(ge=0, le=100)
    clarity: int = Field(ge=0, le=100)
    structure: int = Field(ge=0, le=100)
    confidence: int = Field(ge=0, le=100)


class InterviewResult(FrozenCamelModel):
    type: InterviewType
    total_questions: int = Field(ge=0)
    answered_questions: int = Field(ge=0)
    skipped_questions: int = Field(ge=0)
    total_time: int = Field(ge=0, description="Milliseconds from start to completion.")
    average_response_time: float = Field(ge=0.0)
    scores: InterviewScores
    grade: str
    answers: list[Answer] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    completed_at: datetime


class StoredInterviewResult(InterviewResult):
    id: str
    timestamp: datetime
