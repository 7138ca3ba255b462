from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CamelModel, FrozenCamelModel


class ProgressEntry(FrozenCamelModel):
    date: str | None = None
    resume_score: int = Field(default=0, ge=0, le=100)
    interview_score: int = Field(default=0, ge=0, le=100)
    overall_score: int = Field(default=0, ge=0, le=100)
    timestamp: datetime | None = None


class ProgressSeries(CamelModel):
    dates: list[str] = Field(default_factory=list)
    resume_scores: list[int] = Field(default_factory=list)
    interview_scores: list[int] = Field(default_factory=list)
    overall_readiness: list[int] = Field(default_factory=list)
