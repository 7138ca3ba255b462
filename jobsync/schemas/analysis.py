from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CamelModel, FrozenCamelModel

SKILL_LEVEL_REQUIRED = 80


class ATSFactors(FrozenCamelModel):
    """Boolean ATS checks; every satisfied factor is worth 25 points."""

    has_standard_sections: bool
    has_contact_info: bool
    standard_format: bool = True
    readable_font: bool = True

    @property
    def satisfied_count(self) -> int:
        return sum(
            1
            for flag in (
                self.has_standard_sections,
                self.has_contact_info,
                self.standard_format,
                self.readable_font,
            )
            if flag
        )


class SkillGap(FrozenCamelModel):
    name: str
    current: int = Field(ge=0, le=100)
    required: int = Field(default=SKILL_LEVEL_REQUIRED, ge=0, le=100)
    gap: int = Field(ge=0, le=100)


class AnalysisResult(FrozenCamelModel):
    overall_score: int = Field(ge=0, le=100)
    ats_score: int = Field(ge=0, le=100)
    keyword_score: int = Field(ge=0, le=100)
    experience_score: int = Field(ge=0, le=100)
    ats_feedback: str
    keyword_feedback: str
    experience_feedback: str
    recommendations: list[str] = Field(default_factory=list)
    skill_gaps: list[SkillGap] = Field(default_factory=list)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    experience_years: int = 0
    required_years: int | None = None


class StoredAnalysis(AnalysisResult):
    id: str
    timestamp: datetime
    file_name: str | None = None
    jd_file_name: str | None = None


class RoadmapMilestone(CamelModel):
    week: int
    target: str
    description: str


class RoadmapItem(CamelModel):
    skill: str
    gap: int
    priority: str
    timeframe: str
    resources: list[str] = Field(default_factory=list)
    milestones: list[RoadmapMilestone] = Field(default_factory=list)
    order: int
