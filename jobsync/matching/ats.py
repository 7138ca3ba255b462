from __future__ import annotations

import math
import re

from jobsync.schemas import ATSFactors

_PHONE_RE = re.compile(r"\d{3}[-.\s]?\d{3}[-.\s]?\d{4}")
_SECTION_MARKERS = ("experience", "education")


def detect_ats_factors(resume_text: str) -> ATSFactors:
    text = resume_text or ""
    lowered = text.lower()
    return ATSFactors(
        has_standard_sections=any(marker in lowered for marker in _SECTION_MARKERS),
        has_contact_info="@" in text or bool(_PHONE_RE.search(text)),
        # No document layout inspection is performed, so these always pass.
        standard_format=True,
        readable_font=True,
    )


def ats_score(factors: ATSFactors) -> int:
    return math.floor(factors.satisfied_count / 4 * 100)


def ats_feedback(score: int) -> str:
    if score >= 90:
        return "Perfect! Your resume is highly ATS-friendly."
    if score >= 75:
        return "Good ATS compatibility with minor areas for improvement."
    return "Consider improving document structure and adding missing standard sections."
