from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from jobsync.core.numbers import clamp_int, round_half_up
from jobsync.core.scoring import get_scoring_value

_EXPLICIT_YEARS_RE = re.compile(
    r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s*)?(?:experience|exp)",
    re.IGNORECASE,
)
_YEAR_RANGE_RE = re.compile(
    r"(\d{4})\s*(?:-|–|to)\s*(present|current|\d{4})",
    re.IGNORECASE,
)
_ROLE_CONTEXT_RE = re.compile(
    r"(experience|worked|role|position|intern|contract|consultant|developer|engineer|manager|analyst|designer|lead|specialist)"
)


@dataclass(frozen=True)
class ExperienceAssessment:
    years: int
    required: int | None
    gap: int | None
    score: int
    feedback: str


def _stated_years(digits: str, cap: int) -> int:
    # Compare by length first; int() refuses very long digit strings.
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(cap)):
        return cap
    return min(int(digits), cap)


def _explicit_years(text: str) -> int | None:
    cap = int(get_scoring_value("resume.experience.max_stated_years", 100))
    values = [_stated_years(match.group(1), cap) for match in _EXPLICIT_YEARS_RE.finditer(text)]
    return max(values) if values else None


def _range_years(text: str, current_year: int) -> int:
    window = int(get_scoring_value("resume.experience.context_window_chars", 80))
    max_years = int(get_scoring_value("resume.experience.max_range_years", 40))
    total = 0
    for match in _YEAR_RANGE_RE.finditer(text):
        start_year = int(match.group(1))
        raw_end = match.group(2).lower()
        end_year = current_year if raw_end in {"present", "current"} else int(raw_end)
        if end_year < start_year:
            continue
        context = text[max(0, match.start() - window):match.start()].lower()
        if _ROLE_CONTEXT_RE.search(context):
            total += end_year - start_year + 1
    return clamp_int(total, 0, max_years)


def extract_experience_years(resume_text: str, *, current_year: int | None = None) -> int:
    """Years evidenced by the resume.

    Explicit "N years of experience" phrases win (largest N). Otherwise year
    ranges such as "2019 - present" are summed, but only when the 80
    characters before the range mention a role or experience keyword.
    """
    text = resume_text or ""
    explicit = _explicit_years(text)
    if explicit is not None:
        return explicit
    return _range_years(text, current_year or date.today().year)


def extract_required_years(jd_text: str) -> int | None:
    return _explicit_years(jd_text or "")


def assess_experience(years: int, required: int | None) -> ExperienceAssessment:
    if required is None:
        if years > 0:
            return ExperienceAssessment(
                years=years,
                required=None,
                gap=None,
                score=clamp_int(min(100, years * 15), 0, 100),
                feedback=(
                    "The job description does not specify years of experience. "
                    f"You mention {years} years; consider clarifying relevant projects and responsibilities."
                ),
            )
        return ExperienceAssessment(
            years=0,
            required=None,
            gap=None,
            score=35,
            feedback=(
                "The job description does not specify experience, but your resume should clearly call out "
                "relevant internships, projects, or years in similar roles."
            ),
        )

    gap = max(0, required - years)
    if gap == 0:
        score = 100
        feedback = (
            f"Great! You indicate {years} years of experience which meets the {required} year requirement."
        )
    elif gap <= 2:
        score = max(50, round_half_up(years / required * 100))
        feedback = (
            f"You list {years} years of experience. The role asks for {required} years. "
            "Highlight directly relevant work to bridge this gap."
        )
    else:
        score = round_half_up(years / required * 100 * 0.75)
        feedback = (
            f"You mention {years} years of experience, while the role requests {required}. "
            "Emphasize transferable achievements and consider adding additional experience."
        )
    return ExperienceAssessment(
        years=years,
        required=required,
        gap=gap,
        score=clamp_int(score, 0, 100),
        feedback=feedback,
    )
