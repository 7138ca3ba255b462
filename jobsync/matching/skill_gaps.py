from __future__ import annotations

from jobsync.schemas import SKILL_LEVEL_REQUIRED, SkillGap

from .text import collapse_whitespace, normalize_keyword, title_case_words


def analyze_skill_gaps(jd_keywords: list[str], matched_keywords: list[str]) -> list[SkillGap]:
    unique_keywords: list[str] = []
    for keyword in jd_keywords:
        trimmed = (keyword or "").strip()
        if trimmed and trimmed not in unique_keywords:
            unique_keywords.append(trimmed)
    matched = {normalize_keyword(keyword) for keyword in matched_keywords}

    gaps = []
    for keyword in unique_keywords:
        present = normalize_keyword(keyword) in matched
        current = SKILL_LEVEL_REQUIRED if present else 0
        gaps.append(
            SkillGap(
                name=title_case_words(collapse_whitespace(keyword)),
                current=current,
                required=SKILL_LEVEL_REQUIRED,
                gap=SKILL_LEVEL_REQUIRED - current,
            )
        )
    # sorted() is stable, so equal gaps keep extraction order.
    return sorted(gaps, key=lambda item: item.gap, reverse=True)
