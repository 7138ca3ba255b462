"""Vocabulary keyword extraction and matching.

Matching is a deliberately loose bidirectional substring test between word
tokens and vocabulary terms, so plurals and compounds still count
("dockerized" hits "docker"). It also produces false positives such as
"java" hitting "javascript"; callers rely on this behaviour.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from .text import word_tokens

KEYWORD_VOCABULARY: tuple[str, ...] = (
    "javascript",
    "python",
    "react",
    "node",
    "angular",
    "vue",
    "sql",
    "mongodb",
    "postgresql",
    "aws",
    "azure",
    "docker",
    "kubernetes",
    "git",
    "agile",
    "scrum",
    "html",
    "css",
    "bootstrap",
    "tailwind",
    "management",
    "leadership",
    "project",
    "team",
    "communication",
    "problem solving",
    "analytical",
    "data analysis",
    "machine learning",
    "artificial intelligence",
    "backend",
    "frontend",
    "fullstack",
    "devops",
    "ci/cd",
    "testing",
    "debugging",
    "optimization",
)

DEFAULT_KEYWORD_SCORE = 75


def _overlaps(left: str, right: str) -> bool:
    return left in right or right in left


def extract_keywords(text: str, vocabulary: Iterable[str] = KEYWORD_VOCABULARY) -> list[str]:
    """Vocabulary terms hit by at least one word token, in vocabulary order."""
    tokens = word_tokens(text)
    if not tokens:
        return []
    return [term for term in vocabulary if any(_overlaps(token, term) for token in tokens)]


def match_keywords(jd_keywords: list[str], resume_keywords: list[str]) -> list[str]:
    lowered_resume = [keyword.lower() for keyword in resume_keywords]
    return [
        keyword
        for keyword in jd_keywords
        if any(_overlaps(candidate, keyword.lower()) for candidate in lowered_resume)
    ]


def keyword_score(matched: list[str], jd_keywords: list[str], default: int = DEFAULT_KEYWORD_SCORE) -> int:
    if not jd_keywords:
        return default
    return math.floor(len(matched) / len(jd_keywords) * 100)


def keyword_feedback(score: int, matched: list[str], jd_keywords: list[str], missing: list[str]) -> str:
    if score >= 80:
        return f"Excellent keyword coverage! {len(matched)}/{len(jd_keywords)} key terms found."
    if score >= 60:
        if missing:
            return f"Good keyword match. Consider adding: {', '.join(missing[:3])}"
        return "Good keyword match."
    return "Low keyword match. Focus on including more job-specific terms."
