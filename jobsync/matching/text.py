from __future__ import annotations

import re

_WORD_RE = re.compile(r"\b\w+\b")
_WHITESPACE_RE = re.compile(r"\s+")


def word_tokens(text: str) -> list[str]:
    return _WORD_RE.findall((text or "").lower())


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def normalize_keyword(keyword: str) -> str:
    return collapse_whitespace(keyword).lower()


def title_case_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] if word else word for word in text.split(" "))
