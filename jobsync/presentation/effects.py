from __future__ import annotations

from typing import Literal, Union

from jobsync.schemas import InterviewResult, InterviewType
from jobsync.schemas.base import FrozenCamelModel


class ShowQuestion(FrozenCamelModel):
    kind: Literal["show_question"] = "show_question"
    interview_type: InterviewType
    index: int
    total: int
    question: str
    answer_text: str = ""
    can_go_back: bool = False
    is_last: bool = False


class ShowResults(FrozenCamelModel):
    kind: Literal["show_results"] = "show_results"
    result: InterviewResult


class ShowSelection(FrozenCamelModel):
    kind: Literal["show_selection"] = "show_selection"


Effect = Union[ShowQuestion, ShowResults, ShowSelection]
