from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Callable, Literal

from jobsync.core.errors import JobSyncError
from jobsync.presentation.sink import PresentationSink
from jobsync.schemas import InterviewResult, InterviewSession, InterviewType, ProgressEntry
from jobsync.storage import PersistenceStore

from . import session as machine

logger = logging.getLogger(__name__)

PracticeState = Literal["not_started", "in_progress", "completed"]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InterviewPractice:
    """Owns the single active interview session for one user.

    Transitions are delegated to :mod:`jobsync.interview.session`; this class
    keeps the draft answer text, forwards effects to the sink and persists the
    result once a session completes. ``reset`` discards everything unsaved.
    """

    def __init__(
        self,
        sink: PresentationSink,
        store: PersistenceStore | None = None,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._sink = sink
        self._store = store
        self._rng = rng
        self._clock = clock
        self._session: InterviewSession | None = None
        self.draft = ""
        self.last_result: InterviewResult | None = None

    @property
    def session(self) -> InterviewSession | None:
        return self._session

    @property
    def state(self) -> PracticeState:
        if self._session is None:
            return "not_started"
        return "completed" if self._session.is_completed else "in_progress"

    def update_draft(self, text: str) -> None:
        self.draft = text or ""

    def start(self, interview_type: InterviewType) -> InterviewSession:
        self.last_result = None
        self._apply(machine.start_interview(interview_type, now=self._clock(), rng=self._rng))
        return self._session

    def record(self, text: str | None = None, status: Literal["answered", "skipped"] = "answered") -> None:
        if self._session is None:
            return
        self._session = machine.record_answer(self._session, self._text(text), status, now=self._clock())

    def advance(self, text: str | None = None) -> None:
        self._apply(machine.advance(self._session, self._text(text), now=self._clock()))

    def retreat(self, text: str | None = None) -> None:
        self._apply(machine.retreat(self._session, self._text(text), now=self._clock()))

    def skip(self, text: str | None = None) -> None:
        self._apply(machine.skip(self._session, self._text(text), now=self._clock()))

    def complete(self, text: str | None = None) -> InterviewResult | None:
        self._apply(machine.complete(self._session, self._text(text), now=self._clock()))
        return self.last_result

    def reset(self) -> None:
        self._apply(machine.reset(self._session))
        self.last_result = None

    def _text(self, text: str | None) -> str:
        return self.draft if text is None else text

    def _apply(self, transition: machine.Transition) -> None:
        self._session = transition.session
        for effect in transition.effects:
            if effect.kind == "show_question":
                self.draft = effect.answer_text
            elif effect.kind == "show_selection":
                self.draft = ""
            self._sink.apply(effect)
        if transition.result is not None:
            self.last_result = transition.result
            self._persist(transition.result)

    def _persist(self, result: InterviewResult) -> None:
        if self._store is None:
            return
        try:
            self._store.save_interview_results(result)
            self._store.save_progress_entry(
                ProgressEntry(
                    resume_score=0,
                    interview_score=result.scores.overall,
                    overall_score=result.scores.overall,
                )
            )
        except JobSyncError as exc:
            logger.warning("interview_result_not_saved: %s", exc)
