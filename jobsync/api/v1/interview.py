import threading
from dataclasses import dataclass

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from jobsync.api.v1.deps import get_user_store
from jobsync.core.rate_limit import rate_limit
from jobsync.interview import InterviewPractice, render_transcript
from jobsync.presentation import Effect, EffectRecorder
from jobsync.schemas import InterviewResult, InterviewSession, InterviewType, StoredInterviewResult
from jobsync.schemas.base import CamelModel
from jobsync.storage import UserDataStore

router = APIRouter()


class StartInterviewRequest(BaseModel):
    type: InterviewType


class AnswerRequest(BaseModel):
    text: str | None = Field(default=None, max_length=50000)


class InterviewStateResponse(CamelModel):
    state: str
    session: InterviewSession | None = None
    effects: list[Effect] = Field(default_factory=list)
    result: InterviewResult | None = None


class TranscriptResponse(BaseModel):
    transcript: str


@dataclass
class _PracticeSlot:
    practice: InterviewPractice
    recorder: EffectRecorder


MAX_ACTIVE_PRACTICES = 1000
_practices_lock = threading.Lock()


def _practices(request: Request) -> dict[str, _PracticeSlot]:
    practices = getattr(request.app.state, "practices", None)
    if practices is None:
        practices = {}
        request.app.state.practices = practices
    return practices


def _slot(request: Request, store: UserDataStore) -> _PracticeSlot:
    with _practices_lock:
        practices = _practices(request)
        # Re-inserting keeps the dict ordered from least to most recently used.
        slot = practices.pop(store.user_id, None)
        if slot is None:
            recorder = EffectRecorder()
            slot = _PracticeSlot(practice=InterviewPractice(recorder, store), recorder=recorder)
        practices[store.user_id] = slot
        while len(practices) > MAX_ACTIVE_PRACTICES:
            practices.pop(next(iter(practices)))
        return slot


def _evict(request: Request, user_id: str) -> None:
    with _practices_lock:
        _practices(request).pop(user_id, None)


def _respond(slot: _PracticeSlot) -> InterviewStateResponse:
    practice = slot.practice
    return InterviewStateResponse(
        state=practice.state,
        session=practice.session,
        effects=slot.recorder.drain(),
        result=practice.last_result,
    )


@router.post("/interview/start", response_model=InterviewStateResponse, response_model_by_alias=True)
@rate_limit()
def start(request: Request, payload: StartInterviewRequest, store: UserDataStore = Depends(get_user_store)):
    slot = _slot(request, store)
    slot.practice.start(payload.type)
    return _respond(slot)


@router.post("/interview/answer", response_model=InterviewStateResponse, response_model_by_alias=True)
def answer(request: Request, payload: AnswerRequest, store: UserDataStore = Depends(get_user_store)):
    slot = _slot(request, store)
    if payload.text is not None:
        slot.practice.update_draft(payload.text)
    slot.practice.record()
    return _respond(slot)


@router.post("/interview/next", response_model=InterviewStateResponse, response_model_by_alias=True)
def next_question(request: Request, payload: AnswerRequest, store: UserDataStore = Depends(get_user_store)):
    slot = _slot(request, store)
    slot.practice.advance(payload.text)
    return _respond(slot)


@router.post("/interview/previous", response_model=InterviewStateResponse, response_model_by_alias=True)
def previous_question(request: Request, payload: AnswerRequest, store: UserDataStore = Depends(get_user_store)):
    slot = _slot(request, store)
    slot.practice.retreat(payload.text)
    return _respond(slot)


@router.post("/interview/skip", response_model=InterviewStateResponse, response_model_by_alias=True)
def skip_question(request: Request, payload: AnswerRequest, store: UserDataStore = Depends(get_user_store)):
    slot = _slot(request, store)
    slot.practice.skip(payload.text)
    return _respond(slot)


@router.post("/interview/complete", response_model=InterviewStateResponse, response_model_by_alias=True)
def complete(request: Request, payload: AnswerRequest, store: UserDataStore = Depends(get_user_store)):
    slot = _slot(request, store)
    slot.practice.complete(payload.text)
    return _respond(slot)


@router.post("/interview/reset", response_model=InterviewStateResponse, response_model_by_alias=True)
def reset(request: Request, store: UserDataStore = Depends(get_user_store)):
    slot = _slot(request, store)
    slot.practice.reset()
    response = _respond(slot)
    _evict(request, store.user_id)
    return response


@router.get("/interview/state", response_model=InterviewStateResponse, response_model_by_alias=True)
def state(request: Request, store: UserDataStore = Depends(get_user_store)):
    return _respond(_slot(request, store))


@router.get("/interview/results", response_model=list[StoredInterviewResult], response_model_by_alias=True)
def results(store: UserDataStore = Depends(get_user_store)):
    return store.get_all_interview_results()


@router.get("/interview/transcript", response_model=TranscriptResponse)
def transcript(request: Request, store: UserDataStore = Depends(get_user_store)):
    result = _slot(request, store).practice.last_result
    if result is None:
        saved = store.get_all_interview_results()
        result = saved[-1] if saved else None
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No transcript available.")
    return TranscriptResponse(transcript=render_transcript(result))
