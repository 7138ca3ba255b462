from __future__ import annotations

from typing import Callable, Union

from pydantic import Field

from jobsync.schemas.base import FrozenCamelModel


class TranscriptEvent(FrozenCamelModel):
    transcript: str
    is_final: bool = False
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)


class SpeechErrorEvent(FrozenCamelModel):
    error: str
    message: str


SpeechEvent = Union[TranscriptEvent, SpeechErrorEvent]
SpeechCallback = Callable[[SpeechEvent], None]

SPEECH_ERROR_MESSAGES: dict[str, str] = {
    "network": "Network error occurred. Please check your internet connection.",
    "not-allowed": "Microphone access denied. Please allow microphone access.",
    "service-not-allowed": "Speech recognition service not allowed.",
    "bad-grammar": "Speech recognition grammar error.",
    "language-not-supported": "Language not supported.",
    "no-speech": "No speech detected. Please try again.",
    "audio-capture": "Audio capture failed. Please check your microphone.",
    "aborted": "Speech recognition aborted.",
    "not-supported": "Speech recognition is not supported on this device. Please type your answer instead.",
    "start-failed": "Failed to start voice recognition. Please try again.",
}
_UNKNOWN_ERROR_MESSAGE = "An unknown error occurred with speech recognition."


def speech_error(code: str) -> SpeechErrorEvent:
    return SpeechErrorEvent(error=code, message=SPEECH_ERROR_MESSAGES.get(code, _UNKNOWN_ERROR_MESSAGE))
