from .dictation import DictationBuffer
from .events import (
    SPEECH_ERROR_MESSAGES,
    SpeechCallback,
    SpeechErrorEvent,
    SpeechEvent,
    TranscriptEvent,
    speech_error,
)
from .provider import SpeechToTextProvider, UnsupportedSpeechProvider

__all__ = [
    "DictationBuffer",
    "SPEECH_ERROR_MESSAGES",
    "SpeechCallback",
    "SpeechErrorEvent",
    "SpeechEvent",
    "TranscriptEvent",
    "speech_error",
    "SpeechToTextProvider",
    "UnsupportedSpeechProvider",
]
