from __future__ import annotations

from typing import Protocol

from .events import SpeechCallback, speech_error


class SpeechToTextProvider(Protocol):
    def is_supported(self) -> bool: ...

    def is_listening(self) -> bool: ...

    def start(self, on_event: SpeechCallback) -> bool:
        """Begin listening; failures are reported through ``on_event`` and a False return."""

    def stop(self) -> None:
        """Stop listening. Safe to call when already stopped."""


class UnsupportedSpeechProvider:
    """Default provider for hosts without a recogniser: text-only input."""

    def is_supported(self) -> bool:
        return False

    def is_listening(self) -> bool:
        return False

    def start(self, on_event: SpeechCallback) -> bool:
        on_event(speech_error("not-supported"))
        return False

    def stop(self) -> None:
        return None
