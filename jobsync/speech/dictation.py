from __future__ import annotations

import logging
from typing import Callable

from .events import SpeechErrorEvent, SpeechEvent, TranscriptEvent
from .provider import SpeechToTextProvider

logger = logging.getLogger(__name__)


class DictationBuffer:
    """Turns provider events into answer text.

    Interim transcripts only update ``text``. The first final transcript is
    committed through ``on_commit`` and stops the provider.
    """

    def __init__(
        self,
        provider: SpeechToTextProvider,
        on_commit: Callable[[str], None],
        on_error: Callable[[SpeechErrorEvent], None] | None = None,
    ) -> None:
        self._provider = provider
        self._on_commit = on_commit
        self._on_error = on_error
        self.text = ""
        self.last_error: SpeechErrorEvent | None = None

    @property
    def listening(self) -> bool:
        return self._provider.is_listening()

    def start(self) -> bool:
        if self._provider.is_listening():
            self._provider.stop()
        self.text = ""
        self.last_error = None
        return self._provider.start(self._handle)

    def stop(self) -> None:
        self._provider.stop()

    def toggle(self) -> bool:
        if self._provider.is_listening():
            self.stop()
            return False
        return self.start()

    def _handle(self, event: SpeechEvent) -> None:
        if isinstance(event, SpeechErrorEvent):
            logger.warning("speech_error code=%s", event.error)
            self.last_error = event
            self._provider.stop()
            if self._on_error is not None:
                self._on_error(event)
            return
        if not isinstance(event, TranscriptEvent):
            return
        if event.transcript:
            self.text = event.transcript
        if event.is_final:
            self._provider.stop()
            self._on_commit(self.text)
