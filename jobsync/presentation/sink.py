from __future__ import annotations

from typing import Protocol

from .effects import Effect


class PresentationSink(Protocol):
    def apply(self, effect: Effect) -> None:
        """Render one instruction. Sinks never feed data back into the core."""


class EffectRecorder:
    """Sink that keeps effects until a caller drains them, e.g. into an HTTP response."""

    def __init__(self) -> None:
        self._effects: list[Effect] = []

    def apply(self, effect: Effect) -> None:
        self._effects.append(effect)

    @property
    def effects(self) -> list[Effect]:
        return list(self._effects)

    def drain(self) -> list[Effect]:
        drained, self._effects = self._effects, []
        return drained
