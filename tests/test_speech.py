import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jobsync.speech import (  # noqa: E402
    DictationBuffer,
    SpeechErrorEvent,
    TranscriptEvent,
    UnsupportedSpeechProvider,
    speech_error,
)


class ScriptedProvider:
    """Replays queued events when started."""

    def __init__(self, events):
        self.events = list(events)
        self.listening = False
        self.stop_calls = 0

    def is_supported(self):
        return True

    def is_listening(self):
        return self.listening

    def start(self, on_event):
        self.listening = True
        for event in self.events:
            if not self.listening:
                break
            on_event(event)
        return True

    def stop(self):
        self.stop_calls += 1
        self.listening = False


class UnsupportedProviderTests(unittest.TestCase):
    def test_start_reports_not_supported(self):
        provider = UnsupportedSpeechProvider()
        events = []
        self.assertFalse(provider.is_supported())
        self.assertFalse(provider.start(events.append))
        self.assertEqual(len(events), 1)
        self.assertEqual(events[0].error, "not-supported")
        self.assertFalse(provider.is_listening())
        provider.stop()
        provider.stop()

    def test_unknown_error_code_gets_generic_message(self):
        event = speech_error("mystery")
        self.assertEqual(event.error, "mystery")
        self.assertIn("unknown error", event.message)
        self.assertTrue(speech_error("no-speech").message.startswith("No speech detected"))


class DictationBufferTests(unittest.TestCase):
    def test_final_transcript_commits_and_stops(self):
        provider = ScriptedProvider(
            [
                TranscriptEvent(transcript="I led", is_final=False),
                TranscriptEvent(transcript="I led the migration", is_final=True, confidence=0.9),
                TranscriptEvent(transcript="ignored", is_final=True),
            ]
        )
        committed = []
        buffer = DictationBuffer(provider, committed.append)
        self.assertTrue(buffer.start())
        self.assertEqual(committed, ["I led the migration"])
        self.assertEqual(buffer.text, "I led the migration")
        self.assertFalse(buffer.listening)

    def test_error_is_surfaced_without_commit(self):
        provider = ScriptedProvider([speech_error("not-allowed")])
        committed, errors = [], []
        buffer = DictationBuffer(provider, committed.append, errors.append)
        buffer.start()
        self.assertEqual(committed, [])
        self.assertIsInstance(buffer.last_error, SpeechErrorEvent)
        self.assertEqual(errors[0].error, "not-allowed")
        self.assertFalse(buffer.listening)

    def test_toggle_and_stop_are_idempotent(self):
        provider = ScriptedProvider([])
        buffer = DictationBuffer(provider, lambda text: None)
        self.assertTrue(buffer.toggle())
        self.assertTrue(buffer.listening)
        self.assertFalse(buffer.toggle())
        self.assertFalse(buffer.listening)
        buffer.stop()
        buffer.stop()
        self.assertFalse(buffer.listening)

    def test_unsupported_provider_leaves_buffer_idle(self):
        errors = []
        buffer = DictationBuffer(UnsupportedSpeechProvider(), lambda text: None, errors.append)
        self.assertFalse(buffer.start())
        self.assertEqual(errors[0].error, "not-supported")
        self.assertEqual(buffer.last_error.error, "not-supported")


if __name__ == "__main__":
    unittest.main()
