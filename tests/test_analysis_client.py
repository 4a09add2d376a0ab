import random
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_insight.ai.client import backoff_delay_ms, call_provider  # noqa: E402
from resume_insight.ai.config import RetryConfig  # noqa: E402
from resume_insight.ai.types import AnalysisPrompt, ProviderReply  # noqa: E402
from resume_insight.errors import ProviderTransportError  # noqa: E402

PROMPT = AnalysisPrompt(system="Return strict JSON.", user="RESUME:\nPython developer")


class ScriptedTransport:
    """Replays replies in order; the last one repeats. Exceptions are raised."""

    def __init__(self, *replies):
        self._replies = list(replies)
        self.calls = 0

    def send(self, prompt):
        self.calls += 1
        reply = self._replies[min(self.calls, len(self._replies)) - 1]
        if isinstance(reply, Exception):
            raise reply
        return reply


class CallProviderTests(unittest.TestCase):
    def setUp(self):
        self.sleeps = []
        self.config = RetryConfig(max_attempts=3, base_delay_ms=100, jitter_ms=0)

    def _call(self, transport, config=None, **kwargs):
        return call_provider(
            PROMPT,
            config or self.config,
            transport=transport,
            sleep=self.sleeps.append,
            **kwargs,
        )

    def test_success_on_first_attempt(self):
        transport = ScriptedTransport(ProviderReply(200, '{"atsScore": 80}'))
        outcome = self._call(transport)
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.attempts_made, 1)
        self.assertEqual(outcome.body_text, '{"atsScore": 80}')
        self.assertEqual(self.sleeps, [])

    def test_always_500_exhausts_exactly_max_attempts(self):
        transport = ScriptedTransport(ProviderReply(500, "upstream error"))
        outcome = self._call(transport)
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.attempts_made, 3)
        self.assertEqual(transport.calls, 3)
        self.assertEqual(outcome.status_code, 500)
        self.assertEqual(outcome.body_text, "upstream error")
        self.assertTrue(outcome.retryable)
        self.assertFalse(outcome.terminal)

    def test_backoff_doubles_between_attempts(self):
        self._call(ScriptedTransport(ProviderReply(503, "")), RetryConfig(max_attempts=4, base_delay_ms=100, jitter_ms=0))
        self.assertEqual(self.sleeps, [0.1, 0.2, 0.4])

    def test_401_is_not_retried(self):
        transport = ScriptedTransport(ProviderReply(401, "invalid api key"))
        outcome = self._call(transport)
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.attempts_made, 1)
        self.assertEqual(transport.calls, 1)
        self.assertTrue(outcome.terminal)
        self.assertEqual(self.sleeps, [])

    def test_throttling_then_success(self):
        transport = ScriptedTransport(ProviderReply(429, "slow down"), ProviderReply(502, ""), ProviderReply(200, "{}"))
        outcome = self._call(transport)
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.attempts_made, 3)
        self.assertEqual(len(self.sleeps), 2)

    def test_transport_errors_are_retried(self):
        transport = ScriptedTransport(ProviderTransportError("connection reset"), ProviderReply(200, "{}"))
        outcome = self._call(transport)
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.attempts_made, 2)

    def test_unexpected_exceptions_degrade_to_failed_outcome(self):
        transport = ScriptedTransport(RuntimeError("boom"))
        outcome = self._call(transport)
        self.assertFalse(outcome.ok)
        self.assertIsNone(outcome.status_code)
        self.assertEqual(outcome.error, "boom")
        self.assertEqual(outcome.attempts_made, 3)
        self.assertTrue(outcome.retryable)

    def test_deadline_stops_retrying_early(self):
        transport = ScriptedTransport(ProviderReply(500, ""))
        config = RetryConfig(max_attempts=5, base_delay_ms=100, jitter_ms=0, deadline_s=0.05)
        outcome = self._call(transport, config, clock=lambda: 0.0)
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.attempts_made, 1)
        self.assertEqual(self.sleeps, [])

    def test_single_attempt_config(self):
        transport = ScriptedTransport(ProviderReply(500, ""))
        outcome = self._call(transport, RetryConfig(max_attempts=1, base_delay_ms=100, jitter_ms=0))
        self.assertEqual(outcome.attempts_made, 1)
        self.assertEqual(self.sleeps, [])


class BackoffDelayTests(unittest.TestCase):
    def test_jitter_stays_within_bounds(self):
        config = RetryConfig(max_attempts=3, base_delay_ms=200, jitter_ms=50)
        rng = random.Random(7)
        for attempt in (1, 2, 3):
            delay = backoff_delay_ms(attempt, config, rng)
            base = 200 * 2 ** (attempt - 1)
            self.assertGreaterEqual(delay, base)
            self.assertLessEqual(delay, base + 50)


if __name__ == "__main__":
    unittest.main()
