import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_insight.ai.config import load_ai_config  # noqa: E402
from resume_insight.ai.factory import get_transport  # noqa: E402
from resume_insight.ai.providers.openai_provider import OpenAITransport  # noqa: E402


class AIConfigTests(unittest.TestCase):
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            cfg = load_ai_config()
        self.assertTrue(cfg.enabled)
        self.assertEqual(cfg.provider, "openai")
        self.assertEqual(cfg.model, "gpt-4o-mini")
        self.assertIsNone(cfg.api_key)
        self.assertFalse(cfg.configured)
        self.assertEqual(cfg.terminal_policy, "error")
        self.assertEqual(cfg.retry.max_attempts, 3)
        self.assertEqual(cfg.retry.base_delay_ms, 500)
        self.assertIsNone(cfg.retry.deadline_s)

    def test_environment_overrides(self):
        env = {
            "OPENAI_API_KEY": "sk-live",
            "AI_MAX_ATTEMPTS": "5",
            "AI_BASE_DELAY_MS": "250",
            "AI_JITTER_MS": "0",
            "AI_DEADLINE_S": "12.5",
            "AI_TERMINAL_ERROR_POLICY": "Degrade",
        }
        with patch.dict("os.environ", env, clear=True):
            cfg = load_ai_config()
        self.assertTrue(cfg.configured)
        self.assertEqual(cfg.retry.max_attempts, 5)
        self.assertEqual(cfg.retry.base_delay_ms, 250)
        self.assertEqual(cfg.retry.jitter_ms, 0)
        self.assertEqual(cfg.retry.deadline_s, 12.5)
        self.assertEqual(cfg.terminal_policy, "degrade")

    def test_placeholder_key_counts_as_missing(self):
        with patch.dict("os.environ", {"OPENAI_API_KEY": "your_openai_key"}, clear=True):
            self.assertFalse(load_ai_config().configured)

    def test_invalid_terminal_policy_is_rejected(self):
        with patch.dict("os.environ", {"AI_TERMINAL_ERROR_POLICY": "ignore"}, clear=True):
            with self.assertRaises(RuntimeError):
                load_ai_config()

    def test_factory_builds_openai_transport(self):
        with patch.dict("os.environ", {"OPENAI_API_KEY": "sk-test"}, clear=True):
            transport = get_transport(load_ai_config())
        self.assertIsInstance(transport, OpenAITransport)

    def test_factory_rejects_unknown_provider(self):
        with patch.dict("os.environ", {"AI_PROVIDER": "mystery"}, clear=True):
            with self.assertRaises(ValueError):
                get_transport(load_ai_config())


if __name__ == "__main__":
    unittest.main()
