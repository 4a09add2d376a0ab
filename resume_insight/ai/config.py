from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

TerminalPolicy = Literal["error", "degrade"]


def _env(name: str, default: str) -> str:
    value = (os.getenv(name) or "").strip()
    return value or default


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(_env(name, str(default)))
    except ValueError:
        return default


def _env_float(name: str, default: float | None) -> float | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = 3
    base_delay_ms: int = 500
    jitter_ms: int = 250
    deadline_s: float | None = None


@dataclass(frozen=True)
class AIConfig:
    enabled: bool
    provider: str
    model: str
    api_key: str | None
    base_url: str | None
    timeout_s: float
    max_input_chars: int
    terminal_policy: TerminalPolicy
    retry: RetryConfig

    @property
    def configured(self) -> bool:
        return self.enabled and bool(self.api_key)


def load_ai_config() -> AIConfig:
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    if not api_key or _looks_like_placeholder(api_key):
        api_key = ""

    policy = _env("AI_TERMINAL_ERROR_POLICY", "error").lower()
    if policy not in {"error", "degrade"}:
        raise RuntimeError("AI_TERMINAL_ERROR_POLICY must be either 'error' or 'degrade'.")

    deadline_s = _env_float("AI_DEADLINE_S", None)
    return AIConfig(
        enabled=_env_bool("AI_ENABLED", True),
        provider=_env("AI_PROVIDER", "openai").lower(),
        model=_env("AI_MODEL", "gpt-4o-mini"),
        api_key=api_key or None,
        base_url=(os.getenv("OPENAI_BASE_URL") or "").strip() or None,
        timeout_s=_env_float("AI_TIMEOUT_S", 20.0) or 20.0,
        max_input_chars=max(_env_int("AI_MAX_INPUT_CHARS", 6000), 1),
        terminal_policy=policy,  # type: ignore[arg-type]
        retry=RetryConfig(
            max_attempts=max(_env_int("AI_MAX_ATTEMPTS", 3), 1),
            base_delay_ms=max(_env_int("AI_BASE_DELAY_MS", 500), 0),
            jitter_ms=max(_env_int("AI_JITTER_MS", 250), 0),
            deadline_s=deadline_s if deadline_s and deadline_s > 0 else None,
        ),
    )
