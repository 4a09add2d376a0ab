from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class AnalysisPrompt:
    system: str
    user: str


@dataclass(frozen=True)
class ProviderReply:
    status_code: int
    body_text: str = ""


@dataclass(frozen=True)
class CallOutcome:
    ok: bool
    body_text: str
    attempts_made: int
    status_code: int | None = None
    error: str | None = None

    @property
    def retryable(self) -> bool:
        return is_retryable_status(self.status_code)

    @property
    def terminal(self) -> bool:
        return not self.ok and not self.retryable


def is_retryable_status(status_code: int | None) -> bool:
    """Transport failures (no status), 429 and 5xx are worth another attempt."""
    if status_code is None:
        return True
    return status_code == 429 or 500 <= status_code <= 599


class AnalysisTransport(Protocol):
    def send(self, prompt: AnalysisPrompt) -> ProviderReply:
        """Perform one provider call; raise ProviderTransportError when unreachable."""
