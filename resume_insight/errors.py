from __future__ import annotations


class ProviderTransportError(RuntimeError):
    """The provider could not be reached (connection failure, timeout)."""


class TerminalProviderError(RuntimeError):
    def __init__(self, status_code: int, body_text: str = ""):
        super().__init__(f"Analysis provider rejected the request with status {status_code}.")
        self.status_code = status_code
        self.body_text = body_text
