from __future__ import annotations

import logging

import openai
from openai import OpenAI

from resume_insight.ai.types import AnalysisPrompt, ProviderReply
from resume_insight.errors import ProviderTransportError

logger = logging.getLogger(__name__)


class OpenAITransport:
    """Single chat-completion call; the retry policy lives in the analysis client."""

    def __init__(
        self,
        model: str,
        api_key: str,
        base_url: str | None = None,
        timeout_s: float = 20.0,
        temperature: float = 0.2,
        max_output_tokens: int = 900,
    ):
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY is missing")
        self._model = model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        self._client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout_s,
            max_retries=0,
        )

    def send(self, prompt: AnalysisPrompt) -> ProviderReply:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": prompt.system},
                    {"role": "user", "content": prompt.user},
                ],
                temperature=self._temperature,
                response_format={"type": "json_object"},
                max_tokens=self._max_output_tokens,
            )
        except openai.APIStatusError as exc:
            body = exc.response.text if exc.response is not None else str(exc)
            return ProviderReply(status_code=exc.status_code, body_text=body or str(exc))
        except openai.APIConnectionError as exc:
            raise ProviderTransportError(str(exc)) from exc

        content = response.choices[0].message.content if response.choices else ""
        return ProviderReply(status_code=200, body_text=content or "")
