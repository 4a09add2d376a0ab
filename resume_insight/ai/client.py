from __future__ import annotations

import logging
import random
import time
from typing import Callable

from resume_insight.errors import ProviderTransportError

from .config import RetryConfig
from .types import AnalysisPrompt, AnalysisTransport, CallOutcome, is_retryable_status

logger = logging.getLogger(__name__)


def backoff_delay_ms(attempt: int, config: RetryConfig, rng: random.Random | None = None) -> float:
    """Delay before the attempt after ``attempt``: base * 2**(attempt-1) plus jitter."""
    jitter = (rng or random).uniform(0, config.jitter_ms) if config.jitter_ms > 0 else 0.0
    return config.base_delay_ms * (2 ** (attempt - 1)) + jitter


def call_provider(
    prompt: AnalysisPrompt,
    config: RetryConfig,
    *,
    transport: AnalysisTransport,
    sleep: Callable[[float], None] = time.sleep,
    rng: random.Random | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> CallOutcome:
    """Call the analysis provider with bounded retries.

    2xx returns at once. 429, 5xx and transport failures are retried with
    exponential backoff plus jitter until ``max_attempts`` is reached or the
    optional deadline would be crossed. Any other status is terminal and is
    returned after a single attempt.
    """
    max_attempts = max(config.max_attempts, 1)
    started = clock()
    status_code: int | None = None
    body_text = ""
    error: str | None = None

    attempt = 1
    while True:
        try:
            reply = transport.send(prompt)
        except ProviderTransportError as exc:
            status_code, body_text, error = None, "", str(exc) or exc.__class__.__name__
            logger.warning("analysis_provider_transport_error attempt=%s: %s", attempt, error)
        except Exception as exc:  # noqa: BLE001 - provider failures must degrade, not fail the request
            status_code, body_text, error = None, "", str(exc) or exc.__class__.__name__
            logger.warning("analysis_provider_call_failed attempt=%s: %s", attempt, error, exc_info=True)
        else:
            status_code, body_text, error = reply.status_code, reply.body_text, None
            if 200 <= reply.status_code <= 299:
                logger.info("analysis_provider_ok attempt=%s status=%s", attempt, reply.status_code)
                return CallOutcome(
                    ok=True,
                    body_text=reply.body_text,
                    attempts_made=attempt,
                    status_code=reply.status_code,
                )
            if not is_retryable_status(reply.status_code):
                logger.warning("analysis_provider_terminal attempt=%s status=%s", attempt, reply.status_code)
                return CallOutcome(
                    ok=False,
                    body_text=reply.body_text,
                    attempts_made=attempt,
                    status_code=reply.status_code,
                )

        if attempt >= max_attempts:
            break

        delay_ms = backoff_delay_ms(attempt, config, rng)
        if config.deadline_s is not None and (clock() - started) + delay_ms / 1000.0 > config.deadline_s:
            logger.warning(
                "analysis_provider_deadline attempt=%s deadline_s=%s status=%s",
                attempt,
                config.deadline_s,
                status_code,
            )
            break

        logger.warning(
            "analysis_provider_retry attempt=%s status=%s delay_ms=%.0f",
            attempt,
            status_code,
            delay_ms,
        )
        sleep(delay_ms / 1000.0)
        attempt += 1

    logger.warning("analysis_provider_exhausted attempts=%s status=%s", attempt, status_code)
    return CallOutcome(
        ok=False,
        body_text=body_text,
        attempts_made=attempt,
        status_code=status_code,
        error=error,
    )
