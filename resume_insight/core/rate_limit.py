from __future__ import annotations

from typing import Literal

from slowapi import Limiter
from slowapi.util import get_remote_address

from resume_insight.core.config import settings

RouteKind = Literal["parse", "analyze"]

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limit(kind: RouteKind = "parse"):
    """Per-client limit; analysis may call the LLM provider so it gets its own budget."""
    if not settings.rate_limit_enabled:

        def decorator(func):
            return func

        return decorator

    value = settings.analyze_rate_limit if kind == "analyze" else settings.rate_limit
    return limiter.limit(value)
