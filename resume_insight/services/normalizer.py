from __future__ import annotations

import json
import logging
import math
from typing import Any

from resume_insight.ai.config import TerminalPolicy
from resume_insight.ai.types import CallOutcome
from resume_insight.errors import TerminalProviderError
from resume_insight.features.ats_score import heuristic_suggestions
from resume_insight.features.keywords import DEFAULT_KEYWORD_LIMIT, KeywordProfile
from resume_insight.schemas.analysis import MAX_REWRITTEN_BULLETS, AnalysisResult

logger = logging.getLogger(__name__)

TOP_SKILLS_LIMIT = 10


def heuristic_result(
    text: str,
    profile: KeywordProfile,
    baseline_score: int,
    *,
    degraded: bool = False,
    provider_error: str | None = None,
    raw: str | None = None,
) -> AnalysisResult:
    return AnalysisResult(
        ats_score=clamp_score(baseline_score, baseline_score),
        top_skills=profile.skills_found[:TOP_SKILLS_LIMIT],
        suggestions=heuristic_suggestions(text, profile),
        rewritten_bullets=[],
        keywords=list(profile.keywords),
        skills_found=list(profile.skills_found),
        top_tokens=list(profile.top_tokens),
        degraded=degraded,
        provider_error=provider_error,
        raw=raw,
    )


def extract_json_object(body: str) -> dict[str, Any] | None:
    """Parse a JSON object from provider text, falling back to the outermost {...} span."""
    text = (body or "").strip()
    if not text:
        return None
    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError):
        parsed = None
    if isinstance(parsed, dict):
        return parsed

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        parsed = json.loads(text[start : end + 1])
    except (ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def clamp_score(value: Any, baseline_score: int) -> int:
    if isinstance(value, bool) or value is None:
        return baseline_score
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return baseline_score
    if not isinstance(value, (int, float)):
        return baseline_score
    try:
        number = float(value)
    except OverflowError:
        return baseline_score
    if not math.isfinite(number):
        return baseline_score
    number = min(100.0, max(0.0, number))
    return int(math.floor(number + 0.5))


def _string_list(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _dedupe(items: list[str], limit: int) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for item in items:
        key = item.lower()
        if key in seen:
            continue
        seen.add(key)
        output.append(item)
    return output[:limit]


def _provider_error_label(outcome: CallOutcome) -> str:
    if outcome.status_code is None:
        return "transport_error"
    return f"provider_status_{outcome.status_code}"


def normalize(
    outcome: CallOutcome | None,
    text: str,
    profile: KeywordProfile,
    baseline_score: int,
    *,
    terminal_policy: TerminalPolicy = "error",
) -> AnalysisResult:
    """Turn a provider outcome into a well-formed AnalysisResult.

    Terminal provider errors raise TerminalProviderError under the "error"
    policy; every other failure yields a degraded heuristic-only result.
    """
    if outcome is None:
        return heuristic_result(text, profile, baseline_score)

    if not outcome.ok:
        if outcome.terminal and terminal_policy == "error":
            raise TerminalProviderError(outcome.status_code or 0, outcome.body_text)
        return heuristic_result(
            text,
            profile,
            baseline_score,
            degraded=True,
            provider_error=_provider_error_label(outcome),
        )

    payload = extract_json_object(outcome.body_text)
    if payload is None:
        logger.warning("analysis_response_malformed body_len=%s", len(outcome.body_text or ""))
        return heuristic_result(
            text,
            profile,
            baseline_score,
            degraded=True,
            provider_error="malformed_response",
            raw=outcome.body_text,
        )

    keywords = _string_list(payload.get("keywords"))
    skills_found = _string_list(payload.get("skillsFound"))
    top_tokens = _string_list(payload.get("topTokens"))
    top_skills = _string_list(payload.get("topSkills"))
    if skills_found is None:
        skills_found = list(profile.skills_found)
    if top_skills is None:
        top_skills = skills_found[:TOP_SKILLS_LIMIT]

    return AnalysisResult(
        ats_score=clamp_score(payload.get("atsScore"), baseline_score),
        top_skills=top_skills,
        suggestions=_string_list(payload.get("suggestions")) or [],
        rewritten_bullets=(_string_list(payload.get("rewrittenBullets")) or [])[:MAX_REWRITTEN_BULLETS],
        keywords=_dedupe(keywords if keywords is not None else list(profile.keywords), DEFAULT_KEYWORD_LIMIT),
        skills_found=skills_found,
        top_tokens=top_tokens if top_tokens is not None else list(profile.top_tokens),
    )
