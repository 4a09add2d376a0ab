from __future__ import annotations

import logging
import time
from typing import Callable

from resume_insight.ai.client import call_provider
from resume_insight.ai.config import AIConfig, load_ai_config
from resume_insight.ai.factory import get_transport
from resume_insight.ai.prompt import build_analysis_prompt
from resume_insight.ai.types import AnalysisTransport
from resume_insight.core.scoring import get_scoring_value
from resume_insight.features.ats_score import estimate_score
from resume_insight.features.keywords import KeywordProfile, extract_keywords
from resume_insight.parsing import ExtractedText, RawDocument, parse_document
from resume_insight.schemas.analysis import AnalysisResult, ParseResponse
from resume_insight.services.normalizer import heuristic_result, normalize

logger = logging.getLogger(__name__)


def build_profile(text: str) -> KeywordProfile:
    return extract_keywords(
        text,
        top_token_limit=int(get_scoring_value("keywords.top_token_limit", 12)),
        keyword_limit=int(get_scoring_value("keywords.keyword_limit", 30)),
    )


def parse_with_keywords(document: RawDocument) -> ParseResponse:
    extracted = parse_document(document)
    profile = build_profile(extracted.text)
    return ParseResponse(
        filename=document.filename,
        source_type=extracted.source_type,
        text=extracted.text,
        diagnostic=extracted.diagnostic,
        keywords=profile.keywords,
        skills_found=profile.skills_found,
        top_tokens=profile.top_tokens,
    )


def _extract(source: RawDocument | str) -> ExtractedText:
    if isinstance(source, RawDocument):
        return parse_document(source)
    text = source or ""
    if not text.strip():
        return ExtractedText.failure("No text provided.", "text")
    return ExtractedText(text=text, source_type="text")


def analyze(
    source: RawDocument | str,
    ai_mode: bool,
    *,
    ai_config: AIConfig | None = None,
    transport: AnalysisTransport | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> AnalysisResult:
    """Run the full resume analysis pipeline.

    Always returns a result unless the provider rejects the request with a
    terminal status and the terminal policy is "error".
    """
    extracted = _extract(source)
    text = extracted.text
    profile = build_profile(text)
    baseline = estimate_score(text, profile)

    if not text:
        result = heuristic_result(text, profile, baseline)
        return result.model_copy(update={"diagnostic": extracted.diagnostic or "No extractable text found."})

    if not ai_mode:
        return normalize(None, text, profile, baseline)

    cfg = ai_config or load_ai_config()
    if not cfg.enabled:
        return normalize(None, text, profile, baseline)
    if transport is None:
        if not cfg.configured:
            logger.info("analysis_ai_skipped reason=provider_not_configured")
            return heuristic_result(
                text,
                profile,
                baseline,
                degraded=True,
                provider_error="provider_not_configured",
            )
        try:
            transport = get_transport(cfg)
        except ValueError as exc:
            logger.warning("analysis_ai_skipped reason=provider_unsupported error=%s", exc)
            return heuristic_result(
                text,
                profile,
                baseline,
                degraded=True,
                provider_error="provider_not_configured",
            )

    prompt = build_analysis_prompt(text, profile, max_chars=cfg.max_input_chars)
    outcome = call_provider(prompt, cfg.retry, transport=transport, sleep=sleep)
    logger.info(
        "analysis_provider_outcome ok=%s status=%s attempts=%s",
        outcome.ok,
        outcome.status_code,
        outcome.attempts_made,
    )
    return normalize(outcome, text, profile, baseline, terminal_policy=cfg.terminal_policy)
