from __future__ import annotations

from resume_insight.features.keywords import KeywordProfile

from .types import AnalysisPrompt

DEFAULT_MAX_INPUT_CHARS = 6000

SYSTEM_PROMPT = (
    "You are an applicant tracking system (ATS) reviewer. "
    "Assess the resume below and return strict JSON only, no prose, no markdown. "
    "Schema: {\"atsScore\": integer 0-100, \"topSkills\": [string], \"suggestions\": [string], "
    "\"rewrittenBullets\": [string], \"keywords\": [string]}. "
    "Give at most 6 rewritten bullets, each a stronger version of a bullet in the resume. "
    "If something is missing, use an empty list."
)


def build_analysis_prompt(
    text: str,
    profile: KeywordProfile,
    max_chars: int = DEFAULT_MAX_INPUT_CHARS,
) -> AnalysisPrompt:
    resume_text = (text or "").strip()
    if len(resume_text) > max_chars:
        resume_text = resume_text[:max_chars]

    detected = ", ".join(profile.skills_found) if profile.skills_found else "none"
    user = (
        f"DETECTED SKILLS:\n{detected}\n\n"
        f"RESUME:\n{resume_text}\n\n"
        "JSON:"
    )
    return AnalysisPrompt(system=SYSTEM_PROMPT, user=user)
