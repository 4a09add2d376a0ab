from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from resume_insight.core.scoring import get_scoring_value

from .keywords import KeywordProfile

_METRIC_RE = re.compile(r"\d+(?:[.,]\d+)?\s*(?:%|percent|x\b|k\b|m\b)|[$€£]\s?\d")


@dataclass(frozen=True)
class ScoreRules:
    base: int = 40
    min_score: int = 30
    max_score: int = 95
    word_bonuses: tuple[tuple[int, int], ...] = ((150, 10), (300, 10))
    keyword_bonuses: tuple[tuple[int, int], ...] = ((5, 10), (10, 10), (15, 10))


def _bonus_steps(raw: Any, fallback: tuple[tuple[int, int], ...]) -> tuple[tuple[int, int], ...]:
    if not isinstance(raw, list):
        return fallback
    steps: list[tuple[int, int]] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        try:
            steps.append((int(item["threshold"]), int(item["bonus"])))
        except (KeyError, TypeError, ValueError):
            continue
    return tuple(steps) if steps else fallback


@lru_cache(maxsize=1)
def load_score_rules() -> ScoreRules:
    defaults = ScoreRules()
    return ScoreRules(
        base=int(get_scoring_value("ats_heuristic.base", defaults.base)),
        min_score=int(get_scoring_value("ats_heuristic.min_score", defaults.min_score)),
        max_score=int(get_scoring_value("ats_heuristic.max_score", defaults.max_score)),
        word_bonuses=_bonus_steps(get_scoring_value("ats_heuristic.word_count"), defaults.word_bonuses),
        keyword_bonuses=_bonus_steps(get_scoring_value("ats_heuristic.keyword_count"), defaults.keyword_bonuses),
    )


def word_count(text: str) -> int:
    return len((text or "").split())


def estimate_score(text: str, profile: KeywordProfile, rules: ScoreRules | None = None) -> int:
    rules = rules or load_score_rules()
    words = word_count(text)
    keyword_total = len(profile.keywords)

    score = rules.base
    score += sum(bonus for threshold, bonus in rules.word_bonuses if words > threshold)
    score += sum(bonus for threshold, bonus in rules.keyword_bonuses if keyword_total > threshold)
    return max(rules.min_score, min(rules.max_score, score))


def heuristic_suggestions(text: str, profile: KeywordProfile) -> list[str]:
    min_words = int(get_scoring_value("suggestions.min_words", 150))
    min_skills = int(get_scoring_value("suggestions.min_skills", 5))

    suggestions: list[str] = []
    if not (text or "").strip():
        return ["Upload a text-based PDF, DOCX or TXT resume so it can be read by ATS parsers."]
    if word_count(text) < min_words:
        suggestions.append("Expand your experience section; resumes under 150 words rarely pass ATS screening.")
    if len(profile.skills_found) < min_skills:
        suggestions.append("List more concrete technical and domain skills using their standard names.")
    if not _METRIC_RE.search(text):
        suggestions.append("Quantify achievements with numbers, percentages or amounts.")
    if profile.skills_found:
        suggestions.append(
            "Mirror the wording of the job posting for skills you already have, e.g. "
            + ", ".join(profile.skills_found[:3])
            + "."
        )
    return suggestions
