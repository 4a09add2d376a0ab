from .ats_score import ScoreRules, estimate_score, heuristic_suggestions, load_score_rules
from .keywords import KeywordProfile, extract_keywords, tokenize

__all__ = [
    "KeywordProfile",
    "extract_keywords",
    "tokenize",
    "ScoreRules",
    "estimate_score",
    "heuristic_suggestions",
    "load_score_rules",
]
