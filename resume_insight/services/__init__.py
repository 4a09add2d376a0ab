from .analysis_service import analyze, build_profile, parse_with_keywords
from .normalizer import extract_json_object, heuristic_result, normalize

__all__ = [
    "analyze",
    "build_profile",
    "parse_with_keywords",
    "extract_json_object",
    "heuristic_result",
    "normalize",
]
