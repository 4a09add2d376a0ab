from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field

from resume_insight.vocabulary import Vocabulary, get_default_vocabulary

DEFAULT_TOP_TOKEN_LIMIT = 12
DEFAULT_KEYWORD_LIMIT = 30
MAX_PHRASE_WORDS = 3

_DASH_RE = re.compile("[\u2010-\u2015\u2212\ufe58\ufe63\uff0d]")
# Keep word chars, hyphens and whitespace; keep . + # only when glued to a word (node.js, c++, c#).
_STRIP_RE = re.compile(r"(?P<keep>(?<=\w)[.+#]+)|[^\w\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_NUMERIC_RE = re.compile(r"[\d.,+]+")


@dataclass(slots=True)
class KeywordProfile:
    keywords: list[str] = field(default_factory=list)
    skills_found: list[str] = field(default_factory=list)
    top_tokens: list[str] = field(default_factory=list)


def _strip_match(match: re.Match[str]) -> str:
    return match.group("keep") or " "


def tokenize(text: str) -> list[str]:
    clean = _DASH_RE.sub("-", text or "")
    clean = _STRIP_RE.sub(_strip_match, clean).lower()
    tokens: list[str] = []
    for raw in _WHITESPACE_RE.split(clean):
        token = raw.lstrip("-").rstrip(".-")
        if token:
            tokens.append(token)
    return tokens


def _token_frequencies(tokens: list[str], vocabulary: Vocabulary) -> Counter[str]:
    counts: Counter[str] = Counter()
    for token in tokens:
        if len(token) < 2 or _NUMERIC_RE.fullmatch(token) or vocabulary.is_stop_word(token):
            continue
        counts[token] += 1
    return counts


def _skill_matches(tokens: list[str], vocabulary: Vocabulary) -> Counter[str]:
    matches: Counter[str] = Counter()
    for start in range(len(tokens)):
        for size in range(1, MAX_PHRASE_WORDS + 1):
            window = tokens[start : start + size]
            if len(window) < size:
                break
            phrase = " ".join(window)
            if len(phrase) >= 2 and vocabulary.is_skill(phrase):
                matches[phrase] += 1
    return matches


def _dedupe(items: list[str], limit: int) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        output.append(item)
        if len(output) >= limit:
            break
    return output


def extract_keywords(
    text: str,
    *,
    vocabulary: Vocabulary | None = None,
    top_token_limit: int = DEFAULT_TOP_TOKEN_LIMIT,
    keyword_limit: int = DEFAULT_KEYWORD_LIMIT,
) -> KeywordProfile:
    """Build the deterministic keyword profile of a resume text.

    Skills are exact 1-3 word phrase matches against the vocabulary, ranked by
    count (ties keep first-seen order). Top tokens are the most frequent
    remaining words that are not part of any matched skill phrase.
    """
    vocab = vocabulary or get_default_vocabulary()
    tokens = tokenize(text)
    if not tokens:
        return KeywordProfile()

    frequencies = _token_frequencies(tokens, vocab)
    skill_counts = _skill_matches(tokens, vocab)

    # Counter keeps insertion order and sorted() is stable.
    skills_found = [skill for skill, _ in sorted(skill_counts.items(), key=lambda item: -item[1])]

    skill_words = {word for skill in skills_found for word in skill.split(" ")}
    candidates = [
        (token, count)
        for token, count in frequencies.items()
        if len(token) > 2 and token not in skill_words
    ]
    top_tokens = [token for token, _ in sorted(candidates, key=lambda item: -item[1])][: max(top_token_limit, 0)]

    keywords = _dedupe(skills_found + top_tokens, max(keyword_limit, 0))
    return KeywordProfile(keywords=keywords, skills_found=skills_found, top_tokens=top_tokens)
