from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

_DATA_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class Vocabulary:
    stop_words: frozenset[str]
    skills: frozenset[str]

    def is_stop_word(self, token: str) -> bool:
        return token in self.stop_words

    def is_skill(self, phrase: str) -> bool:
        return phrase in self.skills


def _load_terms(path: Path) -> frozenset[str]:
    with path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, list):
        raise RuntimeError(f"Invalid vocabulary file '{path}': expected a JSON list.")
    terms = (" ".join(str(item).split()).lower() for item in raw)
    return frozenset(term for term in terms if term)


def load_vocabulary(
    stop_words_path: str | Path | None = None,
    skills_path: str | Path | None = None,
) -> Vocabulary:
    stop_path = Path(stop_words_path) if stop_words_path else _DATA_DIR / "stopwords.json"
    skill_path = Path(skills_path) if skills_path else _DATA_DIR / "skills.json"
    return Vocabulary(stop_words=_load_terms(stop_path), skills=_load_terms(skill_path))
