from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_REWRITTEN_BULLETS = 6


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisResult(_CamelModel):
    ats_score: int = Field(ge=0, le=100)
    top_skills: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    rewritten_bullets: list[str] = Field(default_factory=list, max_length=MAX_REWRITTEN_BULLETS)
    keywords: list[str] = Field(default_factory=list)
    skills_found: list[str] = Field(default_factory=list)
    top_tokens: list[str] = Field(default_factory=list)
    degraded: bool = False
    provider_error: str | None = None
    raw: str | None = None
    diagnostic: str | None = None


class ParseResponse(_CamelModel):
    filename: str = ""
    source_type: str = "text"
    text: str = ""
    diagnostic: str | None = None
    keywords: list[str] = Field(default_factory=list)
    skills_found: list[str] = Field(default_factory=list)
    top_tokens: list[str] = Field(default_factory=list)


class AnalyzeTextRequest(_CamelModel):
    text: str = Field(min_length=1, max_length=200_000)
    ai: bool = True


class ProviderErrorResponse(_CamelModel):
    detail: str
    provider_status: int
