from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict

SourceType = Literal["pdf", "docx", "text"]


@dataclass(frozen=True)
class RawDocument:
    content: bytes
    filename: str
    declared_mime: str | None = None


class ExtractedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    diagnostic: str | None = None
    source_type: SourceType = "text"

    @property
    def ok(self) -> bool:
        return bool(self.text) and self.diagnostic is None

    @classmethod
    def failure(cls, diagnostic: str, source_type: SourceType) -> "ExtractedText":
        return cls(text="", diagnostic=diagnostic, source_type=source_type)
