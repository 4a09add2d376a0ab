from __future__ import annotations

import logging
from io import BytesIO

from docx import Document
from pypdf import PdfReader

from .models import ExtractedText, RawDocument, SourceType

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
_LABELS = {"pdf": "PDF", "docx": "DOCX", "text": "Text"}


def _parse_text(content: bytes) -> ExtractedText:
    text = content.decode("utf-8", errors="replace")
    if not text.strip():
        return ExtractedText.failure("No extractable text found in text document.", "text")
    return ExtractedText(text=text, source_type="text")


def _parse_pdf(content: bytes) -> ExtractedText:
    reader = PdfReader(BytesIO(content))
    text_parts: list[str] = []
    for page in reader.pages:
        page_text = (page.extract_text() or "").strip()
        if page_text:
            text_parts.append(page_text)
    if not text_parts:
        return ExtractedText.failure("No extractable text found in PDF.", "pdf")
    return ExtractedText(text="\n".join(text_parts), source_type="pdf")


def _parse_docx(content: bytes) -> ExtractedText:
    document = Document(BytesIO(content))
    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    if not paragraphs:
        return ExtractedText.failure("No extractable text found in DOCX.", "docx")
    return ExtractedText(text="\n".join(paragraphs), source_type="docx")


def detect_source_type(filename: str, declared_mime: str | None = None) -> SourceType:
    name = (filename or "").strip().lower()
    mime = (declared_mime or "").split(";")[0].strip().lower()
    if mime == PDF_MIME or name.endswith(".pdf"):
        return "pdf"
    if name.endswith(".docx"):
        return "docx"
    return "text"


def extract_text(document: RawDocument) -> ExtractedText:
    """Convert raw document bytes into plain text.

    Never raises: parser failures come back as an empty ``ExtractedText``
    carrying a diagnostic.
    """
    source_type = detect_source_type(document.filename, document.declared_mime)
    if not document.content:
        return ExtractedText.failure("Document is empty.", source_type)

    parsers = {"pdf": _parse_pdf, "docx": _parse_docx, "text": _parse_text}
    try:
        return parsers[source_type](document.content)
    except Exception as exc:  # noqa: BLE001 - every parser failure becomes a diagnostic
        logger.warning(
            "text_extraction_failed file=%s source_type=%s: %s",
            document.filename,
            source_type,
            exc,
        )
        return ExtractedText.failure(f"{_LABELS[source_type]} parsing failed: {exc}", source_type)


def parse_document(document: RawDocument) -> ExtractedText:
    return extract_text(document)
