from .models import ExtractedText, RawDocument
from .parse import detect_source_type, extract_text, parse_document

__all__ = ["ExtractedText", "RawDocument", "detect_source_type", "extract_text", "parse_document"]
