"""Best-effort document text extraction."""

from .service import DocumentKind, document_kind_for, extract_text

__all__ = [
    "DocumentKind",
    "document_kind_for",
    "extract_text",
]
