"""
Best-effort text extraction from uploaded documents.

This is a pattern-matching heuristic, not a parser. It recovers text from
uncompressed PDF content streams and uncompressed DOCX XML well enough to
prompt a language model or seed a demo deck. Known failure modes:

- PDFs with compressed (FlateDecode) streams produce no parenthesized
  literals; the printable-ASCII fallback then returns mostly noise.
- Real DOCX files are zip archives, so the <w:t> scan usually finds nothing.

Callers detect poor results by length and fall back to the user's prompt.
"""
import logging
import re
from enum import Enum
from pathlib import PurePath

logger = logging.getLogger(__name__)

# Parenthesized string literals as written by the Tj/TJ text operators
PDF_LITERAL_PATTERN = re.compile(r"\(([^)]+)\)")
# Anything that is not printable ASCII or a newline
NON_PRINTABLE_PATTERN = re.compile(r"[^\x20-\x7E\n]")
WHITESPACE_PATTERN = re.compile(r"\s+")
DOCX_TEXT_RUN_PATTERN = re.compile(r"<w:t[^>]*>([^<]+)</w:t>")

# Below this the literal scan is assumed to have missed the content
PDF_MIN_LITERAL_CHARS = 100


class DocumentKind(str, Enum):
    PDF = "pdf"
    DOCX_OR_DOC = "docx"
    NONE = "none"


_EXTENSION_KINDS = {
    ".pdf": DocumentKind.PDF,
    ".docx": DocumentKind.DOCX_OR_DOC,
    ".doc": DocumentKind.DOCX_OR_DOC,
}


def document_kind_for(filename: str) -> DocumentKind:
    """Map a file name to the extraction strategy for its extension."""
    return _EXTENSION_KINDS.get(PurePath(filename or "").suffix.lower(), DocumentKind.NONE)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _collapse_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def extract_pdf_text(data: bytes) -> str:
    """Join parenthesized literals, or fall back to the printable ASCII of the file."""
    text = _decode(data)
    extracted = " ".join(PDF_LITERAL_PATTERN.findall(text))

    if len(extracted) < PDF_MIN_LITERAL_CHARS:
        return _collapse_whitespace(NON_PRINTABLE_PATTERN.sub(" ", text))
    return _collapse_whitespace(extracted)


def extract_docx_text(data: bytes) -> str:
    """Join the <w:t> text runs found in the raw bytes."""
    return " ".join(DOCX_TEXT_RUN_PATTERN.findall(_decode(data)))


def extract_text(data: bytes, kind: DocumentKind) -> str:
    """
    Extract plain text from a document.

    Args:
        data: Raw file contents
        kind: Declared document type

    Returns:
        Extracted text, possibly empty. Never raises and never truncates;
        the caller applies the length limit.
    """
    if not data or kind is DocumentKind.NONE:
        return ""

    try:
        if kind is DocumentKind.PDF:
            return extract_pdf_text(data)
        if kind is DocumentKind.DOCX_OR_DOC:
            return extract_docx_text(data)
    except Exception as e:
        logger.warning(f"Text extraction failed for {kind.value} document: {e}")
    return ""
