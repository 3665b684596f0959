"""
Unit tests for the document text extractor.
"""
import pytest

from slidecraft.services.extraction import DocumentKind, document_kind_for, extract_text


class TestDocumentKind:
    """Tests for extension-based kind detection."""

    @pytest.mark.parametrize("filename,kind", [
        ("report.pdf", DocumentKind.PDF),
        ("REPORT.PDF", DocumentKind.PDF),
        ("notes.docx", DocumentKind.DOCX_OR_DOC),
        ("legacy.doc", DocumentKind.DOCX_OR_DOC),
        ("slides.pptx", DocumentKind.NONE),
        ("README", DocumentKind.NONE),
        ("", DocumentKind.NONE),
    ])
    def test_kind_from_filename(self, filename, kind):
        assert document_kind_for(filename) is kind


class TestPdfExtraction:
    """Tests for the PDF literal-string heuristic."""

    def test_returns_parenthesized_text(self):
        sentence = "Digital marketing strategies help startups reach customers early. "
        data = f"BT /F1 12 Tf ({sentence}) Tj ({sentence}) Tj ET".encode()

        text = extract_text(data, DocumentKind.PDF)

        assert text == f"{sentence.strip()} {sentence.strip()}"

    def test_collapses_whitespace_in_literals(self):
        chunk = "word   " * 20
        data = f"({chunk})\n(  tail  )".encode()

        text = extract_text(data, DocumentKind.PDF)

        assert "  " not in text
        assert text.startswith("word word")
        assert text.endswith("tail")

    def test_falls_back_to_printable_ascii(self):
        data = b"%PDF-1.4\n\x00\x01binary stream\xff\xfe text"

        text = extract_text(data, DocumentKind.PDF)

        assert text == "%PDF-1.4 binary stream text"

    def test_short_literals_use_fallback(self):
        data = b"stream (Hi) Tj endstream"

        text = extract_text(data, DocumentKind.PDF)

        assert text == "stream (Hi) Tj endstream"

    def test_empty_bytes(self):
        assert extract_text(b"", DocumentKind.PDF) == ""

    def test_does_not_truncate(self):
        data = ("(" + "x" * 20000 + ")").encode()

        assert len(extract_text(data, DocumentKind.PDF)) == 20000


class TestDocxExtraction:
    """Tests for the DOCX text-run heuristic."""

    def test_joins_text_runs(self):
        data = (
            b'<w:p><w:r><w:t>Hello</w:t></w:r>'
            b'<w:r><w:t xml:space="preserve">world</w:t></w:r></w:p>'
        )

        assert extract_text(data, DocumentKind.DOCX_OR_DOC) == "Hello world"

    def test_compressed_archive_yields_nothing(self):
        data = b"PK\x03\x04\x14\x00\x06\x00\x08\x00\x00\x00!\x00\xdf\xa4\xd2lZ\x01"

        assert extract_text(data, DocumentKind.DOCX_OR_DOC) == ""

    def test_invalid_utf8_does_not_raise(self):
        data = b"\xff\xfe<w:t>caf\xe9</w:t>"

        assert extract_text(data, DocumentKind.DOCX_OR_DOC) == "caf\ufffd"


class TestNoDocument:
    """Tests for the NONE kind."""

    def test_returns_empty_string(self):
        assert extract_text(b"(some text in parentheses)", DocumentKind.NONE) == ""
