"""Tests for the document parsers (PDF and plain text)."""

import fitz
import pytest

from exercise_import_api.parsers import (
    FileInfo,
    FileParserFactory,
    PdfParser,
    TextParser,
)


def _make_pdf(*pages: str) -> bytes:
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return _make_pdf(
        "PEITO\n1. Supino Reto https://youtu.be/xyz\n2. Crucifixo",
        "COSTAS\n1. Remada Curvada https://youtu.be/abc",
    )


class TestFileInfo:

    def test_from_filename(self):
        info = FileInfo.from_filename("Lista-Exercicios.PDF", 1024, "application/pdf")

        assert info.extension == ".pdf"
        assert info.size_bytes == 1024

    def test_no_extension(self):
        assert FileInfo.from_filename("README").extension == ""


class TestFileParserFactory:

    def test_pdf(self):
        parser = FileParserFactory.get_parser(FileInfo.from_filename("list.pdf"))
        assert isinstance(parser, PdfParser)

    def test_pdf_by_content_type(self):
        info = FileInfo(filename="upload", extension="", content_type="application/pdf")
        assert isinstance(FileParserFactory.get_parser(info), PdfParser)

    def test_text(self):
        parser = FileParserFactory.get_parser(FileInfo.from_filename("list.txt"))
        assert isinstance(parser, TextParser)

    def test_unsupported(self):
        assert FileParserFactory.get_parser(FileInfo.from_filename("list.xlsx")) is None


class TestPdfParser:

    def test_extracts_text_of_all_pages(self, sample_pdf_bytes):
        result = PdfParser().parse(sample_pdf_bytes, FileInfo.from_filename("list.pdf"))

        assert result.success
        assert result.page_count == 2
        assert result.detected_format == "pdf"
        assert "Supino Reto https://youtu.be/xyz" in result.text
        assert "Remada Curvada" in result.text
        assert result.text.index("PEITO") < result.text.index("COSTAS")

    def test_corrupt_pdf_reports_error(self):
        parser = PdfParser()

        result = parser.parse(b"definitely not a pdf", FileInfo.from_filename("broken.pdf"))

        assert not result.success
        assert result.errors
        assert result.errors[0].startswith("Failed to read PDF")

    def test_blank_pdf_warns(self):
        result = PdfParser().parse(_make_pdf(""), FileInfo.from_filename("blank.pdf"))

        assert result.success
        assert result.warnings


class TestTextParser:

    def test_utf8(self):
        content = "PEITO\nFlexão de Braço\n".encode("utf-8")

        result = TextParser().parse(content, FileInfo.from_filename("list.txt"))

        assert result.text == "PEITO\nFlexão de Braço\n"

    def test_utf8_bom_is_stripped(self):
        content = "PEITO\n".encode("utf-8-sig")

        result = TextParser().parse(content, FileInfo.from_filename("list.txt"))

        assert result.text == "PEITO\n"

    def test_latin1_fallback(self):
        content = "BÍCEPS\n".encode("latin-1")

        result = TextParser().parse(content, FileInfo.from_filename("list.txt"))

        assert result.text == "BÍCEPS\n"
