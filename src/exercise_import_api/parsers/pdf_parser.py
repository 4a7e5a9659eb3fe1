"""
PDF Parser

Extracts the text layer of a PDF with PyMuPDF. Page texts are joined with
newlines; no layout analysis is attempted.
"""

import logging
from typing import List

import fitz  # PyMuPDF

from .base import BaseParser
from .models import ParseResult, FileInfo

logger = logging.getLogger(__name__)


class PdfParser(BaseParser):
    """Parser for PDF documents"""

    def can_parse(self, file_info: FileInfo) -> bool:
        """Check if this parser can handle the file"""
        if file_info.extension.lower() == '.pdf':
            return True
        return (file_info.content_type or '').lower() == 'application/pdf'

    def parse(self, content: bytes, file_info: FileInfo) -> ParseResult:
        """Extract text from every page of the PDF"""
        self.errors = []
        self.warnings = []

        logger.info(f"Parsing exercises from PDF: {file_info.filename}")

        try:
            with fitz.open(stream=content, filetype="pdf") as doc:
                parts: List[str] = [page.get_text("text") for page in doc]
                page_count = doc.page_count
        except Exception as e:
            logger.exception(f"Failed to read PDF {file_info.filename}: {e}")
            self.errors.append(f"Failed to read PDF: {e}")
            return ParseResult(
                success=False,
                errors=self.errors,
                detected_format="pdf",
            )

        text = "\n".join(parts)
        if not text.strip():
            self.add_warning(f"{file_info.filename} has no extractable text (scanned PDF?)")

        return ParseResult(
            success=True,
            text=text,
            detected_format="pdf",
            page_count=page_count,
            warnings=self.warnings,
        )
