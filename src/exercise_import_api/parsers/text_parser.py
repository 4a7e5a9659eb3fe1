"""
Text Parser

Handles exercise lists that were already converted to plain text.
"""

import logging

from .base import BaseParser
from .models import ParseResult, FileInfo

logger = logging.getLogger(__name__)


class TextParser(BaseParser):
    """Parser for plain text files"""

    def can_parse(self, file_info: FileInfo) -> bool:
        """Check if this parser can handle the file"""
        return file_info.extension.lower() in ['.txt', '.text']

    def parse(self, content: bytes, file_info: FileInfo) -> ParseResult:
        """Decode the text file"""
        self.errors = []
        self.warnings = []

        text = self._decode_content(content)
        if not text.strip():
            self.add_warning(f"{file_info.filename} contains no text")

        return ParseResult(
            success=True,
            text=text,
            detected_format="text",
            warnings=self.warnings,
        )

    def _decode_content(self, content: bytes) -> str:
        """Decode bytes to string"""
        encodings = ['utf-8-sig', 'cp1252']

        for encoding in encodings:
            try:
                return content.decode(encoding)
            except UnicodeDecodeError:
                continue

        return content.decode('latin-1')
