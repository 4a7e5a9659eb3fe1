"""
Base Parser

Abstract base class for document parsers. A document parser only turns file
bytes into plain text; reading exercises out of that text is the job of
exercise_table_parser.
"""

import logging
from abc import ABC, abstractmethod
from typing import List
from .models import ParseResult, FileInfo

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for document parsers"""

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    @abstractmethod
    def parse(self, content: bytes, file_info: FileInfo) -> ParseResult:
        """
        Extract the plain text of a document.

        Args:
            content: Raw file bytes
            file_info: Information about the file

        Returns:
            ParseResult with the extracted text
        """
        pass

    @abstractmethod
    def can_parse(self, file_info: FileInfo) -> bool:
        """
        Check if this parser can handle the given file.

        Args:
            file_info: Information about the file

        Returns:
            True if this parser can handle the file
        """
        pass

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)
        logger.warning(f"Parser warning: {warning}")
