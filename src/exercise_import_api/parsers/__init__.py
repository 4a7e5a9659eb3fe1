"""Document parsers for exercise imports."""
from typing import List, Optional

from .base import BaseParser
from .models import FileInfo, ParseResult, ParsedExerciseRecord
from .pdf_parser import PdfParser
from .text_parser import TextParser
from .exercise_table_parser import (
    ParserState,
    advance,
    classify_line,
    clean_exercise_name,
    parse_exercise_line,
    parse_exercise_table,
)


class FileParserFactory:
    """Picks the document parser for a file."""

    _PARSERS = (PdfParser, TextParser)

    @classmethod
    def get_parser(cls, file_info: FileInfo) -> Optional[BaseParser]:
        for parser_class in cls._PARSERS:
            parser = parser_class()
            if parser.can_parse(file_info):
                return parser
        return None

    @classmethod
    def supported_extensions(cls) -> List[str]:
        return ['.pdf', '.txt', '.text']


__all__ = [
    "BaseParser",
    "FileInfo",
    "FileParserFactory",
    "ParseResult",
    "ParsedExerciseRecord",
    "ParserState",
    "PdfParser",
    "TextParser",
    "advance",
    "classify_line",
    "clean_exercise_name",
    "parse_exercise_line",
    "parse_exercise_table",
]
