"""
Parser Models

Pydantic models shared by the document parsers and the exercise table parser.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ParsedExerciseRecord(BaseModel):
    """One exercise row recovered from an exercise table"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=3, description="Cleaned exercise name")
    video_url: Optional[str] = Field(default=None, description="YouTube URL found on the row")
    muscle_group_token: Optional[str] = Field(
        default=None,
        description="Untranslated section header active when the row was read"
    )


class FileInfo(BaseModel):
    """Information about the file being parsed"""
    filename: str
    extension: str
    size_bytes: int = 0
    content_type: Optional[str] = None

    @classmethod
    def from_filename(
        cls,
        filename: str,
        size_bytes: int = 0,
        content_type: Optional[str] = None,
    ) -> "FileInfo":
        dot = filename.rfind(".")
        extension = filename[dot:].lower() if dot > 0 else ""
        return cls(
            filename=filename,
            extension=extension,
            size_bytes=size_bytes,
            content_type=content_type,
        )


class ParseResult(BaseModel):
    """Result from a document parser"""
    success: bool = True
    text: str = ""
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    detected_format: Optional[str] = None  # 'pdf', 'text'
    page_count: int = 0
