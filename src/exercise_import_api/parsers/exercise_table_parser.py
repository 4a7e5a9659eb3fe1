"""
Exercise Table Parser

Turns the plain text of an exercise list (usually extracted from a PDF table)
into ParsedExerciseRecords. The expected layout is:

    PEITO
    EXERCÍCIO    VÍDEO
    1. Supino Reto    https://youtu.be/xyz
    2. Crucifixo      https://www.youtube.com/watch?v=abc

A line containing a configured header token opens a muscle-group section;
every following row until the next header belongs to it. Rows seen before
the first header are ignored. Malformed rows are dropped, never reported.
"""

import re
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .models import ParsedExerciseRecord

logger = logging.getLogger(__name__)

# YouTube watch and short-link URLs
VIDEO_URL_PATTERN = re.compile(
    r'https://(?:(?:www\.)?youtube\.com/watch\?v=|youtu\.be/)[A-Za-z0-9_-]+'
)

# Column titles of the source table
TABLE_HEADER_MARKERS: Tuple[str, ...] = ("EXERCÍCIO", "VÍDEO")

# Fragments that mean a URL was only partially stripped from a name
URL_FRAGMENTS: Tuple[str, ...] = ("http", "youtu")

MIN_NAME_LENGTH = 3

_TABLE_ARTIFACTS_RE = re.compile(r'[|\t]+')
_WHITESPACE_RE = re.compile(r'\s+')
_ROW_NUMBERING_RE = re.compile(r'^[\d.\-\s]+')  # "1.", "12 -", "3.1."


class LineKind(str, Enum):
    HEADER = "header"
    NOISE = "noise"
    CANDIDATE = "candidate"


@dataclass(frozen=True)
class LineClassification:
    kind: LineKind
    header_token: Optional[str] = None


@dataclass(frozen=True)
class ParserState:
    """State carried from one line to the next."""
    current_muscle_group_token: Optional[str] = None


def detect_header_token(line: str, header_tokens: Sequence[str]) -> Optional[str]:
    """
    Return the first header token contained in the line.

    Matching is case-insensitive substring search so decorated headers
    ("== PEITO ==") still match. When several tokens match, the earliest in
    `header_tokens` wins.
    """
    upper_line = line.upper()
    for token in header_tokens:
        if token and token.upper() in upper_line:
            return token
    return None


def classify_line(line: str, header_tokens: Sequence[str]) -> LineClassification:
    """Decide whether a stripped line is a header, noise, or a candidate row."""
    token = detect_header_token(line, header_tokens)
    if token is not None:
        return LineClassification(LineKind.HEADER, token)

    if not line or line.startswith(TABLE_HEADER_MARKERS):
        return LineClassification(LineKind.NOISE)

    return LineClassification(LineKind.CANDIDATE)


def clean_exercise_name(name: str) -> str:
    """
    Remove table artifacts from an exercise name.

    Pipes and tabs become spaces, whitespace runs collapse, and leading row
    numbering ("1.", "02 -") is dropped. Cleaning a cleaned name is a no-op.
    """
    name = _TABLE_ARTIFACTS_RE.sub(" ", name)
    name = _WHITESPACE_RE.sub(" ", name).strip()
    name = _ROW_NUMBERING_RE.sub("", name)
    return name.strip()


def extract_video_url(line: str) -> Tuple[str, Optional[str]]:
    """
    Split a row into (name part, video URL).

    Only the first URL counts; the name is the text before it.
    """
    match = VIDEO_URL_PATTERN.search(line)
    if not match:
        return line, None
    return line[:match.start()], match.group(0)


def parse_exercise_line(
    line: str,
    muscle_group_token: Optional[str],
) -> Optional[ParsedExerciseRecord]:
    """Parse a candidate row into a record, or None if it is not a usable exercise."""
    raw_name, video_url = extract_video_url(line)
    if video_url:
        logger.debug(f"Found URL: {video_url}")

    name = clean_exercise_name(raw_name)

    if len(name) < MIN_NAME_LENGTH:
        return None

    if any(fragment in name for fragment in URL_FRAGMENTS):
        logger.warning(f"Exercise name still contains URL fragments: {name}")
        return None

    return ParsedExerciseRecord(
        name=name,
        video_url=video_url,
        muscle_group_token=muscle_group_token,
    )


def advance(
    state: ParserState,
    line: str,
    header_tokens: Sequence[str],
) -> Tuple[ParserState, Optional[ParsedExerciseRecord]]:
    """
    Apply one line to the parser state.

    Returns the next state and the record the line produced, if any.
    """
    classification = classify_line(line, header_tokens)

    if classification.kind is LineKind.HEADER:
        logger.debug(f"Found muscle group: {classification.header_token}")
        return ParserState(current_muscle_group_token=classification.header_token), None

    if classification.kind is LineKind.NOISE:
        return state, None

    if state.current_muscle_group_token is None:
        return state, None

    record = parse_exercise_line(line, state.current_muscle_group_token)
    if record:
        logger.debug(f"Parsed exercise: {record.name} - {record.muscle_group_token}")
    return state, record


def parse_exercise_table(text: str, header_tokens: Sequence[str]) -> List[ParsedExerciseRecord]:
    """
    Parse exercise table text into records, in the order they appear.

    Args:
        text: Plain text of the document
        header_tokens: Configured muscle-group header tokens, in priority order

    Returns:
        List of ParsedExerciseRecord
    """
    state = ParserState()
    records: List[ParsedExerciseRecord] = []

    for raw_line in text.split("\n"):
        state, record = advance(state, raw_line.strip(), header_tokens)
        if record is not None:
            records.append(record)

    return records
