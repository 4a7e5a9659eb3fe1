"""
Exercise Import Service

Imports exercise lists (PDF tables or their plain text) into the exercise
catalog:
1. Extract - Turn the uploaded document into plain text
2. Parse - Read muscle-group sections and exercise rows from the text
3. Upsert - Create or update one catalog entry per parsed row

A document with no recognizable exercises is rejected as a whole. Once
parsing succeeds, every row is imported independently: a row that fails is
reported in the ImportResult and the rest of the batch carries on.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from exercise_import_api.models import Exercise, ImportResult, MuscleGroup
from exercise_import_api.parsers import FileInfo, FileParserFactory, ParsedExerciseRecord
from exercise_import_api.parsers.exercise_table_parser import parse_exercise_table
from exercise_import_api.services.exercise_catalog import ExerciseCatalog
from exercise_import_api.services.muscle_group_dictionary import MuscleGroupDictionary

logger = logging.getLogger(__name__)


class ExerciseImportError(ValueError):
    """Base class for errors that reject a whole import."""


class NoExercisesFoundError(ExerciseImportError):
    """Raised when a document yields no exercise rows."""


class UnsupportedDocumentError(ExerciseImportError):
    """Raised when no parser accepts the uploaded file."""


class DocumentExtractionError(RuntimeError):
    """Raised when the text of a document cannot be extracted."""


@dataclass(frozen=True)
class RecordOutcome:
    """Outcome of importing a single parsed record."""
    name: str
    succeeded: bool
    error: Optional[str] = None


def _describe_error(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


def import_single_record(
    record: ParsedExerciseRecord,
    dictionary: MuscleGroupDictionary,
    catalog: ExerciseCatalog,
) -> RecordOutcome:
    """
    Upsert one parsed record into the catalog.

    The exercise is matched by exact name. A video URL on the record
    replaces the stored one; muscles of the translated group are merged
    into the existing associations, never removed. The entry stays locked
    from lookup to save, so concurrent imports of the same name cannot
    drop each other's muscles.
    """
    try:
        muscle_group = _translate_muscle_group(record, dictionary)
        muscles = catalog.find_muscles_by_group(muscle_group) if muscle_group is not None else []

        with catalog.lock_for(record.name):
            exercise = catalog.find_by_name(record.name)
            is_new = exercise is None
            if exercise is None:
                exercise = Exercise(name=record.name, muscles=[])

            if record.video_url:
                exercise.video_url = record.video_url

            if muscles:
                if not exercise.muscles:
                    exercise.muscles = list(muscles)
                else:
                    existing_ids = {m.id for m in exercise.muscles}
                    exercise.muscles.extend(m for m in muscles if m.id not in existing_ids)

            catalog.save(exercise)

        if is_new:
            logger.debug(f"Created new exercise: {exercise.name}")
        else:
            logger.debug(f"Updated existing exercise: {exercise.name}")
        return RecordOutcome(name=record.name, succeeded=True)

    except Exception as e:
        logger.warning(f"Failed to import exercise: {record.name} - {e}")
        return RecordOutcome(name=record.name, succeeded=False, error=_describe_error(e))


def _translate_muscle_group(
    record: ParsedExerciseRecord,
    dictionary: MuscleGroupDictionary,
) -> Optional[MuscleGroup]:
    token = record.muscle_group_token
    if token is None:
        return None

    if not dictionary.has_configuration():
        logger.debug(
            f"No muscle group configuration loaded. Exercise '{record.name}' "
            "will be imported without muscle group association."
        )
        return None

    group = dictionary.translate(token)
    if group is None:
        logger.warning(
            f"Unknown muscle group '{token}'. Check your exercise muscle groups configuration file."
        )
    return group


def import_exercises_from_text(
    text: str,
    dictionary: MuscleGroupDictionary,
    catalog: ExerciseCatalog,
) -> ImportResult:
    """
    Parse exercise table text and upsert every record into the catalog.

    Args:
        text: Plain text of the exercise list
        dictionary: Muscle-group dictionary used for header detection and translation
        catalog: Catalog to write to

    Returns:
        ImportResult with the success count and per-record failures

    Raises:
        NoExercisesFoundError: If the text contains no exercise rows
    """
    records = parse_exercise_table(text, dictionary.header_tokens())

    if not records:
        raise NoExercisesFoundError("No exercises found in the document")

    logger.info(f"Importing {len(records)} parsed exercises")

    result = ImportResult()
    for record in records:
        outcome = import_single_record(record, dictionary, catalog)
        if outcome.succeeded:
            result.record_success()
        else:
            result.record_failure(outcome.name, outcome.error or "Unknown error")

    logger.info(
        f"Exercise import completed. Success: {result.success_count}, Failed: {result.failure_count}"
    )
    return result


class ExerciseImportService:
    """Binds the dictionary and catalog for repeated imports."""

    def __init__(self, dictionary: MuscleGroupDictionary, catalog: ExerciseCatalog):
        self.dictionary = dictionary
        self.catalog = catalog

    def import_from_text(self, text: str) -> ImportResult:
        return import_exercises_from_text(text, self.dictionary, self.catalog)

    def import_from_document(self, content: bytes, file_info: FileInfo) -> ImportResult:
        """
        Extract the text of an uploaded document and import it.

        Raises:
            UnsupportedDocumentError: If no parser handles the file type
            DocumentExtractionError: If the document text cannot be read
            NoExercisesFoundError: If the document contains no exercises
        """
        logger.info(f"Starting exercise import from document: {file_info.filename}")

        parser = FileParserFactory.get_parser(file_info)
        if parser is None:
            raise UnsupportedDocumentError(
                f"Unsupported file type '{file_info.extension}'. "
                f"Supported: {', '.join(FileParserFactory.supported_extensions())}"
            )

        parsed = parser.parse(content, file_info)
        if not parsed.success:
            raise DocumentExtractionError("; ".join(parsed.errors) or "Could not extract text")

        return self.import_from_text(parsed.text)
