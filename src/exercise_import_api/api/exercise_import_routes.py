"""
Exercise Import API Routes

Admin endpoints for bulk-importing exercises:
- PDF upload (exercise table with muscle-group headers and YouTube links)
- Plain text already extracted from such a table
- Muscle-group dictionary status and catalog listing
"""

import asyncio
import logging
from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException, UploadFile, File as FastAPIFile
from fastapi.responses import JSONResponse

from exercise_import_api.auth import require_admin
from exercise_import_api.config import settings
from exercise_import_api.models import (
    Exercise,
    ImportResponse,
    MuscleGroup,
    MuscleGroupMappingResponse,
)
from exercise_import_api.parsers import FileInfo
from exercise_import_api.services.exercise_catalog import InMemoryExerciseCatalog
from exercise_import_api.services.exercise_import import (
    DocumentExtractionError,
    ExerciseImportError,
    ExerciseImportService,
)
from exercise_import_api.services.muscle_group_dictionary import MuscleGroupDictionary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/exercises", tags=["Exercise Import"])

# Loaded once at startup, read-only afterwards
muscle_group_dictionary = MuscleGroupDictionary.load(settings.EXERCISE_MUSCLE_GROUPS_CONFIG_PATH)
exercise_catalog = InMemoryExerciseCatalog.with_default_muscles()
exercise_import_service = ExerciseImportService(muscle_group_dictionary, exercise_catalog)


def get_exercise_import_service() -> ExerciseImportService:
    """Dependency returning the process-wide import service."""
    return exercise_import_service


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


# ============================================================================
# Import
# ============================================================================

@router.post("/import-pdf", response_model=ImportResponse)
async def import_exercises_from_pdf(
    file: UploadFile = FastAPIFile(...),
    user_id: str = Depends(require_admin),
    service: ExerciseImportService = Depends(get_exercise_import_service),
):
    """
    Import exercises from a PDF file.

    The PDF should contain muscle-group headers (as configured in the
    muscle-group dictionary) followed by exercise tables with video URLs.
    Existing exercises are matched by name and updated.
    """
    filename = file.filename or ""
    logger.info(f"Received request from {user_id} to import exercises from PDF: {filename}")

    # One byte past the limit is enough to detect an oversized upload
    content = await file.read(settings.MAX_UPLOAD_BYTES + 1)

    if not content:
        return _error(400, "File is empty")

    if not filename.lower().endswith(".pdf"):
        return _error(400, "File must be a PDF")

    if len(content) > settings.MAX_UPLOAD_BYTES:
        return _error(413, f"File exceeds the {settings.MAX_UPLOAD_BYTES} byte upload limit")

    file_info = FileInfo.from_filename(filename, len(content), file.content_type)

    try:
        result = await asyncio.to_thread(service.import_from_document, content, file_info)
    except ExerciseImportError as e:
        return _error(400, str(e))
    except DocumentExtractionError as e:
        logger.error(f"Failed to process PDF file {filename}: {e}")
        return _error(500, f"Failed to process PDF: {e}")

    return ImportResponse.from_result(result)


@router.post("/import-text", response_model=ImportResponse)
async def import_exercises_from_text(
    text: str = Body(..., media_type="text/plain"),
    user_id: str = Depends(require_admin),
    service: ExerciseImportService = Depends(get_exercise_import_service),
):
    """Import exercises from the plain text of an exercise table."""
    logger.info(f"Received request from {user_id} to import exercises from text ({len(text)} chars)")

    if not text.strip():
        return _error(400, "Text is empty")

    try:
        result = await asyncio.to_thread(service.import_from_text, text)
    except ExerciseImportError as e:
        return _error(400, str(e))

    return ImportResponse.from_result(result)


# ============================================================================
# Read-only views
# ============================================================================

@router.get("/muscle-groups", response_model=MuscleGroupMappingResponse)
async def get_muscle_group_mapping(
    user_id: str = Depends(require_admin),
    service: ExerciseImportService = Depends(get_exercise_import_service),
):
    """Show the loaded muscle-group dictionary."""
    dictionary = service.dictionary
    return MuscleGroupMappingResponse(
        configured=dictionary.has_configuration(),
        mappings=[
            {"header": header, "muscle_group": group}
            for header, group in dictionary.mapping.items()
        ],
        valid_groups=[g.value for g in MuscleGroup],
    )


@router.get("", response_model=List[Exercise])
async def list_exercises(
    user_id: str = Depends(require_admin),
    service: ExerciseImportService = Depends(get_exercise_import_service),
):
    """List catalog exercises."""
    return service.catalog.list_exercises()


@router.get("/{name}", response_model=Exercise)
async def get_exercise(
    name: str,
    user_id: str = Depends(require_admin),
    service: ExerciseImportService = Depends(get_exercise_import_service),
):
    """Get one catalog exercise by exact name."""
    exercise = service.catalog.find_by_name(name)
    if exercise is None:
        raise HTTPException(status_code=404, detail=f"Exercise '{name}' not found")
    return exercise
