"""Data models for the exercise catalog and import results."""
from enum import Enum
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class MuscleGroup(str, Enum):
    """Canonical muscle groups every source header is translated into."""
    CHEST = "CHEST"
    DELTOIDS = "DELTOIDS"
    SHOULDERS = "SHOULDERS"
    BICEPS = "BICEPS"
    TRICEPS = "TRICEPS"
    BACK = "BACK"
    FOREARMS = "FOREARMS"
    GLUTES = "GLUTES"
    LEGS = "LEGS"
    CALVES = "CALVES"


class Muscle(BaseModel):
    """A muscle known to the catalog, tagged with its canonical group."""
    id: UUID
    name: str
    muscle_group: MuscleGroup


class Exercise(BaseModel):
    """Exercise catalog entry. `name` is the upsert key."""
    id: Optional[UUID] = None  # assigned by the catalog on first save
    name: str
    video_url: Optional[str] = None
    muscles: List[Muscle] = Field(default_factory=list)


class ImportFailure(BaseModel):
    """A record that could not be imported."""
    exercise_name: str
    reason: str


class ImportResult(BaseModel):
    """Aggregate outcome of one import run."""
    success_count: int = 0
    failures: List[ImportFailure] = Field(default_factory=list)

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def total_count(self) -> int:
        return self.success_count + self.failure_count

    def record_success(self) -> None:
        self.success_count += 1

    def record_failure(self, exercise_name: str, reason: str) -> None:
        self.failures.append(ImportFailure(exercise_name=exercise_name, reason=reason))


# API Response Models

class ImportResponse(BaseModel):
    """Response body of the import endpoints"""
    status: str = "success"
    message: str = "Import completed"
    total_processed: int
    successful: int
    failed: int
    failures: List[ImportFailure] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ImportResult) -> "ImportResponse":
        return cls(
            total_processed=result.total_count,
            successful=result.success_count,
            failed=result.failure_count,
            failures=list(result.failures),
        )


class MuscleGroupMappingResponse(BaseModel):
    """Current state of the muscle-group dictionary"""
    configured: bool
    mappings: List[Dict[str, str]] = Field(default_factory=list)
    valid_groups: List[str] = Field(default_factory=list)
