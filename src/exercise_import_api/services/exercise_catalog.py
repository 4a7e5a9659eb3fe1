"""Exercise catalog used by the importer.

The importer only needs a few things from persistence: find an exercise by
exact name, list the muscles of a group, save an exercise, and lock one
entry for the duration of a read-modify-write. Any backend implementing
ExerciseCatalog can be plugged in; InMemoryExerciseCatalog is the
process-local implementation the API runs with.
"""
import logging
import threading
import uuid
from contextlib import contextmanager
from typing import ContextManager, Dict, Iterable, Iterator, List, Optional, Protocol, Tuple

from exercise_import_api.models import Exercise, Muscle, MuscleGroup

logger = logging.getLogger(__name__)


DEFAULT_MUSCLES: Tuple[Tuple[str, MuscleGroup], ...] = (
    ("Pectoralis Major", MuscleGroup.CHEST),
    ("Pectoralis Minor", MuscleGroup.CHEST),
    ("Anterior Deltoid", MuscleGroup.DELTOIDS),
    ("Lateral Deltoid", MuscleGroup.DELTOIDS),
    ("Posterior Deltoid", MuscleGroup.DELTOIDS),
    ("Trapezius", MuscleGroup.SHOULDERS),
    ("Biceps Brachii", MuscleGroup.BICEPS),
    ("Brachialis", MuscleGroup.BICEPS),
    ("Triceps Brachii", MuscleGroup.TRICEPS),
    ("Latissimus Dorsi", MuscleGroup.BACK),
    ("Rhomboids", MuscleGroup.BACK),
    ("Erector Spinae", MuscleGroup.BACK),
    ("Forearm Flexors", MuscleGroup.FOREARMS),
    ("Forearm Extensors", MuscleGroup.FOREARMS),
    ("Gluteus Maximus", MuscleGroup.GLUTES),
    ("Gluteus Medius", MuscleGroup.GLUTES),
    ("Quadriceps", MuscleGroup.LEGS),
    ("Hamstrings", MuscleGroup.LEGS),
    ("Adductors", MuscleGroup.LEGS),
    ("Abductors", MuscleGroup.LEGS),
    ("Gastrocnemius", MuscleGroup.CALVES),
    ("Soleus", MuscleGroup.CALVES),
)


class ExerciseCatalog(Protocol):
    """Persistence contract the importer writes through."""

    def find_by_name(self, name: str) -> Optional[Exercise]:
        ...

    def find_muscles_by_group(self, muscle_group: MuscleGroup) -> List[Muscle]:
        ...

    def save(self, exercise: Exercise) -> Exercise:
        ...

    def lock_for(self, name: str) -> ContextManager[None]:
        """Hold exclusive access to the entry called name until exit."""
        ...

    def list_exercises(self) -> List[Exercise]:
        ...

    def list_muscles(self) -> List[Muscle]:
        ...


class InMemoryExerciseCatalog:
    """Thread-safe in-process catalog.

    Entries are copied on the way in and out, so callers can mutate what
    they get back without touching stored state until they call save().
    """

    def __init__(self, muscles: Optional[Iterable[Muscle]] = None):
        self._lock = threading.Lock()
        self._exercises: Dict[str, Exercise] = {}
        self._muscles: Dict[uuid.UUID, Muscle] = {}
        self._entry_locks: Dict[str, threading.Lock] = {}
        for muscle in muscles or []:
            self._muscles[muscle.id] = muscle

    @classmethod
    def with_default_muscles(cls) -> "InMemoryExerciseCatalog":
        muscles = [
            Muscle(id=uuid.uuid4(), name=name, muscle_group=group)
            for name, group in DEFAULT_MUSCLES
        ]
        logger.info(f"Initialized catalog with {len(muscles)} default muscles")
        return cls(muscles)

    def find_by_name(self, name: str) -> Optional[Exercise]:
        with self._lock:
            exercise = self._exercises.get(name)
            return exercise.model_copy(deep=True) if exercise else None

    def find_muscles_by_group(self, muscle_group: MuscleGroup) -> List[Muscle]:
        with self._lock:
            return [
                m.model_copy() for m in self._muscles.values()
                if m.muscle_group == muscle_group
            ]

    def save(self, exercise: Exercise) -> Exercise:
        with self._lock:
            stored = exercise.model_copy(deep=True)
            if stored.id is None:
                existing = self._exercises.get(stored.name)
                stored.id = existing.id if existing else uuid.uuid4()
            self._exercises[stored.name] = stored
            return stored.model_copy(deep=True)

    @contextmanager
    def lock_for(self, name: str) -> Iterator[None]:
        with self._lock:
            entry_lock = self._entry_locks.setdefault(name, threading.Lock())
        with entry_lock:
            yield

    def list_exercises(self) -> List[Exercise]:
        with self._lock:
            return [
                e.model_copy(deep=True)
                for e in sorted(self._exercises.values(), key=lambda e: e.name)
            ]

    def list_muscles(self) -> List[Muscle]:
        with self._lock:
            return [m.model_copy() for m in self._muscles.values()]
