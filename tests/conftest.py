"""
Test fixtures for exercise-import-api.

Provides sample exercise tables, dictionaries and an API client with auth
and the import service overridden, so tests run offline and isolated.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Repo root
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import exercise_import_api...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from exercise_import_api.main import app
from exercise_import_api.auth import require_admin
from exercise_import_api.api.exercise_import_routes import get_exercise_import_service
from exercise_import_api.services.exercise_catalog import InMemoryExerciseCatalog
from exercise_import_api.services.exercise_import import ExerciseImportService
from exercise_import_api.services.muscle_group_dictionary import MuscleGroupDictionary


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------


TEST_ADMIN_ID = "test-admin-123"


async def mock_require_admin() -> str:
    """Mock auth dependency that returns a test admin."""
    return TEST_ADMIN_ID


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


SAMPLE_MAPPING = {
    "PEITO": "CHEST",
    "COSTAS": "BACK",
    "BÍCEPS": "BICEPS",
    "PERNAS": "LEGS",
}


@pytest.fixture
def dictionary() -> MuscleGroupDictionary:
    """Dictionary with a few Portuguese headers."""
    return MuscleGroupDictionary.from_mapping(SAMPLE_MAPPING)


@pytest.fixture
def dictionary_file(tmp_path) -> Path:
    """YAML dictionary file on disk."""
    path = tmp_path / "exercise-muscle-groups.yml"
    path.write_text(
        "PEITO: CHEST\n"
        "costas: BACK\n"
        "BÍCEPS: biceps\n"
        "PERNAS: LEGS\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def catalog() -> InMemoryExerciseCatalog:
    """Catalog seeded with the default muscles."""
    return InMemoryExerciseCatalog.with_default_muscles()


@pytest.fixture
def sample_exercise_text() -> str:
    """Text as extracted from an exercise list PDF."""
    return (
        "LISTA DE VÍDEOS DE EXERCÍCIOS\n"
        "\n"
        "PEITO\n"
        "EXERCÍCIO VÍDEO\n"
        "1. Supino Reto https://youtu.be/abc123\n"
        "2. Crucifixo com Halteres https://www.youtube.com/watch?v=def456\n"
        "3. Flexão de Braço\n"
        "\n"
        "COSTAS\n"
        "EXERCÍCIO VÍDEO\n"
        "1. Remada Curvada https://youtube.com/watch?v=ghi789\n"
        "2. Puxada Frontal | https://youtu.be/jkl012\n"
    )


@pytest.fixture
def import_service(dictionary, catalog) -> ExerciseImportService:
    return ExerciseImportService(dictionary, catalog)


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client(import_service) -> TestClient:
    """Per-test FastAPI TestClient with a fresh import service."""
    app.dependency_overrides[require_admin] = mock_require_admin
    app.dependency_overrides[get_exercise_import_service] = lambda: import_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unauthenticated_client(import_service) -> TestClient:
    """TestClient that keeps the real auth dependency."""
    app.dependency_overrides[get_exercise_import_service] = lambda: import_service
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("API_KEYS", "sk_test_key1")
    monkeypatch.delenv("EXERCISE_MUSCLE_GROUPS_CONFIG_PATH", raising=False)
