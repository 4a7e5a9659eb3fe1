"""Tests for the in-memory exercise catalog."""

import uuid

from exercise_import_api.models import Exercise, Muscle, MuscleGroup
from exercise_import_api.services.exercise_catalog import DEFAULT_MUSCLES, InMemoryExerciseCatalog


def test_default_muscles_are_seeded(catalog):
    assert len(catalog.list_muscles()) == len(DEFAULT_MUSCLES) == 22
    chest = catalog.find_muscles_by_group(MuscleGroup.CHEST)
    assert {m.name for m in chest} == {"Pectoralis Major", "Pectoralis Minor"}


def test_save_assigns_id_and_find_by_exact_name(catalog):
    saved = catalog.save(Exercise(name="Supino Reto"))

    assert saved.id is not None
    assert catalog.find_by_name("Supino Reto").id == saved.id
    assert catalog.find_by_name("supino reto") is None


def test_save_same_name_updates_in_place(catalog):
    first = catalog.save(Exercise(name="Supino Reto"))
    catalog.save(Exercise(name="Supino Reto", video_url="https://youtu.be/new"))

    exercises = catalog.list_exercises()
    assert len(exercises) == 1
    assert exercises[0].id == first.id
    assert exercises[0].video_url == "https://youtu.be/new"


def test_returned_entries_are_copies(catalog):
    catalog.save(Exercise(name="Supino Reto"))

    found = catalog.find_by_name("Supino Reto")
    found.video_url = "https://youtu.be/unsaved"

    assert catalog.find_by_name("Supino Reto").video_url is None


def test_custom_muscles():
    muscle = Muscle(id=uuid.uuid4(), name="Serratus Anterior", muscle_group=MuscleGroup.CHEST)
    catalog = InMemoryExerciseCatalog([muscle])

    assert catalog.find_muscles_by_group(MuscleGroup.CHEST) == [muscle]
    assert catalog.find_muscles_by_group(MuscleGroup.BACK) == []
