import pytest

from fit_coach.catalog import (
    CATALOG,
    EXERCISES,
    exercises_for_equipment,
    get_exercise,
    is_bodyweight,
)
from fit_coach.errors import ExerciseNotFoundError, FitCoachError
from fit_coach.templates import DAY_ARCHETYPES


def test_catalog_ids_unique():
    assert len(CATALOG) == len(EXERCISES) == 12


def test_every_template_exercise_resolves():
    for day in DAY_ARCHETYPES.values():
        for slot in day.slots:
            assert get_exercise(slot.exercise_id).id == slot.exercise_id


def test_unknown_id_raises_not_found():
    with pytest.raises(ExerciseNotFoundError) as exc:
        get_exercise("kettlebell_swing")
    assert exc.value.exercise_id == "kettlebell_swing"
    assert isinstance(exc.value, KeyError)
    assert isinstance(exc.value, FitCoachError)


def test_is_bodyweight():
    assert is_bodyweight("plank")
    assert is_bodyweight("bw_squat")
    assert not is_bodyweight("db_squat")
    assert not is_bodyweight("row_band")


def test_exercises_for_equipment_matches_any_tag():
    ids = {e.id for e in exercises_for_equipment({"bands", "bodyweight"})}
    assert ids == {"plank", "bw_squat", "pushup", "row_band"}
    assert exercises_for_equipment(set()) == []
