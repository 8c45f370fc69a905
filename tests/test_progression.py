from fit_coach.ids import CounterIdAllocator
from fit_coach.models import SetTarget, Workout, WorkoutExercise
from fit_coach.progression import progress_exercise, progress_workout


def _sets(n: int, reps: int, effort: int) -> tuple[SetTarget, ...]:
    return tuple(SetTarget(reps, effort) for _ in range(n))


def test_bodyweight_adds_reps_to_first_set_only():
    ex = WorkoutExercise("bw_squat", _sets(3, 12, 6))
    out = progress_exercise(ex)
    assert [(s.reps, s.target_effort) for s in out.sets] == [(14, 6), (12, 6), (12, 6)]


def test_weighted_appends_copy_of_first_set():
    ex = WorkoutExercise("db_squat", _sets(3, 8, 7))
    out = progress_exercise(ex)
    assert len(out.sets) == 4
    assert out.sets[:3] == ex.sets
    assert out.sets[3] == SetTarget(8, 7)


def test_weighted_effort_is_not_raised():
    ex = WorkoutExercise("bench", _sets(3, 5, 7))
    assert progress_exercise(ex).sets[-1].target_effort == 7


def test_progress_leaves_input_untouched():
    ex = WorkoutExercise("db_row", _sets(3, 10, 7))
    progress_exercise(ex)
    assert len(ex.sets) == 3


def test_progress_workout_only_touches_primary_and_mints_new_id():
    allocator = CounterIdAllocator(start=10)
    workout = Workout(
        id="wo_1",
        title="Full Body A",
        exercises=(
            WorkoutExercise("db_squat", _sets(3, 8, 7)),
            WorkoutExercise("plank", _sets(3, 45, 6)),
        ),
    )
    out = progress_workout(workout, allocator)
    assert out.id == "wo_10"
    assert out.title == "Full Body A"
    assert len(out.exercises[0].sets) == 4
    # plank is bodyweight but not primary, so it stays as is
    assert out.exercises[1] == workout.exercises[1]
