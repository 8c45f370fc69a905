from fit_coach.adherence import weekly_adherence
from fit_coach.ids import CounterIdAllocator
from fit_coach.logs import WorkoutLog, entries_from_workout
from fit_coach.models import OnboardingProfile
from fit_coach.planner import generate_plan


def _plan():
    return generate_plan(OnboardingProfile.create({"dumbbells"}, 3), CounterIdAllocator())


def test_no_plan_is_zero():
    assert weekly_adherence(None, [], 3) == 0.0


def test_counts_week_one_logs_only():
    plan = _plan()
    week1, week2 = plan.weeks[0].days, plan.weeks[1].days
    logs = [
        WorkoutLog(workout_id=week1[0].id, entries=[]),
        WorkoutLog(workout_id=week2[0].id, entries=[]),
    ]
    assert weekly_adherence(plan, logs, 3) == 1 / 3


def test_scheduled_is_smaller_of_plan_and_schedule():
    plan = _plan()  # 3 days even though schedule is 1
    logs = [WorkoutLog(workout_id=plan.weeks[0].days[0].id, entries=[])]
    assert weekly_adherence(plan, logs, 1) == 1.0
    assert weekly_adherence(plan, logs, 0) == 0.0


def test_capped_at_one():
    plan = _plan()
    wid = plan.weeks[0].days[0].id
    logs = [WorkoutLog(workout_id=wid, entries=[]) for _ in range(5)]
    assert weekly_adherence(plan, logs, 3) == 1.0


def test_entries_prefilled_from_targets():
    workout = _plan().weeks[0].days[0]
    entries = entries_from_workout(workout)
    assert len(entries) == 12
    first = entries[0]
    assert (first.exercise_id, first.set, first.weight, first.reps, first.rpe) == (
        "db_squat",
        1,
        0,
        8,
        7,
    )
    assert entries[3].exercise_id == "db_press" and entries[3].set == 1
