"""Exception types raised by FitCoach."""


class FitCoachError(Exception):
    """Base class for all FitCoach errors."""


class ExerciseNotFoundError(FitCoachError, KeyError):
    """Raised when an exercise id does not resolve in the catalog."""

    def __init__(self, exercise_id: str):
        super().__init__(exercise_id)
        self.exercise_id = exercise_id

    def __str__(self) -> str:
        return f"Unknown exercise id: {self.exercise_id!r}"
