from .user import User
from .exercise import Exercise
from .workouts import (
    WorkoutPlan,
    WorkoutExercise,
    ScheduledWorkout,
    CompletedWorkout,
    ExerciseResult,
)

__all__ = [
    "User",
    "Exercise",
    "WorkoutPlan",
    "WorkoutExercise",
    "ScheduledWorkout",
    "CompletedWorkout",
    "ExerciseResult",
]
