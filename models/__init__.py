# models/__init__.py
from .user import User, GenderEnum
from .exercise import Exercise
from .workout import Workout
from .workout_exercise import WorkoutExercise

__all__ = [
    "User",
    "GenderEnum",
    "Exercise",
    "Workout",
    "WorkoutExercise",
]
