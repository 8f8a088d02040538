# schemas/__init__.py
from .common import MessageOut, RawId
from .user import UserRegister, LoginIn, ProfileUpdate, PasswordChange, UserOut, UserEnvelope
from .exercise import ExerciseCreate, ExerciseUpdate, ExerciseSummary, ExerciseOut
from .workout import WorkoutCreate, WorkoutUpdate, WorkoutOut
from .workout_exercise import WorkoutExerciseCreate, WorkoutExerciseUpdate, WorkoutExerciseOut


__all__ = [
    # Shared
    "MessageOut",
    "RawId",

    # Users / auth
    "UserRegister",
    "LoginIn",
    "ProfileUpdate",
    "PasswordChange",
    "UserOut",
    "UserEnvelope",

    # Catalog
    "ExerciseCreate",
    "ExerciseUpdate",
    "ExerciseSummary",
    "ExerciseOut",

    # Plans
    "WorkoutCreate",
    "WorkoutUpdate",
    "WorkoutOut",
    "WorkoutExerciseCreate",
    "WorkoutExerciseUpdate",
    "WorkoutExerciseOut",
]
