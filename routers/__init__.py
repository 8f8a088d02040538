# routers/__init__.py

from .auth import router as auth_router
from .protected import router as protected_router
from .exercises import router as exercises_router
from .workouts import router as workouts_router
from .workout_exercises import router as workout_exercises_router
from .status import router as status_router

__all__ = [
    "auth_router",
    "protected_router",
    "exercises_router",
    "workouts_router",
    "workout_exercises_router",
    "status_router",
]
