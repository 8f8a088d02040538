# services/workout_service.py
import logging
from typing import List, Union

from sqlalchemy import delete
from sqlalchemy.orm import Session

from models.user import User
from models.workout import Workout
from models.workout_exercise import WorkoutExercise
from schemas.workout import WorkoutCreate, WorkoutUpdate
from utils.errors import Forbidden, NotFound
from utils.ids import parse_id

log = logging.getLogger(__name__)

NOT_FOUND = "Workout not found"
NOT_OWNER = "User not authorized"


def ensure_owner(workout: Workout, user: User) -> None:
    if workout.user_id != user.id:
        log.warning("User id=%s denied access to workout id=%s", user.id, workout.id)
        raise Forbidden(NOT_OWNER)


def get_owned_workout(
    db: Session, raw_id: Union[int, str], user: User, not_found: str = NOT_FOUND
) -> Workout:
    """
    Existence first, ownership second: a missing id is always 404 and an
    existing workout of someone else is always 403.
    """
    workout = db.get(Workout, parse_id(raw_id, not_found))
    if workout is None:
        raise NotFound(not_found)
    ensure_owner(workout, user)
    return workout


def list_workouts(db: Session, user: User) -> List[Workout]:
    return (
        db.query(Workout)
        .filter(Workout.user_id == user.id)
        .order_by(Workout.id)
        .all()
    )


def create_workout(db: Session, user: User, data: WorkoutCreate) -> Workout:
    w = Workout(user_id=user.id, **data.model_dump())
    db.add(w)
    db.commit()
    db.refresh(w)
    return w


def update_workout(db: Session, user: User, raw_id: Union[int, str], data: WorkoutUpdate) -> Workout:
    w = get_owned_workout(db, raw_id, user)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(w, field, value)
    db.add(w)
    db.commit()
    db.refresh(w)
    return w


def delete_workout(db: Session, user: User, raw_id: Union[int, str]) -> None:
    """Removes the workout and all its workout exercises in one transaction."""
    w = get_owned_workout(db, raw_id, user)
    result = db.execute(delete(WorkoutExercise).where(WorkoutExercise.workout_id == w.id))
    db.delete(w)
    db.commit()
    log.info("Deleted workout id=%s with %s workout exercises", w.id, result.rowcount)
