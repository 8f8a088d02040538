# services/workout_exercise_service.py
"""
Exercises placed on the days of a workout.

Authorization always goes through the parent workout: the row is looked up,
then its workout, then the workout's owner is compared with the requester.
"""
import logging
from typing import List, Optional, Tuple, Union

from sqlalchemy import delete
from sqlalchemy.orm import Session, joinedload

from models.user import User
from models.workout import Workout
from models.workout_exercise import WorkoutExercise
from schemas.workout_exercise import WorkoutExerciseCreate, WorkoutExerciseUpdate
from services.exercise_service import get_exercise
from services.workout_service import ensure_owner, get_owned_workout
from utils.errors import NotFound
from utils.ids import parse_id

log = logging.getLogger(__name__)

NOT_FOUND = "Workout exercise not found"
PARENT_MISSING = "Associated workout not found"


def _load(db: Session, workout_exercise_id: int) -> Optional[WorkoutExercise]:
    return (
        db.query(WorkoutExercise)
        .options(joinedload(WorkoutExercise.exercise))
        .filter(WorkoutExercise.id == workout_exercise_id)
        .first()
    )


def get_owned_workout_exercise(
    db: Session, raw_id: Union[int, str], user: User
) -> Tuple[WorkoutExercise, Workout]:
    we = _load(db, parse_id(raw_id, NOT_FOUND))
    if we is None:
        raise NotFound(NOT_FOUND)
    workout = db.get(Workout, we.workout_id)
    if workout is None:
        raise NotFound(PARENT_MISSING)
    ensure_owner(workout, user)
    return we, workout


def list_for_workout(
    db: Session, user: User, raw_workout_id: Union[int, str], day_number: Optional[int] = None
) -> List[WorkoutExercise]:
    workout = get_owned_workout(db, raw_workout_id, user)
    q = (
        db.query(WorkoutExercise)
        .options(joinedload(WorkoutExercise.exercise))
        .filter(WorkoutExercise.workout_id == workout.id)
    )
    if day_number is not None:
        q = q.filter(WorkoutExercise.day_number == day_number)
    return q.order_by(WorkoutExercise.day_number, WorkoutExercise.id).all()


def create_workout_exercise(db: Session, user: User, data: WorkoutExerciseCreate) -> WorkoutExercise:
    workout = get_owned_workout(db, data.workout_id, user)
    exercise = get_exercise(db, data.exercise_id)

    we = WorkoutExercise(
        workout_id=workout.id,
        day_number=data.day_number,
        workout_name=data.workout_name,
        exercise_id=exercise.id,
        sets=data.sets,
        reps=data.reps,
        rest_seconds=data.rest_seconds,
    )
    db.add(we)
    db.commit()
    return _load(db, we.id)


def update_workout_exercise(
    db: Session, user: User, raw_id: Union[int, str], data: WorkoutExerciseUpdate
) -> WorkoutExercise:
    we, _ = get_owned_workout_exercise(db, raw_id, user)

    fields = data.model_dump(exclude_unset=True)
    if "exercise_id" in fields:
        fields["exercise_id"] = get_exercise(db, fields["exercise_id"]).id

    for field, value in fields.items():
        setattr(we, field, value)
    we_id = we.id
    db.add(we)
    db.commit()
    # reload so a changed exercise_id brings the new catalog fields
    db.expire(we)
    return _load(db, we_id)


def delete_workout_exercise(db: Session, user: User, raw_id: Union[int, str]) -> None:
    we, _ = get_owned_workout_exercise(db, raw_id, user)
    db.delete(we)
    db.commit()


def delete_all_for_workout(db: Session, user: User, raw_workout_id: Union[int, str]) -> int:
    workout = get_owned_workout(db, raw_workout_id, user)
    result = db.execute(delete(WorkoutExercise).where(WorkoutExercise.workout_id == workout.id))
    db.commit()
    log.info("Cleared %s workout exercises from workout id=%s", result.rowcount, workout.id)
    return result.rowcount
