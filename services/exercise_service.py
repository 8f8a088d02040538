# services/exercise_service.py
import logging
from typing import List, Union

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.exercise import Exercise
from models.workout_exercise import WorkoutExercise
from schemas.exercise import ExerciseCreate, ExerciseUpdate
from utils.errors import Conflict, NotFound
from utils.ids import parse_id

log = logging.getLogger(__name__)

NOT_FOUND = "Exercise not found"
IN_USE = "Exercise is used in workouts and cannot be deleted"


def list_exercises(db: Session) -> List[Exercise]:
    return db.query(Exercise).order_by(Exercise.id).all()


def get_exercise(db: Session, raw_id: Union[int, str]) -> Exercise:
    exercise = db.get(Exercise, parse_id(raw_id, NOT_FOUND))
    if exercise is None:
        raise NotFound(NOT_FOUND)
    return exercise


def create_exercise(db: Session, data: ExerciseCreate) -> Exercise:
    e = Exercise(**data.model_dump())
    db.add(e)
    db.commit()
    db.refresh(e)
    return e


def update_exercise(db: Session, raw_id: Union[int, str], data: ExerciseUpdate) -> Exercise:
    e = get_exercise(db, raw_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(e, field, value)
    db.add(e)
    db.commit()
    db.refresh(e)
    return e


def delete_exercise(db: Session, raw_id: Union[int, str]) -> None:
    e = get_exercise(db, raw_id)
    referenced = (
        db.query(func.count(WorkoutExercise.id))
        .filter(WorkoutExercise.exercise_id == e.id)
        .scalar()
    )
    if referenced:
        log.info("Refused to delete exercise id=%s used by %s workout entries", e.id, referenced)
        raise Conflict(IN_USE)
    db.delete(e)
    try:
        db.commit()
    except IntegrityError:
        # a workout entry was added between the check and the delete
        db.rollback()
        raise Conflict(IN_USE)
    log.info("Deleted exercise id=%s", e.id)
