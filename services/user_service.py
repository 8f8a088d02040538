# services/user_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.user import User
from schemas.user import PasswordChange, ProfileUpdate, UserRegister
from utils.errors import DuplicateEmail, InvalidCredentials, ValidationError
from utils.security import burn_password_check

log = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def get_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_by_id(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def create_user(db: Session, data: UserRegister) -> User:
    email = normalize_email(data.email)
    if get_by_email(db, email) is not None:
        raise DuplicateEmail()

    u = User(
        email=email,
        full_name=data.full_name,
        gender=data.gender,
        birth_date=data.birth_date,
        height_cm=data.height_cm,
        weight_kg=data.weight_kg,
    )
    u.set_password(data.password)
    db.add(u)
    try:
        db.commit()
    except IntegrityError:
        # lost the race against a concurrent registration
        db.rollback()
        raise DuplicateEmail()
    db.refresh(u)
    log.info("Registered user id=%s", u.id)
    return u


def authenticate(db: Session, email: str, password: str) -> User:
    user = get_by_email(db, email)
    if user is None:
        burn_password_check(password)
        raise InvalidCredentials()
    if not user.check_password(password):
        raise InvalidCredentials()
    return user


def update_profile(db: Session, user: User, data: ProfileUpdate) -> User:
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def change_password(db: Session, user: User, data: PasswordChange) -> None:
    if not user.check_password(data.current_password):
        raise ValidationError("Current password is incorrect")
    user.set_password(data.new_password)
    db.add(user)
    db.commit()
    log.info("Password changed for user id=%s", user.id)
