# routers/protected.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from models.user import User
from schemas.common import MessageOut
from schemas.user import PasswordChange, ProfileUpdate, UserEnvelope, UserOut
from services.user_service import change_password, update_profile
from utils.dependencies import get_current_user, get_db

router = APIRouter(prefix="/protected", tags=["protected"])


@router.get("/me", response_model=UserEnvelope)
def me(user: User = Depends(get_current_user)):
    """Current user's profile."""
    return UserEnvelope(
        user=UserOut.model_validate(user),
        message="Protected content retrieved successfully",
    )


@router.put("/profile", response_model=UserEnvelope)
def profile(
    body: ProfileUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    user = update_profile(db, user, body)
    return UserEnvelope(user=UserOut.model_validate(user), message="Profile updated successfully")


@router.put("/password", response_model=MessageOut)
def password(
    body: PasswordChange,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    change_password(db, user, body)
    return MessageOut(message="Password updated successfully")
