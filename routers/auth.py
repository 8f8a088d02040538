# routers/auth.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from config.settings import Settings
from schemas.user import LoginIn, UserOut, UserRegister
from services.user_service import authenticate, create_user
from utils.dependencies import get_db, get_settings, get_token_service
from utils.security import TokenService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(
    body: UserRegister,
    response: Response,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
):
    user = create_user(db, body)
    response.headers[settings.token_header] = tokens.issue(user.id)
    return UserOut.model_validate(user)


@router.post("/login", response_model=UserOut)
def login(
    body: LoginIn,
    response: Response,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
):
    # same answer for an unknown email and a wrong password
    user = authenticate(db, body.email, body.password)
    response.headers[settings.token_header] = tokens.issue(user.id)
    return UserOut.model_validate(user)
