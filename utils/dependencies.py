# utils/dependencies.py
from __future__ import annotations

import logging
from typing import Generator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from config.settings import Settings
from models.user import User
from utils.errors import AuthError, Forbidden, InvalidToken
from utils.security import TokenService

log = logging.getLogger(__name__)


# -------------------------------
# App-level objects built in create_app()
# -------------------------------
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


# -------------------------------
# Database session, one per request
# -------------------------------
def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def _extract_token(x_auth_token: Optional[str], authorization: Optional[str]) -> Optional[str]:
    if x_auth_token and x_auth_token.strip():
        return x_auth_token.strip()
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
        return token or None
    return None


# -------------------------------
# Mandatory authentication
# -------------------------------
def get_current_user(
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    x_auth_token: Optional[str] = Header(None),
    authorization: Optional[str] = Header(None),
) -> User:
    """
    Resolve the requester from the x-auth-token header (or Authorization: Bearer).

    Every request re-verifies the token and re-reads the user; nothing is cached.
    """
    token = _extract_token(x_auth_token, authorization)
    if not token:
        raise AuthError("No token, authorization denied")

    try:
        user_id = tokens.verify(token)
    except InvalidToken as e:
        log.warning("Rejected token: %s", e.message)
        raise

    user = db.get(User, user_id)
    if user is None:
        raise AuthError("User no longer exists")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        log.warning("Non-admin user id=%s tried an admin-only operation", user.id)
        raise Forbidden("Access denied. Admin privileges required.")
    return user
