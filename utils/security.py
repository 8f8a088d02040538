# utils/security.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from passlib.context import CryptContext
from passlib.exc import UnknownHashError

from utils.errors import InvalidToken

# No native dependencies, no 72-byte limit
pwd_ctx = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Compared against when the user does not exist, so a failed login costs the same either way
_DUMMY_HASH = pwd_ctx.hash("fittrack-dummy-password")


def hash_password(password: str) -> str:
    return pwd_ctx.hash(password)


def verify_password(plain: str, hashed: Optional[str]) -> bool:
    if not plain or not hashed:
        return False
    try:
        return pwd_ctx.verify(plain, hashed)
    except (UnknownHashError, ValueError):
        return False


def burn_password_check(plain: str) -> None:
    verify_password(plain or "x", _DUMMY_HASH)


class TokenService:
    """
    Issues and verifies signed, time-limited bearer tokens.

    The token only carries the user id (`sub`); there is no refresh flow,
    an expired token means logging in again.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", ttl: timedelta = timedelta(hours=24)):
        if not secret:
            raise RuntimeError("Token signing secret is empty")
        self._secret = secret
        self._algorithm = algorithm
        self.ttl = ttl

    def issue(self, user_id: int, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> int:
        """Returns the user id embedded in a valid token; raises InvalidToken otherwise."""
        if not token:
            raise InvalidToken()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except ExpiredSignatureError:
            raise InvalidToken("Token has expired")
        except JWTError:
            raise InvalidToken()

        try:
            return int(payload["sub"])
        except (KeyError, ValueError, TypeError):
            raise InvalidToken()
