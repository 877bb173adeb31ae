"""
Session verification.

Sign-in lives in an external auth service. This module only checks the
bearer token on each request and resolves the caller's identity.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Request

from .config import SESSION_SECRET, SESSION_ALGORITHM
from .logging_config import get_logger
from ..api.exceptions import UnauthorizedError

logger = get_logger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    id: str
    name: Optional[str] = None
    email: Optional[str] = None


class SessionVerifier(ABC):
    """Strategy for turning a bearer token into a user."""

    @abstractmethod
    def verify(self, token: str) -> Optional[CurrentUser]:
        """Return the user for a valid token, or None."""
        pass


class JWTSessionVerifier(SessionVerifier):
    """Validates HS256 session tokens; ``sub`` is the owner id."""

    def __init__(self, secret: str = SESSION_SECRET, algorithm: str = SESSION_ALGORITHM):
        self.secret = secret
        self.algorithm = algorithm

    def verify(self, token: str) -> Optional[CurrentUser]:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.debug("Session token expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.debug(f"Invalid session token: {e}")
            return None

        user_id = payload.get("sub")
        if not user_id:
            return None
        return CurrentUser(id=str(user_id), name=payload.get("name"), email=payload.get("email"))


def create_session_token(
    user_id: str,
    name: Optional[str] = None,
    email: Optional[str] = None,
    expires_in: timedelta = timedelta(days=7),
    secret: str = SESSION_SECRET,
    algorithm: str = SESSION_ALGORITHM
) -> str:
    """Issue a token the JWT verifier accepts (development and tests)."""
    now = datetime.now(timezone.utc)
    payload = {"sub": user_id, "iat": now, "exp": now + expires_in}
    if name:
        payload["name"] = name
    if email:
        payload["email"] = email
    return jwt.encode(payload, secret, algorithm=algorithm)


def extract_token_from_header(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    return parts[1]


_verifier: SessionVerifier = JWTSessionVerifier()


def set_session_verifier(verifier: SessionVerifier) -> None:
    """Swap the verification strategy (e.g. for a different auth backend)."""
    global _verifier
    _verifier = verifier


async def get_current_user(request: Request) -> CurrentUser:
    """
    FastAPI dependency resolving the authenticated caller.

    Raises:
        UnauthorizedError: No token, or a token the verifier rejects
    """
    token = extract_token_from_header(request.headers.get("Authorization"))
    user = _verifier.verify(token) if token else None
    if user is None:
        raise UnauthorizedError()
    request.state.user = user
    return user
