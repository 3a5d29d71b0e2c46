# backend/croptracker/core/auth.py

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader
from werkzeug.security import check_password_hash, generate_password_hash

from .config import settings
from .logger import logger

INVALID_TOKEN_MESSAGE = "Invalid token access"

# Custom header rather than Authorization; shows up as "SessionAuth" in OpenAPI
security = APIKeyHeader(name=settings.AUTH_HEADER, scheme_name="SessionAuth", auto_error=False)


class AuthError(Exception):
    """Raised when a credential is missing, malformed or rejected."""


@dataclass(frozen=True)
class CurrentUser:
    id: str
    email: str


# ------------------------------------------------
# PASSWORDS
# ------------------------------------------------
def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return check_password_hash(password_hash, password)


# ------------------------------------------------
# TOKENS
# ------------------------------------------------
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def normalize_credential(raw: Optional[str]) -> str:
    """
    Return the bare token from a header value.

    Accepts "<scheme> <token>" or a bare "<token>"; a single word is
    treated as unprefixed and gets the scheme injected before parsing.
    """
    if raw is None:
        raise AuthError("missing credential")

    parts = raw.split()
    if len(parts) == 1:
        parts = [settings.TOKEN_SCHEME, parts[0]]

    if len(parts) != 2 or parts[0].lower() != settings.TOKEN_SCHEME.lower():
        raise AuthError("malformed credential")

    return parts[1]


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthError("token expired")
    except jwt.PyJWTError as exc:
        raise AuthError(f"token rejected: {exc}")


def authenticate(raw: Optional[str]) -> CurrentUser:
    payload = decode_token(normalize_credential(raw))

    user_id = payload.get("id")
    email = payload.get("email")
    if not user_id or not email:
        raise AuthError("token payload incomplete")

    return CurrentUser(id=str(user_id), email=email)


async def get_current_user(request: Request, raw: Optional[str] = Depends(security)) -> CurrentUser:
    try:
        user = authenticate(raw)
    except AuthError as exc:
        # the caller only ever sees the generic message
        logger.warning(f"Rejected credential: {exc}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_TOKEN_MESSAGE)

    # picked up by RequestLoggingMiddleware for the completion log
    request.scope["user_id"] = user.id
    return user
