"""FastAPI dependencies for authentication, services and database."""

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.schemas.auth import Actor
from src.services.auth import AuthService
from src.services.cookies import TOKEN_COOKIE, CookieAdapter
from src.services.errors import VerificationError
from src.services.tokens import TokenCodec
from src.services.users import UserService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


@lru_cache
def get_token_codec() -> TokenCodec:
    """Get the token codec configured from settings."""
    settings = get_settings()
    return TokenCodec(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in=timedelta(minutes=settings.jwt_expiration_minutes),
    )


@lru_cache
def get_cookie_adapter() -> CookieAdapter:
    """Get the cookie adapter configured from settings."""
    settings = get_settings()
    return CookieAdapter(secure=settings.is_production, max_age=settings.cookie_max_age_seconds)


def get_current_actor(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    cookies: Annotated[CookieAdapter, Depends(get_cookie_adapter)],
) -> Actor | None:
    """
    Resolve the authenticated identity for the request.

    A bearer token takes precedence over the token cookie. Returns None when
    no token is sent or the token does not verify; path operations decide
    whether that is a 401.
    """
    token = credentials.credentials if credentials else cookies.get(request, TOKEN_COOKIE)
    if token is None:
        return None

    try:
        claims = codec.verify(token)
        return Actor.model_validate(claims)
    except (VerificationError, ValidationError):
        logger.info("Rejected request token")
        return None


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db)
