"""Authentication API endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, status

from src.api.dependencies import get_auth_service, get_cookie_adapter, get_token_codec
from src.api.responses import email_exists, error_response, validation_failed
from src.schemas.auth import SignInRequest, SignUpRequest
from src.schemas.user import UserResponse
from src.schemas.validation import RequestValidationFailed, parse
from src.services.auth import AuthService
from src.services.cookies import TOKEN_COOKIE, CookieAdapter
from src.services.errors import DuplicateEmailError, InvalidCredentialsError
from src.services.tokens import TokenCodec

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def issue_token(
    user: UserResponse, response: Response, codec: TokenCodec, cookies: CookieAdapter
) -> None:
    """Sign a token for the user and attach it as the session cookie."""
    token = codec.sign({"id": user.id, "email": user.email, "role": user.role})
    cookies.set(response, TOKEN_COOKIE, token)


@router.post("/sign-up", status_code=status.HTTP_201_CREATED)
def sign_up(
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    cookies: Annotated[CookieAdapter, Depends(get_cookie_adapter)],
    body: Annotated[Any, Body()] = None,
):
    """Register a new user and start a session."""
    try:
        data = parse(SignUpRequest, body)
    except RequestValidationFailed as e:
        return validation_failed(e.details)

    try:
        user = service.sign_up(
            email=data.email, password=data.password, name=data.name, role=data.role
        )
    except DuplicateEmailError as e:
        return email_exists(e.message)

    issue_token(user, response, codec, cookies)
    logger.info(f"User registered successfully: {user.email}")
    return {"message": "User registered", "user": user.model_dump(mode="json")}


@router.post("/sign-in")
def sign_in(
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    cookies: Annotated[CookieAdapter, Depends(get_cookie_adapter)],
    body: Annotated[Any, Body()] = None,
):
    """Sign in with email and password."""
    try:
        data = parse(SignInRequest, body)
    except RequestValidationFailed as e:
        return validation_failed(e.details)

    try:
        user = service.sign_in(email=data.email, password=data.password)
    except InvalidCredentialsError as e:
        return error_response(status.HTTP_401_UNAUTHORIZED, "Invalid credentials", message=e.message)

    issue_token(user, response, codec, cookies)
    return {"message": "User signed in successfully", "user": user.model_dump(mode="json")}


@router.post("/sign-out")
def sign_out(
    response: Response,
    cookies: Annotated[CookieAdapter, Depends(get_cookie_adapter)],
):
    """Sign out by clearing the session cookie."""
    cookies.clear(response, TOKEN_COOKIE)
    return {"message": "User signed out successfully"}
