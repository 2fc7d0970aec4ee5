"""User API endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from src.api.dependencies import get_current_actor, get_user_service
from src.api.responses import (
    email_exists,
    forbidden,
    unauthorized,
    user_not_found,
    validation_failed,
)
from src.schemas.auth import Actor
from src.schemas.user import UserIdParams, UserUpdate
from src.schemas.validation import RequestValidationFailed, parse
from src.services.errors import DuplicateEmailError, NotFoundError
from src.services.users import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
def fetch_all_users(
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get all users."""
    logger.info("Fetching all users")
    users = service.list_users()
    return {
        "message": "Users fetched successfully",
        "users": [user.model_dump(mode="json") for user in users],
        "count": len(users),
    }


@router.get("/{user_id}")
def fetch_user_by_id(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get a specific user."""
    try:
        params = parse(UserIdParams, {"id": user_id})
    except RequestValidationFailed as e:
        return validation_failed(e.details)

    logger.info(f"Fetching user with ID: {params.id}")
    try:
        user = service.get_user(params.id)
    except NotFoundError as e:
        return user_not_found(e.message)

    return {"message": "User fetched successfully", "user": user.model_dump(mode="json")}


@router.put("/{user_id}")
def update_user_by_id(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service)],
    actor: Annotated[Actor | None, Depends(get_current_actor)],
    body: Annotated[Any, Body()] = None,
):
    """Update a user. Users may update themselves; only admins may change roles."""
    try:
        params = parse(UserIdParams, {"id": user_id})
        updates = parse(UserUpdate, body)
    except RequestValidationFailed as e:
        return validation_failed(e.details)

    if actor is None:
        return unauthorized()
    if not actor.is_admin and actor.id != params.id:
        return forbidden("You can only update your own information")
    if "role" in updates.model_fields_set and not actor.is_admin:
        return forbidden("Only administrators can change user roles")

    logger.info(f"Updating user with ID: {params.id}")
    try:
        user = service.update_user(params.id, updates.model_dump(exclude_unset=True))
    except NotFoundError as e:
        return user_not_found(e.message)
    except DuplicateEmailError as e:
        return email_exists(e.message)

    return {"message": "User updated successfully", "user": user.model_dump(mode="json")}


@router.delete("/{user_id}")
def delete_user_by_id(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service)],
    actor: Annotated[Actor | None, Depends(get_current_actor)],
):
    """Delete a user. Users may delete their own account; admins may delete any."""
    try:
        params = parse(UserIdParams, {"id": user_id})
    except RequestValidationFailed as e:
        return validation_failed(e.details)

    if actor is None:
        return unauthorized()
    if not actor.is_admin and actor.id != params.id:
        return forbidden("You can only delete your own account")

    logger.info(f"Deleting user with ID: {params.id}")
    try:
        deleted_id = service.delete_user(params.id)
    except NotFoundError as e:
        return user_not_found(e.message)

    return {"message": "User deleted successfully", "deletedUserId": deleted_id}
