"""Users API: profiles, skills, owned projects and collaborations."""

import logging

from fastapi import APIRouter, Query, status
from sqlalchemy.exc import SQLAlchemyError

from collabhub.api.deps import Users
from collabhub.exceptions import (
    DatabaseOperationError,
    DatabaseUnavailableError,
    UserNotFoundError,
    is_connection_error,
)
from collabhub.schemas.project import ProjectResponse, ProjectWithCreatorResponse
from collabhub.schemas.user import (
    UserCreate,
    UserDetailResponse,
    UserProfileUpdate,
    UserResponse,
    UserWithSkillsResponse,
)
from collabhub.utils.ids import parse_uuid

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[UserDetailResponse])
async def get_users(
    users: Users,
    stack: str | None = Query(None, description="Comma-separated skill names; matches any"),
    page: str | None = Query(None),
    limit: str | None = Query(None),
) -> list[UserDetailResponse]:
    try:
        found = await users.list_users(stack=stack, page=page, limit=limit)
    except SQLAlchemyError as e:
        logger.exception(f"Error fetching users: {e}")
        if is_connection_error(e):
            raise DatabaseUnavailableError() from e
        raise DatabaseOperationError("Failed to fetch users") from e
    except Exception as e:
        # Driver errors raised while connecting are not wrapped in SQLAlchemyError
        if not is_connection_error(e):
            raise
        logger.exception(f"Error fetching users: {e}")
        raise DatabaseUnavailableError() from e
    return [UserDetailResponse.model_validate(user) for user in found]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreate, users: Users) -> UserResponse:
    try:
        user = await users.create_user(payload)
    except SQLAlchemyError as e:
        logger.exception(f"Error in create_user: {e}")
        raise DatabaseOperationError(str(e)) from e
    return UserResponse.model_validate(user)


@router.get("/firebase/{firebase_uid}", response_model=UserDetailResponse)
async def get_user_by_firebase_uid(firebase_uid: str, users: Users) -> UserDetailResponse:
    try:
        user = await users.get_by_firebase_uid(firebase_uid)
    except SQLAlchemyError as e:
        logger.exception(f"Error fetching user by Firebase UID: {e}")
        raise DatabaseOperationError("Internal server error") from e
    return UserDetailResponse.model_validate(user)


@router.api_route("/firebase/{firebase_uid}", methods=["PUT", "PATCH"], response_model=UserWithSkillsResponse)
async def update_user_by_firebase_uid(
    firebase_uid: str, payload: UserProfileUpdate, users: Users
) -> UserWithSkillsResponse:
    """Update the profile, creating the user if this external id is new."""
    try:
        user = await users.upsert_user(firebase_uid, payload)
    except SQLAlchemyError as e:
        logger.exception(f"Error in update_user_by_firebase_uid: {e}")
        raise DatabaseOperationError(str(e)) from e
    return UserWithSkillsResponse.model_validate(user)


@router.get("/firebase/{firebase_uid}/projects", response_model=list[ProjectResponse])
async def get_user_projects(firebase_uid: str, users: Users) -> list[ProjectResponse]:
    try:
        projects = await users.get_owned_projects(firebase_uid=firebase_uid)
    except SQLAlchemyError as e:
        logger.exception(f"Error fetching user projects: {e}")
        raise DatabaseOperationError("Failed to fetch user projects") from e
    return [ProjectResponse.model_validate(p) for p in projects]


@router.get("/firebase/{firebase_uid}/collaborations", response_model=list[ProjectWithCreatorResponse])
async def get_user_collaborations(firebase_uid: str, users: Users) -> list[ProjectWithCreatorResponse]:
    try:
        projects = await users.get_collaborations(firebase_uid=firebase_uid)
    except SQLAlchemyError as e:
        logger.exception(f"Error fetching user collaborations: {e}")
        raise DatabaseOperationError("Failed to fetch user collaborations") from e
    return [ProjectWithCreatorResponse.model_validate(p) for p in projects]


@router.get("/{user_id}/collaborations", response_model=list[ProjectWithCreatorResponse])
async def get_user_collaborations_by_id(user_id: str, users: Users) -> list[ProjectWithCreatorResponse]:
    parsed_id = parse_uuid(user_id)
    if parsed_id is None:
        raise UserNotFoundError()
    try:
        projects = await users.get_collaborations(user_id=parsed_id)
    except SQLAlchemyError as e:
        logger.exception(f"Error fetching user collaborations by ID: {e}")
        raise DatabaseOperationError("Failed to fetch user collaborations") from e
    return [ProjectWithCreatorResponse.model_validate(p) for p in projects]


@router.get("/{user_id}/projects", response_model=list[ProjectResponse])
async def get_user_projects_by_id(user_id: str, users: Users) -> list[ProjectResponse]:
    parsed_id = parse_uuid(user_id)
    if parsed_id is None:
        raise UserNotFoundError()
    try:
        projects = await users.get_owned_projects(user_id=parsed_id)
    except SQLAlchemyError as e:
        logger.exception(f"Error fetching user projects by ID: {e}")
        raise DatabaseOperationError("Failed to fetch user projects") from e
    return [ProjectResponse.model_validate(p) for p in projects]
