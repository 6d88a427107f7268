from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from reverie.application.exceptions import UserNotFoundError
from reverie.application.services.log_service import LogService
from reverie.domain.value_objects import UserId, Username
from reverie.infrastructure.config.settings import Settings, get_settings
from reverie.presentation.api.dependencies import get_log_service
from reverie.presentation.api.v1.schemas.pagination import (PagedResponse,
                                                            PageQuery)
from reverie.presentation.api.v1.schemas.project import ProjectResponse
from reverie.presentation.api.v1.schemas.user import UserCreate, UserResponse

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    service: Annotated[LogService, Depends(get_log_service)],
):
    """Create a new user"""
    user = await service.new_user(Username.parse(data.username))
    return UserResponse.from_entity(user)


@router.get("", response_model=PagedResponse[UserResponse])
async def list_users(
    service: Annotated[LogService, Depends(get_log_service)],
    settings: Annotated[Settings, Depends(get_settings)],
    query: Annotated[PageQuery, Query()],
):
    """List users one page at a time (administrative, disabled unless admin_enabled)"""
    if not settings.admin_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    paged = await service.list_users(query.to_page())
    return PagedResponse[UserResponse](
        page=paged.page, data=[UserResponse.from_entity(user) for user in paged.data]
    )


@router.get("/by-name/{name}", response_model=UserResponse)
async def get_user_by_name(
    name: str,
    service: Annotated[LogService, Depends(get_log_service)],
):
    """Get a user by name"""
    user = await service.user_by_name(Username.parse(name))
    if not user:
        raise UserNotFoundError(name)
    return UserResponse.from_entity(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: Annotated[LogService, Depends(get_log_service)],
):
    """Get a user by ID"""
    user = await service.user_by_id(UserId.validate(user_id))
    if not user:
        raise UserNotFoundError(user_id)
    return UserResponse.from_entity(user)


@router.get("/{user_id}/projects", response_model=list[ProjectResponse])
async def list_user_projects(
    user_id: str,
    service: Annotated[LogService, Depends(get_log_service)],
):
    """List the projects owned by a user (empty for unknown users)"""
    projects = await service.projects_of(UserId.validate(user_id))
    return [ProjectResponse.from_entity(project) for project in projects]
