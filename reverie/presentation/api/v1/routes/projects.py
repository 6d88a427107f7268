from typing import Annotated

from fastapi import APIRouter, Depends, status

from reverie.application.exceptions import ProjectNotFoundError
from reverie.application.services.log_service import LogService
from reverie.domain.value_objects import ProjectId, ProjectName, UserId
from reverie.presentation.api.dependencies import get_log_service
from reverie.presentation.api.v1.schemas.project import (ProjectCreate,
                                                         ProjectResponse)

router = APIRouter()


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate,
    service: Annotated[LogService, Depends(get_log_service)],
):
    """
    Create a new project.

    An unknown owner or an already used name is rejected by storage and
    answered with 500 (technical error); nothing is pre-checked here.
    """
    project = await service.new_project(
        ProjectName.parse(data.project_name), UserId.validate(data.owner)
    )
    return ProjectResponse.from_entity(project)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    service: Annotated[LogService, Depends(get_log_service)],
):
    """Get a project by ID"""
    project = await service.project_by_id(ProjectId.validate(project_id))
    if not project:
        raise ProjectNotFoundError(project_id)
    return ProjectResponse.from_entity(project)
