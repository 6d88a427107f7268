from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from reverie.application.services.log_service import LogService
from reverie.domain.value_objects import ProjectId, UserId
from reverie.presentation.api.dependencies import get_log_service
from reverie.presentation.api.v1.schemas.log import LogCreate, LogResponse
from reverie.presentation.api.v1.schemas.pagination import (PagedResponse,
                                                            PageQuery)

router = APIRouter()


@router.post(
    "/{project_id}/logs", response_model=LogResponse, status_code=status.HTTP_201_CREATED
)
async def add_log(
    project_id: str,
    data: LogCreate,
    service: Annotated[LogService, Depends(get_log_service)],
):
    """Append a log entry to a project"""
    log = await service.add_log(
        UserId.validate(data.author), ProjectId.validate(project_id), data.text
    )
    return LogResponse.from_entity(log)


@router.get("/{project_id}/logs", response_model=PagedResponse[LogResponse])
async def project_logs(
    project_id: str,
    service: Annotated[LogService, Depends(get_log_service)],
    query: Annotated[PageQuery, Query()],
):
    """
    Get one page of a project's logs, oldest first.

    Query parameters: page (default 1), size (default 100).
    """
    paged = await service.logs(ProjectId.validate(project_id), query.to_page())
    return PagedResponse[LogResponse](
        page=paged.page, data=[LogResponse.from_entity(log) for log in paged.data]
    )
