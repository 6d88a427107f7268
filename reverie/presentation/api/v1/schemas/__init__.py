from reverie.presentation.api.v1.schemas.log import LogCreate, LogResponse
from reverie.presentation.api.v1.schemas.metadata import MetadataResponse
from reverie.presentation.api.v1.schemas.pagination import (PagedResponse,
                                                            PageQuery)
from reverie.presentation.api.v1.schemas.project import (ProjectCreate,
                                                         ProjectResponse)
from reverie.presentation.api.v1.schemas.user import UserCreate, UserResponse

__all__ = [
    "LogCreate",
    "LogResponse",
    "MetadataResponse",
    "PageQuery",
    "PagedResponse",
    "ProjectCreate",
    "ProjectResponse",
    "UserCreate",
    "UserResponse",
]
