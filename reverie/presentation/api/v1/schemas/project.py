from pydantic import BaseModel, Field

from reverie.domain.entities import Project
from reverie.presentation.api.v1.schemas.metadata import MetadataResponse


class ProjectCreate(BaseModel):
    """Schema for project creation"""

    owner: str = Field(..., description="Id of the owning user")
    project_name: str = Field(..., description="3-64 characters")


class ProjectResponse(BaseModel):
    """Schema for project responses"""

    id: str
    name: str
    meta: MetadataResponse

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectResponse":
        return cls(
            id=str(project.id),
            name=project.name.value,
            meta=MetadataResponse.from_metadata(project.meta),
        )
