from pydantic import BaseModel, Field

from reverie.domain.entities import Log
from reverie.presentation.api.v1.schemas.metadata import MetadataResponse


class LogCreate(BaseModel):
    """Schema for appending a log entry to a project"""

    author: str = Field(..., description="Id of the authoring user")
    text: str


class LogResponse(BaseModel):
    """Schema for log entry responses"""

    id: str
    text: str
    meta: MetadataResponse

    @classmethod
    def from_entity(cls, log: Log) -> "LogResponse":
        return cls(id=str(log.id), text=log.text, meta=MetadataResponse.from_metadata(log.meta))
