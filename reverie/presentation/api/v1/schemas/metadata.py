from datetime import datetime

from pydantic import BaseModel

from reverie.domain.entities import Metadata


class MetadataResponse(BaseModel):
    """Audit fields shared by projects and log entries"""

    author: str
    created: int  # nanoseconds since the Unix epoch
    created_at: datetime
    version: int
    revision: int

    @classmethod
    def from_metadata(cls, meta: Metadata) -> "MetadataResponse":
        return cls(
            author=str(meta.author),
            created=meta.created,
            created_at=meta.created_at,
            version=meta.version,
            revision=meta.revision,
        )
