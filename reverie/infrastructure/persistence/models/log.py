import uuid
from typing import Any

from sqlalchemy import Connection, ForeignKey, Index, Text, Uuid, event
from sqlalchemy.orm import Mapped, Mapper, mapped_column

from reverie.domain.entities import Log
from reverie.domain.value_objects import EntryId, ProjectId
from reverie.infrastructure.persistence.database import Base
from reverie.infrastructure.persistence.models.mixins import (MetadataMixin,
                                                              UuidMixin)


class LogRecord(UuidMixin, MetadataMixin, Base):
    """
    Stored log entry.

    Note: Log entries are append-only and cannot be modified after creation.
    The owning project lives here, not on the domain Log.
    """

    __tablename__ = "log"

    project: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("project.id"), nullable=False, index=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (Index("ix_log_project_created", "project", "created"),)

    @classmethod
    def from_entity(cls, log: Log, project: ProjectId) -> "LogRecord":
        return cls(
            id=log.id.value,
            project=project.value,
            text=log.text,
            **MetadataMixin.columns_from(log.meta),
        )

    def to_entity(self) -> Log:
        return Log(id=EntryId(self.id), meta=self.to_metadata(), text=self.text)


# Prevent updates to log entries at ORM level (logs are append-only)
@event.listens_for(LogRecord, "before_update")
def prevent_log_updates(
    _mapper: Mapper[Any],
    _connection: Connection,
    _target: "LogRecord",
) -> None:
    raise ValueError("Log entries are append-only and cannot be updated.")
