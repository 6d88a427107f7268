"""
Log domain entity.

A log is a timestamped, author-attributed line of text appended to a project.
The owning project is not part of the entity: repositories receive it
alongside the log when persisting and filter on it when listing.
"""

from dataclasses import dataclass

from reverie.domain.entities.metadata import Metadata
from reverie.domain.value_objects import EntryId, UserId


@dataclass(frozen=True)
class Log:
    """Domain entity for a log entry (append-only)"""

    id: EntryId
    meta: Metadata
    text: str

    @classmethod
    def create(cls, author: UserId, text: str) -> "Log":
        """Create a new log entry written by ``author``"""
        return cls(id=EntryId.create(), meta=Metadata.new(author), text=text)

    @property
    def author(self) -> UserId:
        return self.meta.author
