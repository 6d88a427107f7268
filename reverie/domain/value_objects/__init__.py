"""Domain value objects."""

from reverie.domain.value_objects.identifiers import (EntityId, EntryId,
                                                      ProjectId, UserId)
from reverie.domain.value_objects.names import ProjectName, Username

__all__ = [
    "EntityId",
    "UserId",
    "ProjectId",
    "EntryId",
    "Username",
    "ProjectName",
]
