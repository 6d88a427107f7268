"""Domain entities."""

from reverie.domain.entities.log import Log
from reverie.domain.entities.metadata import Metadata
from reverie.domain.entities.project import Project
from reverie.domain.entities.user import User

__all__ = [
    "Log",
    "Metadata",
    "Project",
    "User",
]
