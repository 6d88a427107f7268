"""
Reverie: timestamped, author-attributed logs grouped into projects.

The public surface is the LogService and the domain types it speaks.
"""

from reverie.application.services.log_service import LogService
from reverie.domain import (EntryId, Log, Metadata, Page, Paged, Project,
                            ProjectId, ProjectName, User, UserId, Username,
                            get_page)

__version__ = "0.1.0"

__all__ = [
    "LogService",
    "Log",
    "Metadata",
    "Project",
    "User",
    "EntryId",
    "ProjectId",
    "UserId",
    "ProjectName",
    "Username",
    "Page",
    "Paged",
    "get_page",
]
