"""
Domain layer - Enterprise Business Rules.

This is the innermost layer containing business entities, value objects,
pagination and domain exceptions. It has no dependencies on other layers.
"""

from reverie.domain.entities import Log, Metadata, Project, User
from reverie.domain.enums import InvalidNameReason
from reverie.domain.exceptions import (InvalidIdError, InvalidPageError,
                                       InvalidProjectNameError,
                                       InvalidUsernameError, ReverieException,
                                       ValidationException)
from reverie.domain.pagination import Page, Paged, get_page, to_paged
from reverie.domain.value_objects import (EntityId, EntryId, ProjectId,
                                          ProjectName, UserId, Username)

__all__ = [
    # Entities
    "Log",
    "Metadata",
    "Project",
    "User",
    # Value Objects
    "EntityId",
    "UserId",
    "ProjectId",
    "EntryId",
    "Username",
    "ProjectName",
    # Pagination
    "Page",
    "Paged",
    "get_page",
    "to_paged",
    # Enums
    "InvalidNameReason",
    # Exceptions
    "ReverieException",
    "ValidationException",
    "InvalidIdError",
    "InvalidUsernameError",
    "InvalidProjectNameError",
    "InvalidPageError",
]
