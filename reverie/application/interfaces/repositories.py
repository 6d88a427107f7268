"""
Repository interfaces (ports) for the application layer.

These protocols define the capabilities a storage engine must provide to back
a LogService. Following Dependency Inversion Principle (DIP): the service
depends on these contracts, adapters are chosen at composition time.

None of the capabilities checks that foreign identifiers exist; that is left
to the storage engine's referential integrity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from reverie.domain.entities import Log, Project, User
    from reverie.domain.pagination import Page, Paged
    from reverie.domain.value_objects import (ProjectId, ProjectName, UserId,
                                              Username)


@dataclass(frozen=True)
class CreateUserRequest:
    username: Username


@dataclass(frozen=True)
class CreateProjectRequest:
    owner: UserId
    project_name: ProjectName


@dataclass(frozen=True)
class CreateLogRequest:
    author: UserId
    project: ProjectId
    text: str


class IUserRepository(Protocol):
    """Protocol for user (author) repository (DIP)"""

    async def create(self, request: CreateUserRequest) -> User:
        """Persist a new user (raises CreateUserError)"""
        ...

    async def get_by_name(self, name: Username) -> User | None:
        """Get user by name"""
        ...

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID"""
        ...

    async def list(self, page: Page) -> Paged[User]:
        """List users one page at a time (administrative)"""
        ...


class IProjectRepository(Protocol):
    """Protocol for project repository (DIP)"""

    async def create(self, request: CreateProjectRequest) -> Project:
        """Persist a new project (raises CreateProjectError)"""
        ...

    async def get_by_name(self, name: ProjectName) -> Project | None:
        """Get project by name"""
        ...

    async def get_by_id(self, project_id: ProjectId) -> Project | None:
        """Get project by ID"""
        ...

    async def list_for_user(self, user_id: UserId) -> list[Project]:
        """Get all projects owned by a user"""
        ...


class ILogRepository(Protocol):
    """Protocol for log repository (DIP)"""

    async def create(self, request: CreateLogRequest) -> Log:
        """Append a log entry to a project (raises CreateLogError)"""
        ...

    async def list_for_project(self, project_id: ProjectId, page: Page) -> Paged[Log]:
        """Get one page of a project's logs, oldest first (raises QueryError)"""
        ...
