"""
Log service orchestrating users, projects and log entries.

The service composes the three repository capabilities behind one facade.
It holds no state besides the repositories, so one instance can serve many
concurrent requests; isolation is left to the storage engine.

It does not re-validate its inputs (value objects already did) and does not
check that referenced users or projects exist before delegating. Every
repository failure comes back as a TechnicalError.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from reverie.application.exceptions import RepositoryError, TechnicalError
from reverie.application.interfaces.repositories import (CreateLogRequest,
                                                        CreateProjectRequest,
                                                        CreateUserRequest)
from reverie.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from reverie.application.interfaces.repositories import (
        ILogRepository, IProjectRepository, IUserRepository)
    from reverie.domain.entities import Log, Project, User
    from reverie.domain.pagination import Page, Paged
    from reverie.domain.value_objects import (ProjectId, ProjectName, UserId,
                                              Username)

logger = get_logger(__name__)


@contextmanager
def _technical_errors() -> Iterator[None]:
    """Lift repository errors into the service error taxonomy"""
    try:
        yield
    except RepositoryError as e:
        raise TechnicalError(e.message) from e


class LogService:
    """Log service following DIP - depends on repository protocols, not adapters"""

    def __init__(
        self,
        user_repo: "IUserRepository",
        project_repo: "IProjectRepository",
        log_repo: "ILogRepository",
    ) -> None:
        self.user_repo = user_repo
        self.project_repo = project_repo
        self.log_repo = log_repo

    async def new_user(self, username: "Username") -> "User":
        """
        Create a new user.

        Raises:
            TechnicalError: If the user could not be stored (e.g. name taken)
        """
        with _technical_errors():
            user = await self.user_repo.create(CreateUserRequest(username=username))
        logger.info("Created user %s (%s)", user.name, user.id)
        return user

    async def new_project(self, name: "ProjectName", owner: "UserId") -> "Project":
        """
        Create a new project owned by ``owner``.

        Raises:
            TechnicalError: If the project could not be stored
        """
        with _technical_errors():
            project = await self.project_repo.create(
                CreateProjectRequest(owner=owner, project_name=name)
            )
        logger.info("Created project %s (%s) for user %s", project.name, project.id, owner)
        return project

    async def add_log(self, author: "UserId", project: "ProjectId", text: str) -> "Log":
        """
        Append a log entry to a project.

        Raises:
            TechnicalError: If the entry could not be stored
        """
        with _technical_errors():
            log = await self.log_repo.create(
                CreateLogRequest(author=author, project=project, text=text)
            )
        logger.info("Added log %s to project %s", log.id, project)
        return log

    async def logs(self, project: "ProjectId", page: "Page") -> "Paged[Log]":
        """Get one page of a project's logs"""
        with _technical_errors():
            return await self.log_repo.list_for_project(project, page)

    async def projects_of(self, user: "UserId") -> list["Project"]:
        """Get all projects owned by a user"""
        with _technical_errors():
            return await self.project_repo.list_for_user(user)

    async def list_users(self, page: "Page") -> "Paged[User]":
        """List users one page at a time (administrative)"""
        with _technical_errors():
            return await self.user_repo.list(page)

    # Lookups used by the transports to resolve names and ids
    async def user_by_name(self, name: "Username") -> "User | None":
        with _technical_errors():
            return await self.user_repo.get_by_name(name)

    async def user_by_id(self, user_id: "UserId") -> "User | None":
        with _technical_errors():
            return await self.user_repo.get_by_id(user_id)

    async def project_by_name(self, name: "ProjectName") -> "Project | None":
        with _technical_errors():
            return await self.project_repo.get_by_name(name)

    async def project_by_id(self, project_id: "ProjectId") -> "Project | None":
        with _technical_errors():
            return await self.project_repo.get_by_id(project_id)
