"""
In-memory repositories.

Dict-backed implementations of the repository protocols, sharing one
InMemoryStore. They enforce the same rules as the SQL schema (unique names,
known owners, projects and authors) and raise the same errors, so a LogService
behaves identically on either adapter family.

Mutations contain no awaits, so the event loop never interleaves them.
"""

from dataclasses import dataclass, field

from reverie.application.exceptions import (CreateLogError,
                                            CreateProjectError,
                                            CreateUserError)
from reverie.application.interfaces.repositories import (CreateLogRequest,
                                                        CreateProjectRequest,
                                                        CreateUserRequest)
from reverie.domain.entities import Log, Project, User
from reverie.domain.pagination import Page, Paged, to_paged
from reverie.domain.value_objects import (ProjectId, ProjectName, UserId,
                                          Username)


@dataclass
class InMemoryStore:
    """Records shared by the in-memory repositories"""

    users: dict[UserId, User] = field(default_factory=dict)
    projects: dict[ProjectId, Project] = field(default_factory=dict)
    # Logs per project, in insertion (= creation) order
    logs: dict[ProjectId, list[Log]] = field(default_factory=dict)


class InMemoryUserRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def create(self, request: CreateUserRequest) -> User:
        if await self.get_by_name(request.username) is not None:
            raise CreateUserError(f"user name already exists: {request.username}")
        user = User.create(request.username)
        self.store.users[user.id] = user
        return user

    async def get_by_name(self, name: Username) -> User | None:
        return next((u for u in self.store.users.values() if u.name == name), None)

    async def get_by_id(self, user_id: UserId) -> User | None:
        return self.store.users.get(user_id)

    async def list(self, page: Page) -> Paged[User]:
        users = sorted(self.store.users.values(), key=lambda u: u.id)
        return to_paged(users[page.offset() : page.offset() + page.size], page)


class InMemoryProjectRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def create(self, request: CreateProjectRequest) -> Project:
        if request.owner not in self.store.users:
            raise CreateProjectError(f"unknown owner: {request.owner}")
        if await self.get_by_name(request.project_name) is not None:
            raise CreateProjectError(f"project name already exists: {request.project_name}")
        project = Project.create(request.project_name, request.owner)
        self.store.projects[project.id] = project
        return project

    async def get_by_name(self, name: ProjectName) -> Project | None:
        return next((p for p in self.store.projects.values() if p.name == name), None)

    async def get_by_id(self, project_id: ProjectId) -> Project | None:
        return self.store.projects.get(project_id)

    async def list_for_user(self, user_id: UserId) -> list[Project]:
        owned = [p for p in self.store.projects.values() if p.owner == user_id]
        return sorted(owned, key=lambda p: (p.meta.created, p.id))


class InMemoryLogRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def create(self, request: CreateLogRequest) -> Log:
        if request.project not in self.store.projects:
            raise CreateLogError(f"unknown project: {request.project}")
        if request.author not in self.store.users:
            raise CreateLogError(f"unknown author: {request.author}")
        log = Log.create(request.author, request.text)
        self.store.logs.setdefault(request.project, []).append(log)
        return log

    async def list_for_project(self, project_id: ProjectId, page: Page) -> Paged[Log]:
        logs = self.store.logs.get(project_id, [])
        return to_paged(logs[page.offset() : page.offset() + page.size], page)
