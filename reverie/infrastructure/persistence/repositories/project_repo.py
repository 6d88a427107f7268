from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from reverie.application.exceptions import CreateProjectError
from reverie.application.interfaces.repositories import CreateProjectRequest
from reverie.domain.entities import Project
from reverie.domain.value_objects import ProjectId, ProjectName, UserId
from reverie.infrastructure.persistence.models.project import ProjectRecord
from reverie.infrastructure.persistence.repositories.base import BaseRepository


class SqlProjectRepository(BaseRepository[ProjectRecord]):
    """Repository for Project operations"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        super().__init__(session_factory, ProjectRecord)

    async def create(self, request: CreateProjectRequest) -> Project:
        """
        Create a new project.

        An unknown owner or a taken name is rejected by the schema and raised
        as CreateProjectError.
        """
        project = Project.create(request.project_name, request.owner)
        await self._insert(ProjectRecord.from_entity(project), CreateProjectError)
        return project

    async def get_by_name(self, name: ProjectName) -> Project | None:
        record = await self._get_one(ProjectRecord.name == name.value)
        return record.to_entity() if record else None

    async def get_by_id(self, project_id: ProjectId) -> Project | None:
        record = await self._get_by_id(project_id.value)
        return record.to_entity() if record else None

    async def list_for_user(self, user_id: UserId) -> list[Project]:
        """Get all projects owned by a user, oldest first"""
        records = await self._list(
            ProjectRecord.author == user_id.value,
            order_by=(ProjectRecord.created, ProjectRecord.id),
        )
        return [record.to_entity() for record in records]
