from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from reverie.application.exceptions import CreateLogError
from reverie.application.interfaces.repositories import CreateLogRequest
from reverie.domain.entities import Log
from reverie.domain.pagination import Page, Paged, to_paged
from reverie.domain.value_objects import ProjectId
from reverie.infrastructure.persistence.models.log import LogRecord
from reverie.infrastructure.persistence.repositories.base import BaseRepository


class SqlLogRepository(BaseRepository[LogRecord]):
    """Repository for append-only log entries"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        super().__init__(session_factory, LogRecord)

    async def create(self, request: CreateLogRequest) -> Log:
        """
        Append a log entry.

        Foreign keys reject unknown projects and authors (CreateLogError).
        """
        log = Log.create(request.author, request.text)
        await self._insert(LogRecord.from_entity(log, request.project), CreateLogError)
        return log

    async def list_for_project(self, project_id: ProjectId, page: Page) -> Paged[Log]:
        """Get one page of a project's logs, oldest first"""
        records = await self._list(
            LogRecord.project == project_id.value,
            order_by=(LogRecord.created, LogRecord.id),
            skip=page.offset(),
            limit=page.size,
        )
        return to_paged([record.to_entity() for record in records], page)
