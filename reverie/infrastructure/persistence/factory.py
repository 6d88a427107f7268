"""
Service composition.

Picks one repository family and injects it into a LogService. The choice is
made once, when the transport starts, never per call.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from reverie.application.services.log_service import LogService
from reverie.infrastructure.persistence.repositories import (
    InMemoryLogRepository, InMemoryProjectRepository, InMemoryStore,
    InMemoryUserRepository, SqlLogRepository, SqlProjectRepository,
    SqlUserRepository)


def create_sql_service(session_factory: async_sessionmaker[AsyncSession]) -> LogService:
    """LogService backed by the SQL database behind ``session_factory``"""
    return LogService(
        user_repo=SqlUserRepository(session_factory),
        project_repo=SqlProjectRepository(session_factory),
        log_repo=SqlLogRepository(session_factory),
    )


def create_memory_service(store: InMemoryStore | None = None) -> LogService:
    """LogService backed by process memory (nothing is persisted)"""
    store = store or InMemoryStore()
    return LogService(
        user_repo=InMemoryUserRepository(store),
        project_repo=InMemoryProjectRepository(store),
        log_repo=InMemoryLogRepository(store),
    )
