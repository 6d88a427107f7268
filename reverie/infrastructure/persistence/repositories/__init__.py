""" Repository module for the persistence layer. """

from reverie.infrastructure.persistence.repositories.base import BaseRepository
from reverie.infrastructure.persistence.repositories.log_repo import SqlLogRepository
from reverie.infrastructure.persistence.repositories.memory import (
    InMemoryLogRepository, InMemoryProjectRepository, InMemoryStore,
    InMemoryUserRepository)
from reverie.infrastructure.persistence.repositories.project_repo import SqlProjectRepository
from reverie.infrastructure.persistence.repositories.user_repo import SqlUserRepository

__all__ = [
    "BaseRepository",
    "SqlUserRepository",
    "SqlProjectRepository",
    "SqlLogRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryProjectRepository",
    "InMemoryLogRepository",
]
