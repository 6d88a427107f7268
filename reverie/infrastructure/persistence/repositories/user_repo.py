from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from reverie.application.exceptions import CreateUserError
from reverie.application.interfaces.repositories import CreateUserRequest
from reverie.domain.entities import User
from reverie.domain.pagination import Page, Paged, to_paged
from reverie.domain.value_objects import UserId, Username
from reverie.infrastructure.persistence.models.user import UserRecord
from reverie.infrastructure.persistence.repositories.base import BaseRepository


class SqlUserRepository(BaseRepository[UserRecord]):
    """Repository for User operations"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        super().__init__(session_factory, UserRecord)

    async def create(self, request: CreateUserRequest) -> User:
        """Create a new user (raises CreateUserError if the name is taken)"""
        user = User.create(request.username)
        await self._insert(UserRecord.from_entity(user), CreateUserError)
        return user

    async def get_by_name(self, name: Username) -> User | None:
        """Get user by unique name"""
        record = await self._get_one(UserRecord.name == name.value)
        return record.to_entity() if record else None

    async def get_by_id(self, user_id: UserId) -> User | None:
        record = await self._get_by_id(user_id.value)
        return record.to_entity() if record else None

    async def list(self, page: Page) -> Paged[User]:
        """Get one page of users ordered by id (creation order)"""
        records = await self._list(order_by=(UserRecord.id,), skip=page.offset(), limit=page.size)
        return to_paged([record.to_entity() for record in records], page)
