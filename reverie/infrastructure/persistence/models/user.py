from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from reverie.domain.entities import User
from reverie.domain.value_objects import UserId, Username
from reverie.infrastructure.persistence.database import Base
from reverie.infrastructure.persistence.models.mixins import UuidMixin


class UserRecord(UuidMixin, Base):
    """
    Stored user (author).

    Users carry no metadata: they are the root the other records point to.
    """

    __tablename__ = "user"

    name: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)

    @classmethod
    def from_entity(cls, user: User) -> "UserRecord":
        return cls(id=user.id.value, name=user.name.value)

    def to_entity(self) -> User:
        return User(id=UserId(self.id), name=Username(self.name))
