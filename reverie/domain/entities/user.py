"""
User domain entity.

A user is the author of projects and log entries. Users are created once and
never change afterwards.
"""

from dataclasses import dataclass

from reverie.domain.value_objects import UserId, Username


@dataclass(frozen=True)
class User:
    """Domain entity for User (business concept, independent of storage)"""

    id: UserId
    name: Username

    @classmethod
    def create(cls, name: Username) -> "User":
        """Create a new user with a freshly generated id"""
        return cls(id=UserId.create(), name=name)
