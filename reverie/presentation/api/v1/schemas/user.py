from datetime import datetime

from pydantic import BaseModel, Field

from reverie.domain.entities import User


class UserCreate(BaseModel):
    """Schema for user creation (length rules are enforced by Username)"""

    username: str = Field(..., description="6-24 characters, or the reserved name 'me'")


class UserResponse(BaseModel):
    """Schema for user responses"""

    id: str
    name: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        """Convert domain entity to response schema"""
        return cls(id=str(user.id), name=user.name.value, created_at=user.id.timestamp())
