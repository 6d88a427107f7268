from dataclasses import dataclass
from typing import ClassVar

from reverie.domain.enums import InvalidNameReason
from reverie.domain.exceptions import (InvalidProjectNameError,
                                       InvalidUsernameError)


def _length_violation(value: str, min_length: int, max_length: int) -> InvalidNameReason | None:
    # len() counts code points, so multi-byte characters count once
    length = len(value)
    if length < min_length:
        return InvalidNameReason.TOO_SHORT
    if length > max_length:
        return InvalidNameReason.TOO_LONG
    return None


@dataclass(frozen=True)
class Username:
    """
    Value object for a username (SRP - username validation)

    Usernames must be:
    - the reserved default identity "me", or
    - 6-24 characters
    """

    value: str

    RESERVED: ClassVar[str] = "me"
    MIN_LENGTH: ClassVar[int] = 6
    MAX_LENGTH: ClassVar[int] = 24

    def __post_init__(self):
        if self.value == self.RESERVED:
            return
        reason = _length_violation(self.value, self.MIN_LENGTH, self.MAX_LENGTH)
        if reason is not None:
            raise InvalidUsernameError(self.value, reason)

    @classmethod
    def parse(cls, value: str) -> "Username":
        """Validate raw text into a Username (raises InvalidUsernameError)"""
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProjectName:
    """Value object for a project name: 3-64 characters"""

    value: str

    MIN_LENGTH: ClassVar[int] = 3
    MAX_LENGTH: ClassVar[int] = 64

    def __post_init__(self):
        reason = _length_violation(self.value, self.MIN_LENGTH, self.MAX_LENGTH)
        if reason is not None:
            raise InvalidProjectNameError(self.value, reason)

    @classmethod
    def parse(cls, value: str) -> "ProjectName":
        """Validate raw text into a ProjectName (raises InvalidProjectNameError)"""
        return cls(value)

    def __str__(self) -> str:
        return self.value
