"""
Identifier value objects.

Every entity is keyed by a UUID version 7: the leading 48 bits hold the
creation time in Unix milliseconds, so identifiers sort in approximate
creation order and carry their own timestamp.
"""

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import ClassVar, Self

from reverie.domain.exceptions import InvalidIdError
from reverie.shared.utils.generators import (UUID7_VERSION, generate_uuid7,
                                             uuid7_unix_ms)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
# Last millisecond representable as a datetime (9999-12-31 23:59:59.999 UTC)
MAX_UNIX_MS = (datetime.max.replace(tzinfo=UTC) - _EPOCH) // timedelta(milliseconds=1)


@dataclass(frozen=True, order=True)
class EntityId:
    """Base value object for time-ordered identifiers (SRP - id validation)"""

    value: uuid.UUID

    kind: ClassVar[str] = "identifier"

    def __post_init__(self):
        if not isinstance(self.value, uuid.UUID) or self.value.version != UUID7_VERSION:
            raise InvalidIdError(self.kind, self.value)
        if uuid7_unix_ms(self.value) > MAX_UNIX_MS:
            raise InvalidIdError(self.kind, self.value)

    @classmethod
    def create(cls) -> Self:
        """Generate a fresh identifier"""
        return cls(generate_uuid7())

    @classmethod
    def validate(cls, raw: uuid.UUID | str | int) -> Self:
        """
        Build an identifier from an externally supplied value.

        Accepts a UUID, its canonical or hex text, or its 128-bit integer.

        Raises:
            InvalidIdError: If the value is malformed or not a version 7 UUID
        """
        try:
            if isinstance(raw, uuid.UUID):
                value = raw
            elif isinstance(raw, str):
                value = uuid.UUID(raw.strip())
            elif isinstance(raw, int) and not isinstance(raw, bool):
                value = uuid.UUID(int=raw)
            else:
                raise InvalidIdError(cls.kind, raw)
        except ValueError as e:
            raise InvalidIdError(cls.kind, raw) from e
        return cls(value)

    def timestamp(self) -> datetime:
        """Creation instant encoded in the identifier (millisecond precision, UTC)"""
        unix_ms = uuid7_unix_ms(self.value)
        return datetime.fromtimestamp(unix_ms // 1000, tz=UTC) + timedelta(
            milliseconds=unix_ms % 1000
        )

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class UserId(EntityId):
    """Identifier of a user (author)"""

    kind: ClassVar[str] = "user id"


@dataclass(frozen=True, order=True)
class ProjectId(EntityId):
    """Identifier of a project"""

    kind: ClassVar[str] = "project id"


@dataclass(frozen=True, order=True)
class EntryId(EntityId):
    """Identifier of a log entry"""

    kind: ClassVar[str] = "entry id"
