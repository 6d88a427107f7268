"""
Audit metadata shared by authored entities.

Only creation is modelled: revision and version start at zero and no code
path increments them, since log entries are append-only.
"""

import time
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from reverie.domain.exceptions import ValidationException
from reverie.domain.value_objects import UserId

INT16_MAX = 2**15 - 1
INT16_MIN = -(2**15)


@dataclass(frozen=True)
class Metadata:
    """Author, creation time (ns since epoch), version and revision of an entity"""

    author: UserId
    created: int
    version: int = 0
    revision: int = 0

    def __post_init__(self):
        for field in ("version", "revision"):
            value = getattr(self, field)
            if not INT16_MIN <= value <= INT16_MAX:
                raise ValidationException(f"Metadata {field} out of int16 range: {value}", field)

    @classmethod
    def new(cls, author: UserId) -> "Metadata":
        """Fresh metadata stamped with the current time"""
        return cls(author=author, created=time.time_ns())

    @property
    def created_at(self) -> datetime:
        """Creation time as an aware UTC datetime (microsecond precision)"""
        seconds, nanos = divmod(self.created, 1_000_000_000)
        return datetime.fromtimestamp(seconds, tz=UTC) + timedelta(microseconds=nanos // 1000)
