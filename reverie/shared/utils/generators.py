import uuid

from uuid6 import UUID as UUIDv7
from uuid6 import uuid7

UUID7_VERSION = 7


def generate_uuid7() -> uuid.UUID:
    """Generate a time-ordered, collision-resistant unique identifier"""
    result = uuid7()
    assert result.version == UUID7_VERSION
    return uuid.UUID(int=result.int)


def uuid7_unix_ms(value: uuid.UUID) -> int:
    """Milliseconds since the Unix epoch encoded in a version 7 UUID"""
    return UUIDv7(int=value.int).time
