"""Tests for the UUID version 7 generator"""

import time
import uuid

from reverie.shared.utils import generate_uuid7, uuid7_unix_ms

# 2023-01-01T12:00:00Z
KNOWN_MS = 1_672_574_400_000


def test_layout():
    value = generate_uuid7()

    assert type(value) is uuid.UUID
    assert value.version == 7
    assert value.variant == uuid.RFC_4122


def test_successive_values_increase():
    """
    GIVEN identifiers generated one after the other
    WHEN they are compared
    THEN each is greater than the previous one.
    """
    values = [generate_uuid7() for _ in range(200)]

    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_unix_ms_is_read_from_leading_bits():
    value = uuid.UUID(int=KNOWN_MS << 80 | 7 << 76 | 0b10 << 62 | 0x1234)

    assert uuid7_unix_ms(value) == KNOWN_MS


def test_unix_ms_of_generated_value_is_recent():
    before_ms = time.time_ns() // 1_000_000
    value = generate_uuid7()

    assert before_ms <= uuid7_unix_ms(value) <= before_ms + 5_000
