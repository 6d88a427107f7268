"""Tests for identifier value objects"""

import uuid
from datetime import UTC, datetime, timedelta

import pytest

from reverie.domain.exceptions import InvalidIdError, ValidationException
from reverie.domain.value_objects import EntryId, ProjectId, UserId
from reverie.domain.value_objects.identifiers import MAX_UNIX_MS


class TestEntityId:
    """Unit tests for UserId, ProjectId and EntryId."""

    def test_create_produces_version_7(self):
        user_id = UserId.create()

        assert user_id.value.version == 7
        assert user_id.value.variant == uuid.RFC_4122

    def test_ids_created_in_sequence_sort_in_creation_order(self):
        """
        GIVEN many identifiers created one after the other
        WHEN they are sorted
        THEN the order is the creation order.
        """
        ids = [EntryId.create() for _ in range(200)]

        assert sorted(ids) == ids
        assert len(set(ids)) == len(ids)

    def test_timestamp_is_creation_time(self):
        before = datetime.now(UTC)
        project_id = ProjectId.create()
        after = datetime.now(UTC)

        ts = project_id.timestamp()
        assert ts.tzinfo is UTC
        # Ids minted in a burst may run a few ms ahead of the clock to stay ordered
        assert before - timedelta(milliseconds=1) <= ts <= after + timedelta(seconds=1)

    def test_str_is_canonical_uuid_text(self):
        user_id = UserId.create()

        assert str(user_id) == str(user_id.value)
        assert UserId.validate(str(user_id)) == user_id

    @pytest.mark.parametrize("as_raw", [lambda u: u, str, lambda u: u.hex, lambda u: u.int])
    def test_validate_accepts_uuid_text_hex_and_int(self, as_raw):
        user_id = UserId.create()

        assert UserId.validate(as_raw(user_id.value)) == user_id

    def test_validate_rejects_other_uuid_versions(self):
        """
        GIVEN a well-formed UUID of version 4
        WHEN it is validated as an identifier
        THEN InvalidIdError is raised and carries the offending value.
        """
        raw = uuid.uuid4()

        with pytest.raises(InvalidIdError) as exc_info:
            UserId.validate(raw)

        assert exc_info.value.kind == "user id"
        assert exc_info.value.value == raw
        assert isinstance(exc_info.value, ValidationException)

    @pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234", 2**130, None, 1.5])
    def test_validate_rejects_malformed_values(self, raw):
        with pytest.raises(InvalidIdError):
            ProjectId.validate(raw)

    def test_direct_construction_checks_version(self):
        with pytest.raises(InvalidIdError):
            EntryId(uuid.uuid4())

    def test_kinds_never_compare_equal(self):
        value = UserId.create().value

        assert UserId(value) == UserId(value)
        assert UserId(value) != ProjectId(value)
        assert EntryId(value) != ProjectId(value)

    def test_ids_are_hashable_dict_keys(self):
        user_id = UserId.create()
        lookup = {user_id: "alice"}

        assert lookup[UserId(user_id.value)] == "alice"

    def test_timestamp_past_datetime_range_is_rejected(self):
        """
        GIVEN a version 7 UUID whose millisecond field lies after year 9999
        WHEN it is validated
        THEN InvalidIdError is raised instead of accepting an id without a timestamp.
        """
        with pytest.raises(InvalidIdError):
            UserId.validate("ffffffff-ffff-7fff-bfff-ffffffffffff")

    def test_last_representable_millisecond_is_accepted(self):
        # 9999-12-31 23:59:59.999 UTC
        raw = uuid.UUID(int=MAX_UNIX_MS << 80 | 7 << 76 | 0b10 << 62)

        entry_id = EntryId.validate(raw)

        assert entry_id.timestamp() == datetime(9999, 12, 31, 23, 59, 59, 999000, tzinfo=UTC)
