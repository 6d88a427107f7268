"""
SQLAlchemy mixins for common model patterns.

These mixins provide reusable column definitions so that every record stores
identifiers and audit metadata the same way.

    - UuidMixin: UUID (version 7) primary key, generated by the domain
    - MetadataMixin: author, created (ns since epoch), version, revision
"""
import uuid

from sqlalchemy import BigInteger, ForeignKey, SmallInteger, Uuid
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from reverie.domain.entities import Metadata
from reverie.domain.value_objects import UserId


class UuidMixin:
    """
    Mixin for models keyed by a domain identifier.

    Provides:
        - id: UUID primary key. No default: ids are created by the domain
          entity so they round-trip exactly.
    """

    @declared_attr
    def id(cls) -> Mapped[uuid.UUID]:
        return mapped_column(Uuid, primary_key=True)


class MetadataMixin:
    """
    Mixin for authored records.

    Provides:
        - author: Foreign key to the user who created the record
        - created: Creation time in nanoseconds since the Unix epoch
        - version: Schema/content version, 0 on creation
        - revision: Edit counter, 0 on creation

    Usage:
        class MyRecord(UuidMixin, MetadataMixin, Base):
            __tablename__ = "my_record"
            # ... other columns

        record = MyRecord(id=entity.id.value, **MetadataMixin.columns_from(entity.meta))
    """

    @declared_attr
    def author(cls) -> Mapped[uuid.UUID]:
        return mapped_column(Uuid, ForeignKey("user.id"), nullable=False, index=True)

    @declared_attr
    def created(cls) -> Mapped[int]:
        return mapped_column(BigInteger, nullable=False, index=True)

    @declared_attr
    def version(cls) -> Mapped[int]:
        return mapped_column(SmallInteger, default=0, nullable=False)

    @declared_attr
    def revision(cls) -> Mapped[int]:
        return mapped_column(SmallInteger, default=0, nullable=False)

    @staticmethod
    def columns_from(meta: Metadata) -> dict[str, object]:
        """Column values for a domain Metadata"""
        return {
            "author": meta.author.value,
            "created": meta.created,
            "version": meta.version,
            "revision": meta.revision,
        }

    def to_metadata(self) -> Metadata:
        return Metadata(
            author=UserId(self.author),
            created=self.created,
            version=self.version,
            revision=self.revision,
        )
