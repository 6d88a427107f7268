from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from reverie.domain.entities import Project
from reverie.domain.value_objects import ProjectId, ProjectName
from reverie.infrastructure.persistence.database import Base
from reverie.infrastructure.persistence.models.mixins import (MetadataMixin,
                                                              UuidMixin)


class ProjectRecord(UuidMixin, MetadataMixin, Base):
    """
    Stored project.

    Inherits from:
        - UuidMixin: id
        - MetadataMixin: author (owner), created, version, revision
    """

    __tablename__ = "project"

    name: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectRecord":
        return cls(
            id=project.id.value,
            name=project.name.value,
            **MetadataMixin.columns_from(project.meta),
        )

    def to_entity(self) -> Project:
        return Project(
            id=ProjectId(self.id),
            meta=self.to_metadata(),
            name=ProjectName(self.name),
        )
