from dataclasses import dataclass

from reverie.domain.entities.metadata import Metadata
from reverie.domain.value_objects import ProjectId, ProjectName, UserId


@dataclass(frozen=True)
class Project:
    """
    Domain entity for Project

    The owning user is ``meta.author``; it is referenced by id only.
    """

    id: ProjectId
    meta: Metadata
    name: ProjectName

    @classmethod
    def create(cls, name: ProjectName, owner: UserId) -> "Project":
        """Create a new project owned by ``owner``"""
        return cls(id=ProjectId.create(), meta=Metadata.new(owner), name=name)

    @property
    def owner(self) -> UserId:
        return self.meta.author
