from reverie.infrastructure.persistence.models.log import LogRecord
# Mixins for model composition
from reverie.infrastructure.persistence.models.mixins import (MetadataMixin,
                                                              UuidMixin)
from reverie.infrastructure.persistence.models.project import ProjectRecord
from reverie.infrastructure.persistence.models.user import UserRecord

__all__ = [
    # Models
    "UserRecord",
    "ProjectRecord",
    "LogRecord",
    # Mixins
    "UuidMixin",
    "MetadataMixin",
]
