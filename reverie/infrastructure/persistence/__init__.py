from reverie.infrastructure.persistence.database import (Base,
                                                         create_engine,
                                                         create_session_factory,
                                                         init_models)
from reverie.infrastructure.persistence.factory import (create_memory_service,
                                                        create_sql_service)

__all__ = [
    "Base",
    "create_engine",
    "create_session_factory",
    "init_models",
    "create_sql_service",
    "create_memory_service",
]
