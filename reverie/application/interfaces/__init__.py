from reverie.application.interfaces.repositories import (CreateLogRequest,
                                                        CreateProjectRequest,
                                                        CreateUserRequest,
                                                        ILogRepository,
                                                        IProjectRepository,
                                                        IUserRepository)

__all__ = [
    "CreateUserRequest",
    "CreateProjectRequest",
    "CreateLogRequest",
    "IUserRepository",
    "IProjectRepository",
    "ILogRepository",
]
