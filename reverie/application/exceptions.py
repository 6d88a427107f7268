"""
Application exceptions for the Reverie application.

Repository errors are raised by storage adapters and always carry a message
string, never the driver's own exception type. The service layer lifts every
repository error into a single TechnicalError.
"""

from reverie.domain.exceptions import ReverieException


# Repository Exceptions
class RepositoryError(ReverieException):
    """Base exception for storage adapter failures."""

    def __init__(self, message: str):
        super().__init__(message, "REPOSITORY_ERROR")


class CreateUserError(RepositoryError):
    """User could not be persisted (e.g. name already taken)."""


class CreateProjectError(RepositoryError):
    """Project could not be persisted (e.g. unknown owner, name taken)."""


class CreateLogError(RepositoryError):
    """Log entry could not be persisted (e.g. unknown project or author)."""


class QueryError(RepositoryError):
    """A read or list operation failed."""


# Service Exceptions
class ServiceError(ReverieException):
    """Base exception for LogService operations."""


class TechnicalError(ServiceError):
    """Raised when the underlying storage fails."""

    def __init__(self, message: str):
        super().__init__(f"error: {message}", "TECHNICAL_ERROR", {"reason": message})


class UserNotFoundError(ServiceError):
    """User does not exist. Raised by lookup endpoints, never by LogService."""

    def __init__(self, user: str):
        super().__init__("User not found", "USER_NOT_FOUND", {"user": user})


class ProjectNotFoundError(ServiceError):
    """Project does not exist. Raised by lookup endpoints, never by LogService."""

    def __init__(self, project: str):
        super().__init__("Project not found", "PROJECT_NOT_FOUND", {"project": project})


class NoReadAccessError(ServiceError):
    """Reserved for read authorization checks."""

    def __init__(self, username: str, project_name: str):
        super().__init__(
            f"{username} has no read access on {project_name}",
            "NO_READ_ACCESS",
            {"username": username, "project_name": project_name},
        )


class NoWriteAccessError(ServiceError):
    """Reserved for write authorization checks."""

    def __init__(self, username: str, project_name: str):
        super().__init__(
            f"{username} has no write access on {project_name}",
            "NO_WRITE_ACCESS",
            {"username": username, "project_name": project_name},
        )
