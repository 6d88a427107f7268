from fastapi import Request

from reverie.application.services.log_service import LogService


def get_log_service(request: Request) -> LogService:
    """
    Log service dependency (singleton)

    Returns the service built on app startup in the lifespan handler.
    Tests override this dependency with an in-memory service.
    """
    return request.app.state.log_service
