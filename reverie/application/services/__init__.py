from reverie.application.services.log_service import LogService

__all__ = ["LogService"]
