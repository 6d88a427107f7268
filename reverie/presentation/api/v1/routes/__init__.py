from reverie.presentation.api.v1.routes import logs, projects, users

__all__ = ["logs", "projects", "users"]
