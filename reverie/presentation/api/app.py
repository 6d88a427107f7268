from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from reverie.infrastructure.config.settings import Settings, get_settings
from reverie.infrastructure.persistence import (create_engine,
                                                create_session_factory,
                                                create_sql_service,
                                                init_models)
from reverie.presentation.api.error_handlers import register_error_handlers
from reverie.presentation.api.v1.routes import logs, projects, users
from reverie.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    The database engine and the SQL backed LogService are created in the
    lifespan handler and stored on ``app.state``.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan events for application initialization and cleanup"""
        setup_logging(settings.debug)

        engine = create_engine(settings.database_url, echo=settings.database_echo)
        await init_models(engine)
        app.state.engine = engine
        app.state.log_service = create_sql_service(create_session_factory(engine))
        logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))

        yield

        await engine.dispose()
        logger.info("Database engine disposed")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    register_error_handlers(app)

    # Routers
    app.include_router(users.router, prefix="/users", tags=["users"])
    app.include_router(projects.router, prefix="/projects", tags=["projects"])
    app.include_router(logs.router, prefix="/projects", tags=["logs"])

    @app.get("/")
    async def root():
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
        }

    @app.get("/health")
    async def health_check(request: Request):
        """
        Health check endpoint for load balancers and monitoring.

        Returns:
        - 200 OK if healthy
        - 503 Service Unavailable if the database cannot be reached
        """
        checks: dict[str, Any] = {
            "api": True,
            "database": None,  # None = no engine (e.g. in-memory service)
        }

        engine = getattr(request.app.state, "engine", None)
        if engine is not None:
            try:
                async with engine.connect() as conn:
                    await conn.execute(text("SELECT 1"))
                checks["database"] = True
            except SQLAlchemyError as e:
                logger.warning("Health check failed: %s", e)
                checks["database"] = False
                checks["error"] = str(e)
                return JSONResponse(
                    status_code=503, content={"status": "unhealthy", "checks": checks}
                )

        return {"status": "healthy", "checks": checks}

    return app
