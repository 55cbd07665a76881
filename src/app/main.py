import logging
from contextlib import asynccontextmanager
from typing import AsyncContextManager, Callable

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.app.api.cors import CorsMiddleware
from src.app.api.error_handlers import register_exception_handlers
from src.app.api.routes import clients, services, system
from src.app.config import get_settings
from src.app.containers import Container, WIRED_MODULES
from src.app.logging import configure_logging
from src.app.ui import routes as ui_routes

logger = logging.getLogger(__name__)

# Type alias for lifespan context manager
LifespanType = Callable[[FastAPI], AsyncContextManager[None]]


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - ensures the schema exists on startup."""
    container: Container = app.state.container
    config = container.config()
    logger.info("Starting %s...", config.app_name)

    db = container.database()
    if config.create_schema_on_startup:
        await db.create_schema()
        logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down %s...", config.app_name)
    await db.dispose()


def create_app(container: Container, lifespan: LifespanType = default_lifespan) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing settings, database and services.
        lifespan: Optional lifespan context manager. Defaults to default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=WIRED_MODULES)

    config = container.config()
    configure_logging(config.log_level)

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan,
        docs_url="/docs" if config.docs_enabled else None,
        redoc_url="/redoc" if config.docs_enabled else None,
        openapi_url="/openapi.json" if config.docs_enabled else None,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    cors_policy = container.cors_policy()
    app.add_middleware(CorsMiddleware, policy=cors_policy)
    register_exception_handlers(app, cors_policy)
    logger.info(
        "CORS: %s",
        "any origin" if cors_policy.allow_any_origin else ", ".join(cors_policy.allowed_origins),
    )

    # Include routers
    app.include_router(system.router)
    app.include_router(clients.router, prefix="/api")
    app.include_router(services.router, prefix="/api")

    if config.ui.enabled:
        app.include_router(ui_routes.router)

    @app.get("/", include_in_schema=False)
    async def root():
        if config.ui.enabled:
            return RedirectResponse(url="/ui/")
        return {"message": f"Welcome to {config.app_name}"}

    return app


container = Container()
app = create_app(container=container)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("src.app.main:app", host=settings.host, port=settings.port)
