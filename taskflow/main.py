"""TaskFlow API: FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskflow import models  # noqa: F401  registers tables on Base.metadata
from taskflow.api.error_handlers import register_error_handlers
from taskflow.api.v1 import auth, boards, columns, health, tasks
from taskflow.config import get_settings
from taskflow.database import Base, engine
from taskflow.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.APP_NAME} API started")
    yield
    logger.info(f"{settings.APP_NAME} API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=f"{settings.APP_NAME} API", version=settings.APP_VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(boards.router, prefix="/api/boards", tags=["boards"])
    app.include_router(columns.router, prefix="/api/columns", tags=["columns"])
    app.include_router(tasks.router, prefix="/api/tasks", tags=["tasks"])

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("taskflow.main:app", host=settings.HOST, port=settings.PORT)
