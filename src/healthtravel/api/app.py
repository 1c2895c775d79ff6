"""FastAPI application factory.

API layer:
- Validates inputs, reads/writes DB through the domain layer
- Maps domain failures to HTTP status codes
- Forbidden: business rules, direct SQL
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Generator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from healthtravel.core.config import configure_logging, get_settings
from healthtravel.core.errors import NotFoundError, StorageError, ValidationError
from healthtravel.db.repo import DbSession
from healthtravel.db.session import get_session, init_db

logger = logging.getLogger(__name__)

GENERIC_STORAGE_MESSAGE = "Internal storage error. Please try again later."


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.db_path)
    try:
        yield session
    finally:
        session.close()


def _register_error_handlers(app: FastAPI) -> None:
    """Map domain and storage failures to JSON error responses."""

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "errors": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = [
            f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content={"detail": "Invalid request body.", "errors": jsonable_encoder(errors)},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error(
            f"{request.method} {request.url.path} failed: {exc}",
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"detail": GENERIC_STORAGE_MESSAGE})

    @app.exception_handler(SQLAlchemyError)
    async def handle_sqlalchemy_error(request: Request, exc: SQLAlchemyError):
        logger.error(
            f"{request.method} {request.url.path} failed: {exc}",
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"detail": GENERIC_STORAGE_MESSAGE})


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        db_path: Optional path to database file. Defaults to the
            configured db_path setting.

    Returns:
        Configured FastAPI application.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(app.state.db_path)
        yield

    app = FastAPI(
        title=settings.app_name,
        description="Health-travel information per city",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.db_path = db_path if db_path is not None else settings.db_path

    # Add CORS middleware for the client app
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)

    # Include routes
    from healthtravel.api.routes import cities, emergency, facilities, insurance, ratings

    app.include_router(cities.router, prefix="/api")
    app.include_router(ratings.router, prefix="/api")
    app.include_router(facilities.router, prefix="/api")
    app.include_router(emergency.router, prefix="/api")
    app.include_router(insurance.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
