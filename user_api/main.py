"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from user_api.config import settings
from user_api.routers import users
from user_api.schemas.response import MessageResponse
from user_api.utils.database import build_engine, verify_connection
from user_api.utils.errors import AppError, ClientInputError

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database pool on startup and release it on shutdown."""
    owns_engine = app.state.engine is None
    if owns_engine:
        app.state.engine = build_engine()
    # An unreachable store aborts startup.
    verify_connection(app.state.engine)
    logger.info("Database connection verified")
    yield
    if owns_engine:
        app.state.engine.dispose()
        app.state.engine = None
        logger.info("Database engine disposed")


def create_app(engine: Engine | None = None) -> FastAPI:
    """Build the application around ``engine`` (or one made at startup)."""
    app = FastAPI(
        title=settings.app_name,
        description="Users CRUD API",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.engine = engine

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_timing_middleware(request: Request, call_next):
        """Add per-request processing time and optionally log slow requests."""
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Process-Time-Ms"] = f"{elapsed_ms:.1f}"

        threshold_ms = settings.slow_request_log_threshold_ms
        if threshold_ms > 0 and elapsed_ms >= threshold_ms:
            logger.warning(
                "Slow request %s %s %.1fms",
                request.method,
                request.url.path,
                elapsed_ms,
            )

        return response

    @app.exception_handler(AppError)
    async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
        """Convert domain exceptions into structured API responses."""
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        _: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report body deserialization failures as bad requests."""
        detail = exc.errors()
        message = detail[0].get("msg", "Invalid request") if detail else "Invalid request"
        api_error = ClientInputError(message)
        return JSONResponse(status_code=api_error.status_code, content=api_error.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(_: Request, exc: Exception) -> JSONResponse:
        """Catch unexpected errors without leaking internals."""
        logger.exception("Unhandled exception", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/ping", response_model=MessageResponse)
    def ping() -> MessageResponse:
        """Liveness probe; never touches the database."""
        return MessageResponse(message="pong")

    app.include_router(users.router, tags=["users"])
    return app


app = create_app()
