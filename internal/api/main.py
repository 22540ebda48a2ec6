"""
FastAPI application setup and configuration.
Defines the app factory, middleware, exception handlers, and route registration.
"""

import time
import uuid
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.config import APIConfig
from pkg.logger.logger import Logger
from internal.pipeline.interface import IPipelineUseCase
from internal.api.schemas import error_body
from internal.api.routes import alerts, dashboard, digests, health, pipeline, posts

SERVICE_TITLE = "Social Listening API"
SERVICE_VERSION = "1.0.0"


def create_app(
    pipeline_usecase: Optional[IPipelineUseCase],
    logger: Logger,
    api_config: Optional[APIConfig] = None,
) -> FastAPI:
    """Build the HTTP app around an already-wired pipeline use case."""
    api_config = api_config or APIConfig()

    app = FastAPI(
        title=SERVICE_TITLE,
        description="Dashboard, alert and digest API over collected social posts",
        version=SERVICE_VERSION,
        docs_url="/swagger/index.html",
        redoc_url=None,
        openapi_url="/openapi.json",
    )
    app.state.pipeline = pipeline_usecase
    app.state.api_config = api_config
    app.state.logger = logger

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        """Tag each request with an id and log it with its duration."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        with logger.trace_context(request_id):
            logger.info(
                f"Request {request_id}: {request.method} {request.url.path} "
                f"from {request.client.host if request.client else 'unknown'}"
            )
            response = await call_next(request)
            duration = (time.perf_counter() - started) * 1000
            logger.info(f"Response {request_id}: {response.status_code} ({duration:.1f}ms)")

        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code, content=error_body(str(exc.detail))
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        return JSONResponse(status_code=422, content=error_body(str(exc)))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for standardized error responses."""
        request_id = getattr(request.state, "request_id", "unknown")
        logger.exception(f"Unhandled exception in request {request_id}: {exc}")
        return JSONResponse(status_code=500, content=error_body(str(exc)))

    app.include_router(pipeline.router, tags=["pipeline"])
    app.include_router(dashboard.router, tags=["dashboard"])
    app.include_router(alerts.router, tags=["alerts"])
    app.include_router(posts.router, tags=["posts"])
    app.include_router(digests.router, tags=["digests"])
    app.include_router(health.router, tags=["health"])

    return app


__all__ = ["create_app"]
