"""Dependency injection for API endpoints.

The pipeline use case and API settings are attached to ``app.state`` once at
startup; routes pull them from there.
"""

from typing import Optional

from fastapi import Header, HTTPException, Request, status

from config.config import APIConfig
from internal.pipeline.interface import IPipelineUseCase

BEARER_PREFIX = "Bearer "


def get_pipeline(request: Request) -> IPipelineUseCase:
    """Dependency injection for the pipeline use case.

    Raises:
        HTTPException: 503 if the service has not finished wiring
    """
    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Pipeline is not available. The service may still be starting up.",
        )
    return pipeline


def get_api_config(request: Request) -> APIConfig:
    return getattr(request.app.state, "api_config", None) or APIConfig()


def _expected(config: APIConfig) -> Optional[str]:
    return f"{BEARER_PREFIX}{config.cron_secret}" if config.cron_secret else None


def verify_cron_lenient(
    request: Request, authorization: Optional[str] = Header(default=None)
) -> None:
    """Reject only when an Authorization header is sent with the wrong secret.

    Requests without the header (manual refresh) are let through.
    """
    expected = _expected(get_api_config(request))
    if expected and authorization is not None and authorization != expected:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def verify_cron_strict(
    request: Request, authorization: Optional[str] = Header(default=None)
) -> None:
    """Require the cron secret whenever one is configured."""
    expected = _expected(get_api_config(request))
    if expected and authorization != expected:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


__all__ = [
    "get_pipeline",
    "get_api_config",
    "verify_cron_lenient",
    "verify_cron_strict",
]
