"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from shared.config import get_settings
from shared.repository import StoreError
from modules.users.interfaces import IUserStore
from ..dependencies import get_user_store

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    response: Response,
    store: IUserStore = Depends(get_user_store),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Pings the document store; answers 503 when it is unreachable.
    """
    try:
        await store.ping()
    except StoreError as e:
        logger.warning(f"Readiness check failed: {e.details.get('original_error')}")
        response.status_code = 503
        return ReadinessResponse(status="not_ready", database="unavailable")
    return ReadinessResponse(status="ready", database="connected")
