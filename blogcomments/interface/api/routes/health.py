"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Request
from pydantic import BaseModel

from blogcomments.config import Settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str


class CORSDebugResponse(BaseModel):
    """CORS debugging information."""

    origin: str | None
    allowed_origins: list[str]
    origin_allowed: bool


@router.get("/health", response_model=HealthResponse)
@inject
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="1.0.0",
        git_sha=settings.git_sha,
    )


@router.get("/health/cors", response_model=CORSDebugResponse)
@inject
async def cors_debug(
    request: Request, settings: FromDishka[Settings]
) -> CORSDebugResponse:
    """Debug CORS configuration.

    Returns:
        The request Origin and whether the allow-list accepts it
    """
    origin = request.headers.get("origin")
    allowed = settings.cors.allowed_origins
    return CORSDebugResponse(
        origin=origin,
        allowed_origins=allowed,
        origin_allowed=origin is None or origin in allowed,
    )
