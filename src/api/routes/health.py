"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from src.application.dto.responses import HealthResponse
from src.application.services import get_stats_engine
from src.config import get_settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Returns service status, uptime and whether stats caching is live.
    """
    return HealthResponse(
        status="healthy",
        version=get_settings().app_version,
        uptime_seconds=time.time() - _start_time,
        stats_watch=get_stats_engine().state.value,
    )
