"""API route modules."""

from src.api.routes.health import router as health_router
from src.api.routes.items import router as items_router
from src.api.routes.stats import router as stats_router

__all__ = [
    "health_router",
    "items_router",
    "stats_router",
]
