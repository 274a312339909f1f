"""Get Stats Use Case: read the summary through the cache engine."""

from src.application.dto.responses import StatsResponse
from src.config import get_logger
from src.core.services.stats_engine import StatsCacheEngine, StatsResult

logger = get_logger(__name__)


class GetStatsUseCase:
    """Serve the stats summary, from cache when valid."""

    def __init__(self, engine: StatsCacheEngine | None = None):
        self._engine = engine

    def _get_engine(self) -> StatsCacheEngine:
        if self._engine is None:
            from src.application.services import get_stats_engine

            self._engine = get_stats_engine()
        return self._engine

    async def execute(self) -> StatsResult:
        """Execute get stats use case."""
        result = await self._get_engine().get_summary()
        logger.debug(
            "stats_served",
            cached=result.cached,
            cache_age_ms=result.cache_age_ms,
            total=result.summary.total,
        )
        return result

    def to_response(self, result: StatsResult) -> StatsResponse:
        """Convert result to API response."""
        summary = result.summary
        return StatsResponse(
            total=summary.total,
            average_price=summary.average_price,
            total_value=summary.total_value,
            categories=summary.categories,
            price_range=summary.price_range,
            cached=result.cached,
            cache_age=result.cache_age_ms if result.cached else None,
        )
