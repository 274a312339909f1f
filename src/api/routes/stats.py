"""Statistics endpoint."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_stats_use_case
from src.application.dto.responses import ErrorResponse, StatsResponse
from src.application.use_cases.get_stats import GetStatsUseCase

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get(
    "",
    response_model=StatsResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def get_stats(
    use_case: GetStatsUseCase = Depends(get_stats_use_case),
) -> StatsResponse:
    """
    Item statistics.

    Served from memory when the cache is valid (``cached: true`` with
    ``cacheAge`` in milliseconds), otherwise recomputed from the store.
    """
    result = await use_case.execute()
    return use_case.to_response(result)
