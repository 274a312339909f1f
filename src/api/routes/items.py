"""Item endpoints."""

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_create_item_use_case, get_list_items_use_case
from src.application.dto.requests import CreateItemRequest, ListItemsRequest
from src.application.dto.responses import ErrorResponse, ItemListResponse, ItemResponse
from src.application.use_cases.create_item import CreateItemUseCase
from src.application.use_cases.list_items import ListItemsUseCase

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=ItemListResponse)
async def list_items(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1),
    q: str | None = Query(default=None),
    use_case: ListItemsUseCase = Depends(get_list_items_use_case),
) -> ItemListResponse:
    """
    List items.

    Filters by ``q`` against name and category, then paginates.
    """
    result = await use_case.execute(ListItemsRequest(page=page, limit=limit, q=q))
    return use_case.to_response(result)


@router.get(
    "/{item_id}",
    response_model=ItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_item(
    item_id: int,
    use_case: ListItemsUseCase = Depends(get_list_items_use_case),
) -> ItemResponse:
    """Get a single item by ID."""
    item = await use_case.get(item_id)
    return ItemResponse(**item.model_dump())


@router.post(
    "",
    response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_item(
    request: CreateItemRequest,
    use_case: CreateItemUseCase = Depends(get_create_item_use_case),
) -> ItemResponse:
    """Create an item and rewrite the store."""
    item = await use_case.execute(request)
    return use_case.to_response(item)
