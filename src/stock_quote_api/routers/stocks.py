"""Stock quote and query history routes.

Handlers stay thin: the service fetches, records and notifies.
"""
from fastapi import APIRouter, Query

from stock_quote_api.auth import CurrentIdentity
from stock_quote_api.deps import StockServiceDep
from stock_quote_api.schemas import ApiResponse, StockQueryRead, StockQuote

router = APIRouter(tags=["stocks"])


@router.get("/stock", response_model=ApiResponse[StockQuote])
async def get_stock(
    identity: CurrentIdentity,
    service: StockServiceDep,
    q: str | None = Query(default=None, description="Stock symbol, e.g. AAPL.US"),
) -> ApiResponse[StockQuote]:
    """Get the latest quote for a symbol.

    The lookup is added to the caller's history and a copy of the quote is
    queued for email to the caller.
    """
    quote = await service.lookup(identity, q)
    return ApiResponse(message="Stock quote retrieved successfully", data=quote)


@router.get("/history", response_model=ApiResponse[list[StockQueryRead]])
def get_history(
    identity: CurrentIdentity, service: StockServiceDep
) -> ApiResponse[list[StockQueryRead]]:
    """The caller's stock queries, newest first."""
    history = [StockQueryRead.model_validate(row) for row in service.history(identity.user_id)]
    return ApiResponse(message="Stock query history retrieved successfully", data=history)
