import logging

from fastapi import APIRouter, Depends, Request

from app.config import Settings
from app.routers.deps import envelope_response, error_response, get_polygon_client, get_settings
from app.schemas.stock import StockResponse
from app.services import stock_service
from app.services.polygon import PolygonClient, PolygonError
from app.utils import DeadlineExceeded

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/stock", tags=["stock"])

_RESPONSES = {
    400: {"model": StockResponse, "description": "Missing or malformed ticker"},
    404: {"model": StockResponse, "description": "Upstream lookup failed"},
    405: {"model": StockResponse, "description": "Only GET is allowed"},
    408: {"model": StockResponse, "description": "Request deadline exceeded"},
    500: {"model": StockResponse, "description": "Response could not be encoded"},
}


@router.get("/", response_model=StockResponse, responses=_RESPONSES, include_in_schema=False)
@router.get("/{ticker}", response_model=StockResponse, responses=_RESPONSES, summary="Get a beginner-friendly stock overview")
async def get_stock(
    request: Request,
    ticker: str = "",
    client: PolygonClient = Depends(get_polygon_client),
    settings: Settings = Depends(get_settings),
):
    """Look up a ticker on Polygon.io and return a simplified company overview.

    The ticker is trimmed and upper-cased, then must be 1-6 characters from
    `A-Z` and `.`. Upstream failures are reported with a generic 404 message;
    if the upstream call outlives the request deadline the call is cancelled
    and a 408 is returned.
    """
    symbol = stock_service.normalize_ticker(ticker)
    try:
        stock_service.validate_ticker(symbol)
    except stock_service.TickerValidationError as exc:
        return error_response(400, str(exc))

    try:
        stock = await stock_service.get_simplified_stock(
            client, symbol, settings.request_timeout, request.is_disconnected
        )
    except PolygonError as exc:
        logger.warning("Error fetching stock data for %s: %s", symbol, exc)
        return error_response(404, "Failed to fetch stock data. Please check the ticker symbol.")
    except DeadlineExceeded:
        logger.warning("Request timeout for ticker: %s", symbol)
        return error_response(408, "Request timeout")

    response = envelope_response(StockResponse(success=True, data=stock))
    if response.status_code == 200:
        logger.info("Successfully returned data for %s", stock.ticker)
    return response
