"""Stock lookup business logic: ticker validation, deadline-guarded fetch, simplification."""

import logging
from enum import Enum
from typing import Awaitable, Callable

from app.constants import TICKER_MAX_LENGTH, TICKER_MIN_LENGTH
from app.schemas.stock import SimplifiedStock
from app.services.polygon import PolygonClient
from app.services.simplify import simplify_for_beginners
from app.utils import run_with_deadline

logger = logging.getLogger(__name__)


class TickerErrorKind(Enum):
    MISSING_TICKER = "missing_ticker"
    INVALID_LENGTH = "invalid_length"
    INVALID_CHARACTER = "invalid_character"


class TickerValidationError(ValueError):
    def __init__(self, message: str, kind: TickerErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


def normalize_ticker(raw: str) -> str:
    """Trim and upper-case ASCII letters; other characters are left for validation to reject."""
    return "".join(ch.upper() if ch.isascii() else ch for ch in raw.strip())


def validate_ticker(ticker: str) -> None:
    """Accept 1-6 characters drawn from A-Z and '.'; raise TickerValidationError otherwise."""
    if not ticker:
        raise TickerValidationError("stock ticker is required", TickerErrorKind.MISSING_TICKER)
    if not TICKER_MIN_LENGTH <= len(ticker) <= TICKER_MAX_LENGTH:
        raise TickerValidationError(
            f"ticker must be between {TICKER_MIN_LENGTH}-{TICKER_MAX_LENGTH} characters",
            TickerErrorKind.INVALID_LENGTH,
        )
    if any(not ("A" <= ch <= "Z" or ch == ".") for ch in ticker):
        raise TickerValidationError(
            "ticker contains invalid characters", TickerErrorKind.INVALID_CHARACTER
        )


async def get_simplified_stock(
    client: PolygonClient,
    ticker: str,
    timeout: float,
    is_disconnected: Callable[[], Awaitable[bool]],
) -> SimplifiedStock:
    """Fetch and simplify one ticker, racing the upstream call against the request deadline.

    ``ticker`` must already be normalized and validated. Raises PolygonError
    on upstream failure and DeadlineExceeded when the deadline (or a client
    disconnect) wins the race.
    """
    logger.info("Fetching stock data for ticker: %s", ticker)
    overview = await run_with_deadline(
        client.get_ticker_overview(ticker), timeout, is_disconnected
    )
    return simplify_for_beginners(overview)
