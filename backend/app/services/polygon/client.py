"""Polygon.io ticker-overview client."""

import logging

import httpx
from pydantic import ValidationError

from app.constants import POLYGON_BASE_URL, UPSTREAM_TIMEOUT_SECONDS
from app.schemas.polygon import PolygonResponse, TickerOverview
from app.services.polygon.errors import DecodeError, TransportError, UpstreamStatusError

logger = logging.getLogger(__name__)

OVERVIEW_PATH = "/v3/reference/tickers/{ticker}"


class PolygonClient:
    """Thin async wrapper around Polygon's reference API.

    One instance is shared by all requests; the underlying ``httpx.AsyncClient``
    pools connections and is safe for concurrent use. Pass ``transport`` to
    swap the network layer (tests use ``httpx.MockTransport``).
    """

    def __init__(self, api_key: str, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.api_key = api_key
        self._http = httpx.AsyncClient(
            base_url=POLYGON_BASE_URL,
            timeout=UPSTREAM_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def get_ticker_overview(self, ticker: str) -> TickerOverview:
        """Fetch the overview record for an already-validated ticker.

        Raises TransportError, UpstreamStatusError or DecodeError.
        """
        try:
            resp = await self._http.get(
                OVERVIEW_PATH.format(ticker=ticker),
                params={"apiKey": self.api_key},
            )
        except httpx.TransportError as exc:
            raise TransportError(f"failed to make request: {exc!r}") from exc

        if not resp.is_success:
            raise UpstreamStatusError(
                f"API request failed with status {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            envelope = PolygonResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise DecodeError(f"failed to decode response: {exc}") from exc

        if envelope.status != "OK":
            raise UpstreamStatusError(
                f"API returned non-OK status: {envelope.status}",
                provider_status=envelope.status,
            )

        logger.debug("Polygon request %s returned %s", envelope.request_id, envelope.results.ticker)
        return envelope.results

    async def aclose(self) -> None:
        await self._http.aclose()
