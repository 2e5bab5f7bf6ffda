"""Shared test helpers: Polygon payload builders and an in-process API client."""

from contextlib import asynccontextmanager

import httpx
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.main import create_app
from app.services.polygon import PolygonClient

APPLE_DESCRIPTION = (
    "Apple designs a wide variety of consumer electronic devices, including smartphones "
    "(iPhone), tablets (iPad), PCs (Mac), smartwatches (Apple Watch), and AirPods, among "
    "others. In addition, Apple offers its customers a variety of services such as Apple "
    "Music, iCloud, Apple Care, Apple TV+, Apple Arcade, Apple Fitness, Apple Card, and "
    "Apple Pay, among others."
)


def make_overview(ticker: str = "AAPL", **overrides) -> dict:
    """Build a Polygon ticker-overview ``results`` record."""
    record = {
        "ticker": ticker,
        "name": "Apple Inc.",
        "market": "stocks",
        "locale": "us",
        "primary_exchange": "XNAS",
        "type": "CS",
        "active": True,
        "currency_name": "usd",
        "cik": "0000320193",
        "composite_figi": "BBG000B9XRY4",
        "share_class_figi": "BBG001S5N8V8",
        "market_cap": 2_771_126_040_150.0,
        "phone_number": "(408) 996-1010",
        "address": {
            "address1": "One Apple Park Way",
            "city": "Cupertino",
            "state": "CA",
            "postal_code": "95014",
        },
        "description": APPLE_DESCRIPTION,
        "sic_code": "3571",
        "sic_description": "ELECTRONIC COMPUTERS",
        "ticker_root": ticker,
        "homepage_url": "https://www.apple.com",
        "total_employees": 154000,
        "list_date": "1980-12-12",
        "branding": {
            "logo_url": "https://api.polygon.io/v1/reference/company-branding/logo.svg",
            "icon_url": "https://api.polygon.io/v1/reference/company-branding/icon.png",
        },
        "share_class_shares_outstanding": 16_406_400_000,
        "weighted_shares_outstanding": 16_334_371_000,
    }
    record.update(overrides)
    return record


def make_envelope(results: dict | None = None, status: str = "OK") -> dict:
    """Wrap a record the way Polygon's reference endpoint does."""
    return {
        "status": status,
        "request_id": "31d59dda-80e5-4721-8496-d0d32a654afe",
        "results": results if results is not None else make_overview(),
        "count": 1,
    }


def make_settings(**overrides) -> Settings:
    values = {"polygon_api_key": "test-key", "request_timeout": 5.0}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@asynccontextmanager
async def api_client(handler, settings: Settings | None = None):
    """Yield an AsyncClient bound to a fresh app whose upstream is ``handler``.

    ``handler`` is an ``httpx.MockTransport`` handler (sync or async) that
    stands in for Polygon.io.
    """
    polygon = PolygonClient("test-key", transport=httpx.MockTransport(handler))
    app = create_app(settings or make_settings(), polygon_client=polygon)
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            yield c
    finally:
        await polygon.aclose()
