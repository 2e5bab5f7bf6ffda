"""Polygon.io ticker-overview payloads (reference/tickers endpoint)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _PolygonModel(BaseModel):
    """Frozen upstream record; JSON nulls fall back to the field default.

    NaN and Infinity (which json.loads accepts) are rejected as malformed.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Address(_PolygonModel):
    address1: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""


class Branding(_PolygonModel):
    logo_url: str = ""
    icon_url: str = ""


class TickerOverview(_PolygonModel):
    ticker: str = ""
    name: str = ""
    market: str = ""
    locale: str = ""
    primary_exchange: str = ""
    type: str = ""
    active: bool = False
    currency_name: str = ""
    cik: str = ""
    composite_figi: str = ""
    share_class_figi: str = ""
    market_cap: float = 0.0
    phone_number: str = ""
    address: Address = Field(default_factory=Address)
    description: str = ""
    sic_code: str = ""
    sic_description: str = ""
    ticker_root: str = ""
    homepage_url: str = ""
    total_employees: int = 0
    list_date: str = ""
    branding: Branding = Field(default_factory=Branding)
    share_class_shares_outstanding: float = 0.0
    weighted_shares_outstanding: float = 0.0


class PolygonResponse(_PolygonModel):
    status: str = ""
    request_id: str = ""
    results: TickerOverview = Field(default_factory=TickerOverview)
    count: int = 0
    next_url: str = ""
