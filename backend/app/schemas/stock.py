from pydantic import BaseModel, Field, model_validator


class SimplifiedStock(BaseModel):
    ticker: str = Field(description="Ticker symbol (e.g. AAPL)")
    company_name: str = Field(description="Company name")
    description: str = Field(description="Company description, cut to at most ~300 characters")
    market_cap: float = Field(description="Market capitalization in USD")
    market_cap_text: str = Field(description="Humanized market cap (e.g. $2.3B)")
    exchange: str = Field(description="Primary exchange MIC (e.g. XNAS)")
    employees: int = Field(description="Total employee count")
    website: str = Field(description="Company homepage URL")
    logo_url: str = Field(description="Company logo URL")
    industry: str = Field(description="SIC industry description")


class APIError(BaseModel):
    error: str = Field(description="HTTP reason phrase (e.g. Not Found)")
    message: str | None = Field(default=None, description="Human-readable explanation")
    code: int = Field(description="HTTP status code")


class _Envelope(BaseModel):
    success: bool
    error: APIError | None = None

    @model_validator(mode="after")
    def _check_discriminant(self):
        has_data = getattr(self, "data", None) is not None
        if self.success and (self.error is not None or not has_data):
            raise ValueError("successful response must carry data and no error")
        if not self.success and (self.error is None or has_data):
            raise ValueError("failed response must carry an error and no data")
        return self


class StockResponse(_Envelope):
    data: SimplifiedStock | None = None


class SearchResponse(_Envelope):
    data: list[SimplifiedStock] | None = None
