from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(description="Always 'ok' while the service is up")
    message: str = Field(description="Human-readable status line")
    timestamp: str = Field(description="Current server time, RFC 3339 UTC")
    version: str = Field(description="API version")
