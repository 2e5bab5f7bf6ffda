"""Polygon.io client error types."""


class PolygonError(Exception):
    """Base class for every failure talking to Polygon.io."""


class TransportError(PolygonError):
    """The request never produced an HTTP response (DNS, connect, timeout...)."""


class UpstreamStatusError(PolygonError):
    """Polygon answered, but not with a usable result.

    Attributes:
        status_code: HTTP status when the response was not 2xx, else None.
        provider_status: Envelope ``status`` when it was not ``"OK"``, else None.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        provider_status: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.provider_status = provider_status


class DecodeError(PolygonError):
    """The response body was not a ticker-overview envelope."""
