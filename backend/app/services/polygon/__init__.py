"""Polygon.io upstream access.

- client: ``PolygonClient`` and the ticker-overview fetch
- errors: failure taxonomy raised by the client
"""

from app.services.polygon.client import PolygonClient
from app.services.polygon.errors import (
    DecodeError,
    PolygonError,
    TransportError,
    UpstreamStatusError,
)

__all__ = [
    "PolygonClient",
    "PolygonError",
    "TransportError",
    "UpstreamStatusError",
    "DecodeError",
]
