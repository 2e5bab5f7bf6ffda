"""Shared router dependencies and helpers."""

import logging
from http import HTTPStatus

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from app.config import Settings
from app.schemas.stock import APIError, StockResponse
from app.services.polygon import PolygonClient

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_polygon_client(request: Request) -> PolygonClient:
    return request.app.state.polygon_client


def error_response(status_code: int, message: str) -> JSONResponse:
    """Render the ``{success: false, error: {...}}`` envelope."""
    envelope = StockResponse(
        success=False,
        error=APIError(error=HTTPStatus(status_code).phrase, message=message, code=status_code),
    )
    return JSONResponse(envelope.model_dump(mode="json", exclude_none=True), status_code=status_code)


def envelope_response(envelope: BaseModel, status_code: int = 200) -> JSONResponse:
    """Render a success envelope, falling back to a 500 envelope if it can't be encoded."""
    try:
        return JSONResponse(envelope.model_dump(mode="json", exclude_none=True), status_code=status_code)
    except (PydanticSerializationError, TypeError, ValueError):
        logger.exception("Error encoding success response")
        return error_response(500, "Failed to encode response")
