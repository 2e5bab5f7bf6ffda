import logging

from fastapi import APIRouter, Query

from app.routers.deps import error_response
from app.schemas.stock import SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("", response_model=SearchResponse, responses={501: {"model": SearchResponse}})
async def search_stocks(q: str | None = Query(None, description="Company name or ticker prefix")):
    """Search for stocks by name or symbol. Not available yet; always answers 501."""
    logger.debug("Search requested for %r", q)
    return error_response(501, "Search functionality coming soon")
