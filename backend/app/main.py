import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp, Receive, Scope, Send

from app.config import Settings
from app.constants import API_VERSION, CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, WELCOME_MESSAGE
from app.routers import search, stock
from app.routers.deps import error_response
from app.schemas.health import HealthResponse
from app.services.polygon import PolygonClient

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # httpx logs full request URLs, which carry the Polygon API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


class SingleOriginCORSMiddleware(CORSMiddleware):
    """CORSMiddleware whose preflights always get an empty 200.

    The reply always names the one configured origin, whatever the request
    asked for; the browser enforces the policy.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        headers = dict(self.preflight_headers)
        headers["Access-Control-Allow-Origin"] = self.allow_origins[0]
        return Response(status_code=200, headers=headers)


class PreflightMiddleware:
    """Answer OPTIONS requests that are not CORS preflights with an empty 200."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "OPTIONS":
            await Response(status_code=200)(scope, receive, send)
            return
        await self.app(scope, receive, send)


async def _http_exception_handler(request, exc: StarletteHTTPException):
    message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
    response = error_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def create_app(settings: Settings | None = None, polygon_client: PolygonClient | None = None) -> FastAPI:
    """Build the API server with its own settings and upstream client.

    Both dependencies hang off ``app.state`` and reach route handlers through
    ``app.routers.deps``; nothing is kept at module level.
    """
    settings = settings or Settings()

    if not settings.polygon_api_key:
        logger.warning("POLYGON_API_KEY not set in environment; stock lookups will fail upstream")
    else:
        logger.info("Polygon API key loaded successfully (length: %d)", len(settings.polygon_api_key))

    client = polygon_client or PolygonClient(settings.polygon_api_key)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await client.aclose()

    app = FastAPI(
        title="RookieNumbers",
        summary="Beginner-friendly stock overviews backed by Polygon.io.",
        description=(
            "RookieNumbers fetches a company's ticker overview from Polygon.io and "
            "re-serves a small, display-ready subset: name, humanized market cap, "
            "a short description, exchange, headcount, website, logo and industry.\n\n"
            "Every JSON response uses the same envelope: `success`, plus either "
            "`data` or `error` (`{error, message, code}`)."
        ),
        version=API_VERSION,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "stock", "description": "Ticker lookups simplified for new investors."},
            {"name": "search", "description": "Symbol search (not implemented yet)."},
            {"name": "system", "description": "Health checks and operational endpoints."},
        ],
    )
    app.state.settings = settings
    app.state.polygon_client = client

    app.include_router(stock.router)
    app.include_router(search.router)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)

    # Added first so CORSMiddleware wraps it.
    app.add_middleware(PreflightMiddleware)
    app.add_middleware(
        SingleOriginCORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    @app.get("/", include_in_schema=False, response_class=PlainTextResponse)
    async def welcome():
        return WELCOME_MESSAGE

    @app.get("/api/health", response_model=HealthResponse, summary="Health check", tags=["system"])
    async def health():
        """Return service status, current UTC time and API version."""
        return HealthResponse(
            status="ok",
            message="RookieNumbers API is running",
            timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            version=API_VERSION,
        )

    return app


def run() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    logger.info("Starting RookieNumbers server on :%d", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
