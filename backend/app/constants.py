"""Shared constants for the upstream client, ticker rules, and response shaping."""

API_VERSION = "1.0.0"

POLYGON_BASE_URL = "https://api.polygon.io"
# Client-level timeout, independent of the per-request deadline in Settings.
UPSTREAM_TIMEOUT_SECONDS = 30.0

TICKER_MIN_LENGTH = 1
TICKER_MAX_LENGTH = 6

DESCRIPTION_MAX_LENGTH = 300
# Lowest index searched for a sentence-ending period when truncating.
DESCRIPTION_MIN_CUT = 200

# (threshold, divisor, suffix) checked top-down when humanizing market caps.
MARKET_CAP_UNITS: tuple[tuple[float, float, str], ...] = (
    (1e12, 1e12, "T"),
    (1e9, 1e9, "B"),
    (1e6, 1e6, "M"),
    (1e3, 1e3, "K"),
)

CORS_ALLOW_METHODS = ["GET", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type", "Authorization"]

WELCOME_MESSAGE = "Welcome to RookieNumbers - helping beginners invest!"
