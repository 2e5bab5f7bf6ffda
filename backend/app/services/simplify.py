"""Reshape Polygon ticker overviews into the beginner-friendly stock view."""

from app.constants import DESCRIPTION_MAX_LENGTH, DESCRIPTION_MIN_CUT, MARKET_CAP_UNITS
from app.schemas.polygon import TickerOverview
from app.schemas.stock import SimplifiedStock


def format_market_cap(market_cap: float) -> str:
    """Humanize a dollar amount: 2_300_000_000 -> "$2.3B", 999 -> "$999"."""
    for threshold, divisor, suffix in MARKET_CAP_UNITS:
        if market_cap >= threshold:
            return f"${market_cap / divisor:.1f}{suffix}"
    return f"${market_cap:.0f}"


def simplify_description(description: str) -> str:
    """Cut long descriptions at the last full sentence that fits.

    Descriptions up to 300 characters pass through. Longer ones are cut after
    the last period found scanning back from index 299 to index 200 (both
    inclusive); without one they are hard-cut at 300 characters plus "...".
    """
    if len(description) <= DESCRIPTION_MAX_LENGTH:
        return description
    for i in range(DESCRIPTION_MAX_LENGTH - 1, DESCRIPTION_MIN_CUT - 1, -1):
        if description[i] == ".":
            return description[: i + 1]
    return description[:DESCRIPTION_MAX_LENGTH] + "..."


def simplify_for_beginners(overview: TickerOverview) -> SimplifiedStock:
    return SimplifiedStock(
        ticker=overview.ticker,
        company_name=overview.name,
        description=simplify_description(overview.description),
        market_cap=overview.market_cap,
        market_cap_text=format_market_cap(overview.market_cap),
        exchange=overview.primary_exchange,
        employees=overview.total_employees,
        website=overview.homepage_url,
        logo_url=overview.branding.logo_url,
        industry=overview.sic_description,
    )
