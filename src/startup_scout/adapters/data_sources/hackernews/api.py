# hackernews/api.py

import datetime
import logging
import re
import time
from collections.abc import Callable

import httpx

from startup_scout.schemas import StartupData

from .._utils import extract_funding, extract_startup_name, make_client
from .config import HackerNewsConfig

logger = logging.getLogger(__name__)

_config = HackerNewsConfig()

_SOURCE = "hackernews"
_SECONDS_PER_DAY = 86_400
_MIN_NAME_LENGTH = 2
_STORY_TEXT_LIMIT = 200

# "Show HN: Name - Description" or "Show HN: Name: Description"
_SHOW_HN_TITLE = re.compile(r"^Show HN[:\s]+([^-–—:]+)\s*[-–—:]?\s*(.*)$", re.IGNORECASE)


async def fetch_show_hn(
    query: str,
    days_back: int,
    *,
    client_factory: Callable[[], httpx.AsyncClient] | None = None,
) -> list[StartupData]:
    """
    Fetch recent "Show HN" launches matching a query.

    Searches Algolia's date-ordered Hacker News index for stories created in
    the last ``days_back`` days and parses each "Show HN: Name - Description"
    title into a startup record.

    Returns:
        list[StartupData]: Up to ``max_results`` parsed launches.

    Raises:
        httpx.HTTPStatusError: If the API responds with an error status.
    """
    factory = client_factory or make_client

    async with factory() as client:
        response = await client.get(
            _config.search_url,
            params=_search_params(query, days_back),
        )
        response.raise_for_status()
        payload = response.json()

    hits = payload.get("hits") or []
    startups = [startup for hit in hits if (startup := _parse_hit(hit)) is not None]

    logger.info("Hacker News returned %d Show HN launches.", len(startups))
    return startups[: _config.max_results]


def _search_params(query: str, days_back: int) -> dict[str, str]:
    """
    Build the Algolia query parameters.

    Returns:
        dict[str, str]: Parameters restricting results to recent stories.
    """
    created_after = int(time.time()) - days_back * _SECONDS_PER_DAY
    search = f"Show HN {query}".strip() if query else "Show HN"

    return {
        "query": search,
        "tags": "story",
        "numericFilters": f"created_at_i>{created_after}",
        "hitsPerPage": str(_config.hits_per_page),
    }


def _parse_hit(hit: dict) -> StartupData | None:
    """
    Convert one Algolia hit into a startup record.

    Returns:
        StartupData | None: The parsed record, or None if the title is not a
            Show HN launch or the name is too short.
    """
    title = hit.get("title") or ""
    match = _SHOW_HN_TITLE.match(title)
    if match is None:
        return None

    name = extract_startup_name(match.group(1))
    if len(name) < _MIN_NAME_LENGTH:
        return None

    story_text = (hit.get("story_text") or "")[:_STORY_TEXT_LIMIT]
    description = match.group(2).strip() or story_text or name
    item_url = _config.item_url.format(object_id=hit.get("objectID"))

    return StartupData(
        name=name,
        description=description,
        website=hit.get("url") or item_url,
        funding_amount=extract_funding(f"{title} {story_text}"),
        date_announced=_to_iso_date(hit.get("created_at_i")),
        location="Remote",
        tags=["Show HN", "Tech"],
        sources=[_SOURCE],
        source_urls=[item_url],
        confidence_score=_config.confidence,
    )


def _to_iso_date(timestamp: int | None) -> str | None:
    if timestamp is None:
        return None
    moment = datetime.datetime.fromtimestamp(timestamp, tz=datetime.UTC)
    return moment.date().isoformat()
