# lobsters/api.py

import datetime
import logging
from collections.abc import Callable

import httpx

from startup_scout.schemas import StartupData

from .._utils import extract_startup_name, make_client
from .config import LobstersConfig

logger = logging.getLogger(__name__)

_config = LobstersConfig()

_SOURCE = "lobsters"
_MIN_NAME_LENGTH = 3


async def fetch_lobsters_launches(
    query: str,
    days_back: int,
    *,
    client_factory: Callable[[], httpx.AsyncClient] | None = None,
    now: datetime.datetime | None = None,
) -> list[StartupData]:
    """
    Fetch recent "show" and "launch" stories from Lobsters.

    The newest-stories feed is filtered to stories created in the last
    ``days_back`` days whose title or description contains the query, and
    whose title announces something being shown or launched.

    Returns:
        list[StartupData]: Up to ``max_results`` launch stories.

    Raises:
        httpx.HTTPStatusError: If the feed responds with an error status.
    """
    factory = client_factory or make_client
    cutoff = (now or datetime.datetime.now(datetime.UTC)) - datetime.timedelta(
        days=days_back,
    )
    needle = query.strip().lower()

    async with factory() as client:
        response = await client.get(_config.newest_url)
        response.raise_for_status()
        stories = response.json() or []

    candidates = [story for story in stories if _matches(story, needle)]
    startups = [
        startup
        for story in candidates
        if (startup := _parse_story(story, cutoff)) is not None
    ]

    logger.info("Lobsters returned %d launch stories.", len(startups))
    return startups[: _config.max_results]


def _matches(story: dict, needle: str) -> bool:
    """
    Check the query and launch-marker filters for one story.

    Returns:
        bool: True if the story mentions the query (when given) and its title
            carries a launch marker.
    """
    title = (story.get("title") or "").lower()

    if needle:
        text = f"{title} {story.get('description') or ''}".lower()
        if needle not in text:
            return False

    return any(marker in title for marker in _config.launch_markers)


def _parse_story(story: dict, cutoff: datetime.datetime) -> StartupData | None:
    """
    Convert one Lobsters story into a startup record.

    Returns:
        StartupData | None: The parsed record, or None if the story is too old,
            has no parseable creation time or yields no usable name.
    """
    created = _parse_timestamp(story.get("created_at"))
    if created is None or created < cutoff:
        return None

    title = story.get("title") or ""
    name = extract_startup_name(title)
    if len(name) < _MIN_NAME_LENGTH:
        return None

    short_url = story.get("short_id_url") or ""

    return StartupData(
        name=name,
        description=story.get("description") or title,
        website=story.get("url") or short_url or None,
        date_announced=created.date().isoformat(),
        location="Remote",
        tags=["Lobsters", "Tech", *(story.get("tags") or [])],
        sources=[_SOURCE],
        source_urls=[short_url] if short_url else [],
        confidence_score=_config.confidence,
    )


def _parse_timestamp(raw: str | None) -> datetime.datetime | None:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Returns:
        datetime.datetime | None: The timestamp in UTC, or None if absent or
            malformed. Naive timestamps are taken as UTC.
    """
    if not raw:
        return None

    try:
        moment = datetime.datetime.fromisoformat(raw)
    except ValueError:
        return None

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=datetime.UTC)
    return moment.astimezone(datetime.UTC)
