# reddit/api.py

import datetime
import logging
from collections.abc import Callable

import httpx

from startup_scout.schemas import StartupData

from .._utils import extract_startup_name, make_client
from .config import RedditConfig

logger = logging.getLogger(__name__)

_config = RedditConfig()

_SOURCE = "reddit"
_MIN_NAME_LENGTH = 3
_DESCRIPTION_LIMIT = 300


async def fetch_reddit_posts(
    query: str,
    days_back: int,
    *,
    client_factory: Callable[[], httpx.AsyncClient] | None = None,
    now: datetime.datetime | None = None,
) -> list[StartupData]:
    """
    Collect launch posts from startup-focused subreddits.

    Each configured subreddit is searched for the query (or listed newest
    first when the query is blank). Posts older than ``days_back`` days, with
    a low score or a short body are skipped; the post title is reduced to a
    startup name.

    A subreddit that fails is logged and skipped. Only when every subreddit
    fails is the last error raised, so the caller can retry.

    Returns:
        list[StartupData]: Up to ``max_results`` posts, in subreddit order.

    Raises:
        httpx.HTTPError: If no subreddit could be fetched.
    """
    factory = client_factory or make_client
    cutoff = (now or datetime.datetime.now(datetime.UTC)) - datetime.timedelta(
        days=days_back,
    )

    startups: list[StartupData] = []
    last_error: httpx.HTTPError | None = None
    fetched = 0

    async with factory() as client:
        for subreddit in _config.subreddits:
            try:
                posts = await _fetch_subreddit(client, subreddit, query)
            except httpx.HTTPError as error:
                logger.warning("Reddit r/%s failed: %s", subreddit, error)
                last_error = error
                continue

            fetched += 1
            startups.extend(
                startup
                for post in posts
                if (startup := _parse_post(post, subreddit, cutoff)) is not None
            )

    if not fetched and last_error is not None:
        raise last_error

    logger.info("Reddit returned %d launch posts.", len(startups))
    return startups[: _config.max_results]


async def _fetch_subreddit(
    client: httpx.AsyncClient,
    subreddit: str,
    query: str,
) -> list[dict]:
    """
    Fetch one subreddit listing.

    Returns:
        list[dict]: The ``data`` object of every post in the listing.
    """
    if query.strip():
        url = _config.search_url.format(subreddit=subreddit)
        params = {
            "q": query.strip(),
            "restrict_sr": "1",
            "sort": "new",
            "limit": str(_config.limit),
        }
    else:
        url = _config.new_url.format(subreddit=subreddit)
        params = {"limit": str(_config.limit)}

    response = await client.get(url, params=params)
    response.raise_for_status()
    payload = response.json()

    children = (payload.get("data") or {}).get("children") or []
    return [child["data"] for child in children if child.get("data")]


def _parse_post(
    post: dict,
    subreddit: str,
    cutoff: datetime.datetime,
) -> StartupData | None:
    """
    Convert one Reddit post into a startup record.

    Returns:
        StartupData | None: The parsed record, or None if the post is too old,
            too low quality or has no usable name.
    """
    created_utc = post.get("created_utc")
    if created_utc is None:
        return None

    created = datetime.datetime.fromtimestamp(created_utc, tz=datetime.UTC)
    if created < cutoff:
        return None

    selftext = post.get("selftext") or ""
    if (post.get("score") or 0) < _config.min_score:
        return None
    if len(selftext) < _config.min_selftext_length:
        return None

    title = post.get("title") or ""
    name = extract_startup_name(title)
    if len(name) < _MIN_NAME_LENGTH:
        return None

    url = post.get("url") or ""

    return StartupData(
        name=name,
        description=selftext[:_DESCRIPTION_LIMIT] or title,
        website=url if url and "reddit.com" not in url else None,
        date_announced=created.date().isoformat(),
        location="Remote",
        tags=["Reddit", subreddit],
        sources=[_SOURCE],
        source_urls=[f"{_config.permalink_base}{post.get('permalink') or ''}"],
        confidence_score=_config.confidence,
    )
