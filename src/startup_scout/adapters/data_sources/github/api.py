# github/api.py

import datetime
import logging
from collections.abc import Callable

import httpx

from startup_scout.schemas import StartupData

from .._utils import make_client
from .config import GitHubConfig

logger = logging.getLogger(__name__)

_config = GitHubConfig()

_SOURCE = "github"
_DESCRIPTION_LIMIT = 300


async def search_repositories(
    query: str,
    days_back: int,
    *,
    client_factory: Callable[[], httpx.AsyncClient] | None = None,
    today: datetime.date | None = None,
) -> list[StartupData]:
    """
    Search GitHub for recently created, starred repositories matching a query.

    Returns:
        list[StartupData]: Up to ``max_results`` repositories with at least
            ``min_stars`` stars, most starred first.

    Raises:
        httpx.HTTPStatusError: If the API responds with an error status,
            including 403/429 when the search rate limit is exhausted.
    """
    factory = client_factory or make_client

    async with factory() as client:
        response = await client.get(
            _config.search_url,
            params=_search_params(query, days_back, today),
            headers={"Accept": "application/vnd.github+json"},
        )
        response.raise_for_status()
        payload = response.json()

    repos = payload.get("items") or []
    startups = [
        _to_startup(repo)
        for repo in repos
        if (repo.get("stargazers_count") or 0) >= _config.min_stars
    ]

    logger.info("GitHub returned %d qualifying repositories.", len(startups))
    return startups[: _config.max_results]


def _search_params(
    query: str,
    days_back: int,
    today: datetime.date | None,
) -> dict[str, str]:
    """
    Build the search parameters for repositories created after the cutoff.

    Returns:
        dict[str, str]: GitHub search query parameters.
    """
    since = (today or datetime.date.today()) - datetime.timedelta(days=days_back)
    terms = query.strip() or _config.default_query

    return {
        "q": f"{terms} created:>{since.isoformat()}",
        "sort": "stars",
        "order": "desc",
        "per_page": str(_config.per_page),
    }


def _to_startup(repo: dict) -> StartupData:
    """
    Convert one repository payload into a startup record.

    Returns:
        StartupData: The repository as a startup.
    """
    name = repo.get("name") or ""
    html_url = repo.get("html_url") or ""
    topics = (repo.get("topics") or [])[: _config.max_topics]
    created_at = repo.get("created_at") or ""

    return StartupData(
        name=name,
        description=(repo.get("description") or "")[:_DESCRIPTION_LIMIT] or name,
        website=repo.get("homepage") or html_url or None,
        date_announced=created_at[:10] or None,
        location="Remote",
        tags=["GitHub", "Open Source", *topics],
        sources=[_SOURCE],
        source_urls=[html_url] if html_url else [],
        confidence_score=_config.confidence,
    )
