# hackernews/config.py

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HackerNewsConfig:
    """
    Immutable configuration for the Hacker News (Algolia) search API.

    Returns:
        HackerNewsConfig: Immutable configuration object with endpoints and
            request limits.
    """

    # Algolia full-text search ordered by date
    search_url: str = "https://hn.algolia.com/api/v1/search_by_date"

    # public discussion page for an item id
    item_url: str = "https://news.ycombinator.com/item?id={object_id}"

    # hits requested per call
    hits_per_page: int = 50

    # maximum startups returned per fetch
    max_results: int = 30

    # confidence assigned to every Show HN record
    confidence: float = 0.85
