# github/config.py

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """
    Immutable configuration for the GitHub repository search API.

    Returns:
        GitHubConfig: Immutable configuration object with the search endpoint
            and result filters.
    """

    # repository search endpoint
    search_url: str = "https://api.github.com/search/repositories"

    # search used when the caller supplies no query
    default_query: str = "startup OR saas OR tool"

    # repositories requested per call
    per_page: int = 30

    # repositories with fewer stars are skipped
    min_stars: int = 5

    # topics copied into tags
    max_topics: int = 3

    # maximum startups returned per fetch
    max_results: int = 30

    # confidence assigned to every repository record
    confidence: float = 0.7
