# reddit/config.py

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RedditConfig:
    """
    Immutable configuration for Reddit's public JSON listings.

    Returns:
        RedditConfig: Immutable configuration object with the subreddits to
            scan and the post quality thresholds.
    """

    # subreddit search, restricted to the subreddit itself
    search_url: str = "https://www.reddit.com/r/{subreddit}/search.json"

    # newest posts, used when the caller supplies no query
    new_url: str = "https://www.reddit.com/r/{subreddit}/new.json"

    # permalink prefix for source urls
    permalink_base: str = "https://reddit.com"

    # communities where founders announce launches
    subreddits: tuple[str, ...] = (
        "startups",
        "SideProject",
        "entrepreneur",
        "SaaS",
        "indiehackers",
    )

    # posts requested per subreddit
    limit: int = 20

    # posts scoring below this are skipped
    min_score: int = 2

    # self posts with shorter bodies are skipped
    min_selftext_length: int = 20

    # maximum startups returned per fetch
    max_results: int = 30

    # confidence assigned to every Reddit record
    confidence: float = 0.7
