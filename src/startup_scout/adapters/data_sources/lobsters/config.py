# lobsters/config.py

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LobstersConfig:
    """
    Immutable configuration for the Lobsters newest-stories feed.

    Returns:
        LobstersConfig: Immutable configuration object with the feed endpoint
            and title markers.
    """

    # newest stories as JSON
    newest_url: str = "https://lobste.rs/newest.json"

    # a story counts as a launch when its title contains one of these
    launch_markers: tuple[str, ...] = ("show", "launch")

    # maximum startups returned per fetch
    max_results: int = 30

    # confidence assigned to every Lobsters record
    confidence: float = 0.75
