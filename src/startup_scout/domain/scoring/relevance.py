# scoring/relevance.py

import datetime
from collections.abc import Sequence
from dataclasses import dataclass

from startup_scout.schemas import StartupData

_STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "up", "about", "into", "through", "during",
        "show", "me", "find", "search", "get", "list", "all", "startups",
        "companies",
    },
)  # fmt: skip


@dataclass(frozen=True, slots=True)
class ScoringWeights:
    """
    Weights applied to each relevance signal.
    """

    # per query term found in the name
    name: float = 10.0
    # per query term found in the description
    description: float = 5.0
    # per query term found in any tag
    tag: float = 7.0
    # per reporting source, capped at five sources
    source: float = 2.0
    # announced within the last week; decays for older announcements
    freshness: float = 5.0
    # funding amount other than "Undisclosed"
    funding: float = 3.0
    # website present
    website: float = 2.0


_MAX_COUNTED_SOURCES = 5

# (age limit in days, fraction of the freshness weight)
_FRESHNESS_BANDS = ((7, 1.0), (30, 0.6), (90, 0.3))


def calculate_relevance_score(
    startup: StartupData,
    query: str,
    weights: ScoringWeights | None = None,
    *,
    today: datetime.date | None = None,
) -> float:
    """
    Score how relevant a startup is to a query.

    Combines query term matches in the name, description and tags with
    data-quality boosts for multiple sources, a recent announcement, a known
    funding amount and a website.

    Args:
        startup (StartupData): The startup to score.
        query (str): The free-text query.
        weights (ScoringWeights | None): Signal weights; defaults apply if None.
        today (datetime.date | None): Reference date for freshness.

    Returns:
        float: Non-negative relevance score, higher is more relevant.
    """
    weights = weights or ScoringWeights()
    terms = extract_query_terms(query)

    score = _term_score(startup, terms, weights)

    counted_sources = min(len(startup.sources), _MAX_COUNTED_SOURCES)
    score += counted_sources * weights.source

    score += _freshness_score(startup.date_announced, weights.freshness, today)

    if startup.funding_amount and startup.funding_amount != "Undisclosed":
        score += weights.funding

    if startup.website:
        score += weights.website

    return score


def sort_by_relevance(
    startups: Sequence[StartupData],
    query: str,
    weights: ScoringWeights | None = None,
    *,
    today: datetime.date | None = None,
) -> list[StartupData]:
    """
    Rank startups by relevance to a query, most relevant first.

    Returns copies carrying their relevance_score; ties keep input order.

    Returns:
        list[StartupData]: Scored copies sorted by descending relevance.
    """
    scored = [
        startup.model_copy(
            update={
                "relevance_score": calculate_relevance_score(
                    startup,
                    query,
                    weights,
                    today=today,
                ),
            },
        )
        for startup in startups
    ]
    return sorted(scored, key=lambda startup: startup.relevance_score, reverse=True)


def extract_query_terms(query: str) -> list[str]:
    """
    Split a query into lower-cased terms worth matching.

    Returns:
        list[str]: Terms longer than two characters that are not stop words.
    """
    return [
        term
        for term in query.lower().split()
        if len(term) > 2 and term not in _STOP_WORDS
    ]


def _term_score(
    startup: StartupData,
    terms: list[str],
    weights: ScoringWeights,
) -> float:
    name = startup.name.lower()
    description = startup.description.lower()
    tags = [tag.lower() for tag in startup.tags]

    score = 0.0
    for term in terms:
        if term in name:
            score += weights.name
            # exact or leading-word match
            if name == term or name.startswith(term + " "):
                score += weights.name * 0.5
        if term in description:
            score += weights.description
        if any(term in tag for tag in tags):
            score += weights.tag
    return score


def _freshness_score(
    date_announced: str | None,
    weight: float,
    today: datetime.date | None,
) -> float:
    """
    Score an announcement date by how recent it is.

    Returns:
        float: A fraction of the weight by age band, or 0.0 when the date is
            missing, malformed or older than 90 days.
    """
    announced = _parse_date(date_announced)
    if announced is None:
        return 0.0

    days_old = ((today or datetime.date.today()) - announced).days
    for limit, fraction in _FRESHNESS_BANDS:
        if days_old < limit:
            return weight * fraction
    return 0.0


def _parse_date(raw: str | None) -> datetime.date | None:
    """
    Parse the date part of an ISO-8601 date or timestamp.

    Returns:
        datetime.date | None: The parsed date, or None if absent or malformed.
    """
    if not raw:
        return None

    try:
        return datetime.date.fromisoformat(raw[:10])
    except ValueError:
        return None
