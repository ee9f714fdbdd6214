# query/parser.py

from collections.abc import Iterable

from startup_scout.schemas import DEFAULT_TIMEFRAME_DAYS, Intent, ParsedQuery

from ._tables import (
    DOMAINS,
    FUNDED_INTENT,
    FUNDING_STAGES,
    LIST_INTENT,
    LOCATIONS,
    RECENT_INTENT,
    STOP_WORDS,
    TIMEFRAME_PATTERNS,
)

_MIN_TERM_LENGTH = 3


def parse_query(query: str) -> ParsedQuery:
    """
    Parse a natural-language startup query into structured filters.

    Domain, funding stage and location are the first keyword of their lookup
    table contained in the query. The timeframe comes from the first matching
    relative-date pattern and defaults to 7 days. Intent is checked in fixed
    order (list, recent, funded) and defaults to search. The remaining search
    terms are the tokens longer than two characters that are neither stop
    words nor part of a detected filter.

    Returns:
        ParsedQuery: The extracted filters.
    """
    lowered = query.lower()

    domain = _first_contained(DOMAINS, lowered)
    funding_stage = _first_contained(FUNDING_STAGES, lowered)
    location = _first_contained(LOCATIONS, lowered)

    return ParsedQuery(
        search_terms=_extract_search_terms(lowered, domain, funding_stage, location),
        domain=domain,
        funding_stage=funding_stage,
        timeframe=_detect_timeframe(lowered) or DEFAULT_TIMEFRAME_DAYS,
        location=location,
        intent=_detect_intent(lowered),
    )


def _first_contained(keywords: Iterable[str], text: str) -> str | None:
    """
    Return the first keyword that occurs anywhere in the text.

    Returns:
        str | None: The matching keyword, or None if none occurs.
    """
    return next((keyword for keyword in keywords if keyword in text), None)


def _detect_timeframe(text: str) -> int | None:
    """
    Resolve the first relative-date pattern found in the text to days.

    Returns:
        int | None: Number of days, or None when no pattern matches.
    """
    for pattern, days in TIMEFRAME_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue
        if days is None:
            return int(match.group(1))
        return days
    return None


def _detect_intent(text: str) -> Intent:
    if LIST_INTENT.search(text):
        return "list"
    if RECENT_INTENT.search(text):
        return "recent"
    if FUNDED_INTENT.search(text):
        return "funded"
    return "search"


def _extract_search_terms(
    text: str,
    *detected: str | None,
) -> tuple[str, ...]:
    """
    Split the query into meaningful terms not already captured as filters.

    Returns:
        tuple[str, ...]: Search terms in query order.
    """
    terms = [
        term
        for term in text.split()
        if len(term) >= _MIN_TERM_LENGTH and term not in STOP_WORDS
    ]

    for value in detected:
        if value:
            terms = [term for term in terms if term not in value]

    return tuple(terms)
