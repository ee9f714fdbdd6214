# query/filters.py

from collections.abc import Sequence

from startup_scout.schemas import ParsedQuery, StartupData

from .parser import parse_query


def matches_filters(startup: StartupData, parsed_query: ParsedQuery) -> bool:
    """
    Check whether a startup satisfies every filter of a parsed query.

    The domain must occur in the startup's combined name, description and
    tags. Funding stage and location are only enforced when the startup has
    the corresponding field. When search terms exist, at least one of them
    must occur in the combined text.

    Returns:
        bool: True if all filters pass, otherwise False.
    """
    text = _searchable_text(startup)

    if parsed_query.domain and parsed_query.domain not in text:
        return False

    if not _field_matches(startup.funding_amount, parsed_query.funding_stage):
        return False

    if not _field_matches(startup.location, parsed_query.location):
        return False

    if parsed_query.search_terms:
        return any(term in text for term in parsed_query.search_terms)

    return True


def filter_by_query(
    startups: Sequence[StartupData],
    query: str,
) -> list[StartupData]:
    """
    Keep the startups that match the filters parsed from a query.

    Returns:
        list[StartupData]: Matching startups in input order, or all of them
            when the query is blank.
    """
    if not query.strip():
        return list(startups)

    parsed = parse_query(query)
    return [startup for startup in startups if matches_filters(startup, parsed)]


def _searchable_text(startup: StartupData) -> str:
    return f"{startup.name} {startup.description} {' '.join(startup.tags)}".lower()


def _field_matches(value: str | None, wanted: str | None) -> bool:
    """
    Check an optional startup field against an optional query filter.

    Returns:
        bool: True when either side is absent or the filter occurs in the
            lower-cased field.
    """
    if not wanted or not value:
        return True
    return wanted in value.lower()
