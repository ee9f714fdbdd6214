# deduplication/dedup.py

import logging
from collections.abc import Iterable, Sequence

from startup_scout.schemas import StartupData

from .normalise import normalize_name
from .similarity import calculate_similarity

logger = logging.getLogger(__name__)

DEFAULT_SIMILARITY_THRESHOLD = 0.85

# placeholder values that any concrete value should replace
_UNDISCLOSED = "Undisclosed"
_VAGUE_LOCATIONS = frozenset({"Remote", _UNDISCLOSED})

_CONFIDENCE_PER_SOURCE = 0.1


def deduplicate_startups(
    startups: Sequence[StartupData],
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> list[StartupData]:
    """
    Group startups that refer to the same company and merge each group.

    Each record is keyed by its normalised name. An exact key match merges into
    the existing group; otherwise the existing keys are scanned in insertion
    order and the record merges into the first one whose similarity meets the
    threshold. Grouping is greedy: the first qualifying group wins even if a
    later group is a closer match. Input records are never mutated.

    Args:
        startups (Sequence[StartupData]): Records in ingestion order.
        similarity_threshold (float): Minimum similarity for a fuzzy match.

    Returns:
        list[StartupData]: One merged record per group, in first-seen order.
    """
    groups: dict[str, StartupData] = {}

    for startup in startups:
        key = normalize_name(startup.name)

        existing = groups.get(key)
        if existing is None:
            existing = _find_fuzzy_match(key, groups, similarity_threshold)

        if existing is None:
            groups[key] = startup.model_copy(deep=True)
        else:
            merge_startups(existing, startup)

    logger.debug(
        "Deduplicated %d startups into %d unique groups.",
        len(startups),
        len(groups),
    )
    return list(groups.values())


def _find_fuzzy_match(
    key: str,
    groups: dict[str, StartupData],
    threshold: float,
) -> StartupData | None:
    """
    Find the first group whose key is similar enough to the given key.

    Returns:
        StartupData | None: The retained record of the first matching group,
            or None if no group meets the threshold.
    """
    for existing_key, existing in groups.items():
        if calculate_similarity(key, existing_key) >= threshold:
            return existing
    return None


def merge_startups(existing: StartupData, new: StartupData) -> None:
    """
    Merge a duplicate record into the retained record of its group, in place.

    Unions sources, source URLs and tags, keeps the longer description,
    replaces placeholder funding and location values with concrete ones,
    fills a missing website and raises confidence by 0.1 per new source,
    capped at 1.0.
    """
    existing.sources = _union(existing.sources, new.sources)
    existing.source_urls = _union(existing.source_urls, new.source_urls)

    if len(new.description) > len(existing.description):
        existing.description = new.description

    if _is_known(new.funding_amount) and not _is_known(existing.funding_amount):
        existing.funding_amount = new.funding_amount

    if _is_specific_location(new.location) and not _is_specific_location(
        existing.location,
    ):
        existing.location = new.location

    if new.website and not existing.website:
        existing.website = new.website

    existing.tags = _union(existing.tags, new.tags)

    existing.confidence_score = min(
        1.0,
        existing.confidence_score + _CONFIDENCE_PER_SOURCE * len(new.sources),
    )


def _union(first: Iterable[str], second: Iterable[str]) -> list[str]:
    """
    Order-preserving union of two lists, dropping repeated entries.

    Returns:
        list[str]: Entries of both inputs in first-seen order.
    """
    return list(dict.fromkeys([*first, *second]))


def _is_known(funding: str | None) -> bool:
    return bool(funding) and funding != _UNDISCLOSED


def _is_specific_location(location: str | None) -> bool:
    return bool(location) and location not in _VAGUE_LOCATIONS
