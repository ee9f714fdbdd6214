# pipeline/aggregate.py

import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from typing import NamedTuple

from startup_scout.adapters.data_sources import (
    fetch_lobsters_launches,
    fetch_reddit_posts,
    fetch_show_hn,
    search_repositories,
)
from startup_scout.adapters.data_sources._utils import (
    RetryResult,
    RetryTask,
    execute_with_retry,
)
from startup_scout.schemas import (
    AggregationResult,
    AggregationSummary,
    SourceSummary,
    StartupData,
)

from ..deduplication import deduplicate_startups
from ..query import filter_by_query
from ..scoring import sort_by_relevance
from .config import PipelineConfig, load_config

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, int], Awaitable[list[StartupData]]]


class Source(NamedTuple):
    """
    A named startup source.

    Attributes:
        name: Key under which the source is reported in the summary.
        fetch: Async callable taking (query, days_back) and returning startups.
    """

    name: str
    fetch: Fetcher


DEFAULT_SOURCES: tuple[Source, ...] = (
    Source("hackernews", fetch_show_hn),
    Source("reddit", fetch_reddit_posts),
    Source("github", search_repositories),
    Source("lobsters", fetch_lobsters_launches),
)

# lookback window accepted from callers; wider requests are clamped
MAX_DAYS_BACK = 3650


async def aggregate_startups(
    query: str,
    *,
    days_back: int = 7,
    sources: Sequence[Source] | None = None,
    config: PipelineConfig | None = None,
) -> AggregationResult:
    """
    Collect startups from every source, then deduplicate and rank them.

    Sources run concurrently, each under the configured retry policy; a source
    that keeps failing is reported in the summary and contributes nothing.
    Results from the remaining sources are merged by fuzzy name matching,
    optionally filtered by the parsed query, scored for relevance and
    truncated to ``max_results``.

    Args:
        query (str): Free-text query passed to every source and used for
            ranking.
        days_back (int): How many days of announcements to fetch. Clamped to
            the range 0 to MAX_DAYS_BACK.
        sources (Sequence[Source] | None): Sources to query; defaults to
            DEFAULT_SOURCES.
        config (PipelineConfig | None): Run settings; loaded from the
            environment if None.

    Returns:
        AggregationResult: Ranked startups and the per-source summary.
    """
    started = time.monotonic()
    sources = DEFAULT_SOURCES if sources is None else tuple(sources)
    config = config or load_config()
    days_back = _clamp_days(days_back)

    logger.info(
        "Aggregating startups for query %r over %d days from %d sources.",
        query,
        days_back,
        len(sources),
    )

    results = await execute_with_retry(_build_tasks(sources, query, days_back, config))

    collected: list[StartupData] = []
    for source in sources:
        result = results[source.name]
        if result.success:
            collected.extend((result.data or [])[: config.max_results_per_source])

    unique = deduplicate_startups(collected, config.similarity_threshold)
    logger.info(
        "Collected %d startups, %d unique after deduplication.",
        len(collected),
        len(unique),
    )

    candidates = filter_by_query(unique, query) if config.apply_query_filters else unique
    ranked = sort_by_relevance(candidates, query)[: config.max_results]

    summary = _summarise(
        results,
        sources,
        config,
        total_found=len(collected),
        unique_count=len(unique),
        elapsed=time.monotonic() - started,
    )
    logger.info(
        "Aggregation finished in %.2fs: %d/%d sources succeeded.",
        summary.elapsed_seconds,
        summary.successful_sources,
        summary.total_sources,
    )
    return AggregationResult(startups=tuple(ranked), summary=summary)


def _build_tasks(
    sources: Sequence[Source],
    query: str,
    days_back: int,
    config: PipelineConfig,
) -> list[RetryTask]:
    """
    Wrap each source fetch in a retry task bound to the query.

    Returns:
        list[RetryTask]: One task per source.
    """
    options = config.retry_options()
    return [
        RetryTask(
            name=source.name,
            operation=_bind(source.fetch, query, days_back),
            options=options,
        )
        for source in sources
    ]


def _bind(
    fetch: Fetcher,
    query: str,
    days_back: int,
) -> Callable[[], Awaitable[list[StartupData]]]:
    def operation() -> Awaitable[list[StartupData]]:
        return fetch(query, days_back)

    return operation


def _clamp_days(days_back: int) -> int:
    clamped = max(0, min(days_back, MAX_DAYS_BACK))
    if clamped != days_back:
        logger.warning("Lookback of %d days clamped to %d.", days_back, clamped)
    return clamped


def _summarise(
    results: dict[str, RetryResult],
    sources: Sequence[Source],
    config: PipelineConfig,
    *,
    total_found: int,
    unique_count: int,
    elapsed: float,
) -> AggregationSummary:
    """
    Build the run summary from the per-source retry results.

    Returns:
        AggregationSummary: Totals and one SourceSummary per source.
    """
    per_source = {
        source.name: _summarise_source(source.name, results[source.name], config)
        for source in sources
    }
    successful = sum(1 for summary in per_source.values() if summary.success)

    return AggregationSummary(
        total_sources=len(per_source),
        successful_sources=successful,
        failed_sources=len(per_source) - successful,
        total_startups_found=total_found,
        unique_after_dedup=unique_count,
        elapsed_seconds=round(elapsed, 3),
        sources=per_source,
    )


def _summarise_source(
    name: str,
    result: RetryResult,
    config: PipelineConfig,
) -> SourceSummary:
    if result.success:
        count = len((result.data or [])[: config.max_results_per_source])
        logger.info("[%s] %d startups after %d attempt(s).", name, count, result.attempts)
        return SourceSummary(success=True, count=count, retry_attempts=result.attempts)

    logger.error("[%s] Failed after %d attempts: %s", name, result.attempts, result.error)
    return SourceSummary(
        success=False,
        count=0,
        error=result.error or "Unknown error",
        retry_attempts=result.attempts,
    )
