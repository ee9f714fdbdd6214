# schemas/summary.py

from pydantic import BaseModel, ConfigDict

from .startup import StartupData


class SourceSummary(BaseModel):
    """
    Outcome of fetching from a single source.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    success: bool
    count: int
    error: str | None = None
    retry_attempts: int


class AggregationSummary(BaseModel):
    """
    Totals for one aggregation run across every configured source.

    Serialisable as JSON so the CLI and downstream consumers can report on
    which sources succeeded and how much deduplication removed.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    total_sources: int
    successful_sources: int
    failed_sources: int
    total_startups_found: int
    unique_after_dedup: int
    elapsed_seconds: float
    sources: dict[str, SourceSummary]


class AggregationResult(BaseModel):
    """
    Ranked startups together with the summary of the run that produced them.
    """

    model_config = ConfigDict(frozen=True)

    startups: tuple[StartupData, ...]
    summary: AggregationSummary
