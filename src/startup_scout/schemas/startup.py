# schemas/startup.py

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StartupData(BaseModel):
    """
    A single startup record as gathered from one or more public sources.

    Field names are snake_case; camelCase keys (``fundingAmount``,
    ``sourceUrls`` and so on) are accepted on input so records produced by the
    ingestion backend validate unchanged.

    Args:
        name (str): Display name of the startup.
        description (str): Free-text description.
        website (str | None): Homepage URL, if known.
        funding_amount (str | None): Funding as reported, e.g. "$12M".
        location (str | None): Location as reported, e.g. "Remote".
        date_announced (str | None): ISO date (YYYY-MM-DD) of the announcement.
        tags (list[str]): Free-form tags.
        sources (list[str]): Identifiers of the sources that reported it.
        source_urls (list[str]): URLs of the source records.
        confidence_score (float): Confidence in the record, between 0 and 1.
        relevance_score (float | None): Query relevance, set by scoring.

    Returns:
        StartupData: A validated startup record.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        # records coming from scrapers carry arbitrary extra keys
        extra="ignore",
    )

    name: str
    description: str = ""
    website: str | None = None
    funding_amount: str | None = None
    location: str | None = None
    date_announced: str | None = None
    tags: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    source_urls: list[str] = Field(default_factory=list)
    confidence_score: float = Field(default=0.5, ge=0.0, le=1.0)
    relevance_score: float | None = None
