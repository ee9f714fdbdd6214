# schemas/query.py

from typing import Literal

from pydantic import BaseModel, ConfigDict

Intent = Literal["search", "list", "recent", "funded"]

DEFAULT_TIMEFRAME_DAYS = 7


class ParsedQuery(BaseModel):
    """
    Structured filters extracted from a free-text startup query.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    search_terms: tuple[str, ...] = ()
    domain: str | None = None
    funding_stage: str | None = None
    timeframe: int = DEFAULT_TIMEFRAME_DAYS
    location: str | None = None
    intent: Intent = "search"
