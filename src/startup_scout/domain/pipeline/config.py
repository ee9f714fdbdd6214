# pipeline/config.py

import os
from dataclasses import dataclass

from startup_scout.adapters.data_sources._utils import RetryOptions

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """
    Settings controlling a single aggregation run.

    Durations are in seconds.
    """

    # attempts per source, including the first
    max_retries: int = 3
    # delay after a source's first failed attempt
    base_delay: float = 1.0
    # upper bound on any retry delay
    max_delay: float = 10.0
    # time budget per source attempt
    timeout: float = 15.0
    # minimum normalised-name similarity treated as the same startup
    similarity_threshold: float = 0.85
    # maximum startups kept per source before deduplication
    max_results_per_source: int = 30
    # maximum startups returned after ranking
    max_results: int = 100
    # drop startups that do not match the filters parsed from the query
    apply_query_filters: bool = False

    def retry_options(self) -> RetryOptions:
        """
        Build the retry policy applied to every source.

        Returns:
            RetryOptions: Policy derived from this configuration.
        """
        return RetryOptions(
            max_retries=self.max_retries,
            base_delay=self.base_delay,
            max_delay=self.max_delay,
            timeout=self.timeout,
        )


def load_config() -> PipelineConfig:
    """
    Build a PipelineConfig from ``SCOUT_*`` environment variables.

    Unset variables fall back to the dataclass defaults.

    Returns:
        PipelineConfig: The resolved configuration.

    Raises:
        ValueError: If a variable is set to a value of the wrong type or out
            of range.
    """
    defaults = PipelineConfig()

    config = PipelineConfig(
        max_retries=_env_int("SCOUT_MAX_RETRIES", defaults.max_retries),
        base_delay=_env_float("SCOUT_BASE_DELAY_SECONDS", defaults.base_delay),
        max_delay=_env_float("SCOUT_MAX_DELAY_SECONDS", defaults.max_delay),
        timeout=_env_float("SCOUT_TIMEOUT_SECONDS", defaults.timeout),
        similarity_threshold=_env_float(
            "SCOUT_SIMILARITY_THRESHOLD",
            defaults.similarity_threshold,
        ),
        max_results_per_source=_env_int(
            "SCOUT_MAX_RESULTS_PER_SOURCE",
            defaults.max_results_per_source,
        ),
        max_results=_env_int("SCOUT_MAX_RESULTS", defaults.max_results),
        apply_query_filters=_env_bool(
            "SCOUT_APPLY_QUERY_FILTERS",
            defaults.apply_query_filters,
        ),
    )
    _validate(config)
    return config


def _validate(config: PipelineConfig) -> None:
    if config.max_retries < 1:
        raise ValueError("SCOUT_MAX_RETRIES must be at least 1")
    if config.timeout <= 0:
        raise ValueError("SCOUT_TIMEOUT_SECONDS must be positive")
    if not 0.0 <= config.similarity_threshold <= 1.0:
        raise ValueError("SCOUT_SIMILARITY_THRESHOLD must be between 0 and 1")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as error:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from error


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as error:
        raise ValueError(f"{name} must be a number, got {raw!r}") from error


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
