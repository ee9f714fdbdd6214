# _utils/__init__.py

from ._client import make_client
from .backoff import RATE_LIMIT_FACTOR, STANDARD_FACTOR, backoff_delay
from .extract import extract_funding, extract_startup_name
from .retry import (
    RetryOptions,
    RetryResult,
    RetryTask,
    execute_with_retry,
    is_rate_limited,
    with_retry,
)

__all__ = [
    "RATE_LIMIT_FACTOR",
    "STANDARD_FACTOR",
    "RetryOptions",
    "RetryResult",
    "RetryTask",
    "backoff_delay",
    "execute_with_retry",
    "extract_funding",
    "extract_startup_name",
    "is_rate_limited",
    "make_client",
    "with_retry",
]
