# _utils/retry.py

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Generic, NamedTuple, TypeVar

from .backoff import RATE_LIMIT_FACTOR, STANDARD_FACTOR, backoff_delay

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]

_RATE_LIMIT_MARKERS = ("429", "rate limit")


@dataclass(frozen=True, slots=True)
class RetryOptions:
    """
    Immutable retry policy for a single operation.

    Durations are in seconds.
    """

    # total number of attempts, including the first
    max_retries: int = 3
    # delay after the first failed attempt
    base_delay: float = 1.0
    # upper bound on any single delay
    max_delay: float = 10.0
    # per-attempt time budget before the attempt counts as failed
    timeout: float = 15.0
    # called with (attempt, error) before an ordinary (non rate-limit) retry
    on_retry: Callable[[int, Exception], None] | None = None


@dataclass(frozen=True, slots=True)
class RetryResult(Generic[T]):
    """
    Outcome of running an operation under a retry policy.
    """

    success: bool
    attempts: int
    data: T | None = None
    error: str | None = None


class RetryTask(NamedTuple):
    """
    A named operation to run concurrently with its own retry policy.

    Attributes:
        name: Unique key for the result mapping, also used in log messages.
        operation: Zero-argument callable returning an awaitable.
        options: Retry policy; defaults apply if None.
    """

    name: str
    operation: Callable[[], Awaitable[object]]
    options: RetryOptions | None = None


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    label: str,
    options: RetryOptions | None = None,
    *,
    sleep: Sleep = asyncio.sleep,
) -> RetryResult[T]:
    """
    Run an async operation with a per-attempt timeout and bounded retries.

    Each attempt races the operation against the timeout. On failure the error
    message is inspected: rate-limit failures ("429" or "rate limit") back off
    by a factor of 3 after every attempt, including the last one; other
    failures invoke the on_retry callback and back off by a factor of 2 while
    attempts remain. A timed-out operation is not cancelled, only its outcome
    is ignored.

    Args:
        operation: Zero-argument callable returning the awaitable to run.
        label: Name used in log messages.
        options: Retry policy; defaults apply if None.
        sleep: Coroutine used to wait between attempts.

    Returns:
        RetryResult[T]: The data and attempt count on success, or the last
            error message with attempts equal to max_retries on exhaustion.
    """
    options = options or RetryOptions()
    last_error = ""

    for attempt in range(1, options.max_retries + 1):
        try:
            data = await _run_with_timeout(operation, options.timeout)
        except Exception as error:
            last_error = _describe(error)
            logger.warning(
                "[%s] Attempt %d/%d failed: %s",
                label,
                attempt,
                options.max_retries,
                last_error,
            )
            await _back_off(label, attempt, error, last_error, options, sleep)
            continue

        return RetryResult(success=True, data=data, attempts=attempt)

    logger.error(
        "[%s] Giving up after %d attempts: %s",
        label,
        options.max_retries,
        last_error,
    )
    return RetryResult(success=False, error=last_error, attempts=options.max_retries)


async def execute_with_retry(
    tasks: Iterable[RetryTask],
    *,
    sleep: Sleep = asyncio.sleep,
) -> dict[str, RetryResult]:
    """
    Run several named operations concurrently, each under its own retry policy.

    Waits for every operation to settle; one operation exhausting its retries
    never affects the others. Should an executor raise unexpectedly (for
    instance from a failing on_retry callback) the failure is recorded in that
    operation's result instead of being propagated.

    Returns:
        dict[str, RetryResult]: One result per task name.
    """
    tasks = list(tasks)

    outcomes = await asyncio.gather(
        *(with_retry(task.operation, task.name, task.options, sleep=sleep) for task in tasks),
        return_exceptions=True,
    )

    results: dict[str, RetryResult] = {}
    for task, outcome in zip(tasks, outcomes, strict=True):
        if isinstance(outcome, BaseException):
            logger.error("[%s] Retry executor failed: %s", task.name, outcome)
            outcome = RetryResult(success=False, error=_describe(outcome), attempts=0)
        results[task.name] = outcome

    return results


def is_rate_limited(message: str) -> bool:
    """
    Check whether an error message signals rate limiting.

    Returns:
        bool: True if the message mentions HTTP 429 or a rate limit.
    """
    lowered = message.lower()
    return any(marker in lowered for marker in _RATE_LIMIT_MARKERS)


async def _run_with_timeout(
    operation: Callable[[], Awaitable[T]],
    timeout: float,
) -> T:
    """
    Await the operation for at most ``timeout`` seconds.

    On timeout, or when the awaiting task is cancelled, the underlying task
    keeps running; its eventual outcome is consumed and discarded.

    Returns:
        T: The operation's result.

    Raises:
        TimeoutError: If the operation does not finish in time.
    """
    task = asyncio.ensure_future(operation())
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout)
    except asyncio.CancelledError:
        # the caller went away; the attempt is abandoned like a timed-out one
        task.add_done_callback(_discard_outcome)
        raise

    if task in done:
        return task.result()

    task.add_done_callback(_discard_outcome)
    raise TimeoutError(f"Timeout after {timeout}s")


def _discard_outcome(task: asyncio.Future) -> None:
    """
    Consume the outcome of an abandoned attempt so it is never reported as
    an unretrieved exception.
    """
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.debug("Abandoned attempt finished with error: %s", error)


async def _back_off(
    label: str,
    attempt: int,
    error: Exception,
    message: str,
    options: RetryOptions,
    sleep: Sleep,
) -> None:
    """
    Wait before the next attempt according to the kind of failure.
    """
    if is_rate_limited(message):
        delay = backoff_delay(
            attempt,
            base=options.base_delay,
            cap=options.max_delay,
            factor=RATE_LIMIT_FACTOR,
        )
        logger.info("[%s] Rate limited, waiting %.1fs before retry.", label, delay)
        await sleep(delay)
        return

    if attempt >= options.max_retries:
        return

    delay = backoff_delay(
        attempt,
        base=options.base_delay,
        cap=options.max_delay,
        factor=STANDARD_FACTOR,
    )
    if options.on_retry is not None:
        options.on_retry(attempt, error)
    logger.debug("[%s] Retrying in %.1fs.", label, delay)
    await sleep(delay)


def _describe(error: BaseException) -> str:
    return str(error) or type(error).__name__
