# _utils/test_retry.py

import asyncio

import pytest

from startup_scout.adapters.data_sources._utils import (
    RetryOptions,
    RetryTask,
    execute_with_retry,
    is_rate_limited,
    with_retry,
)

from .._helpers import SleepRecorder

pytestmark = pytest.mark.unit


def _failing(message: str):
    """
    Build an operation that always raises RuntimeError(message) and counts calls.
    """
    calls: list[int] = []

    async def operation() -> None:
        calls.append(1)
        raise RuntimeError(message)

    return operation, calls


def _succeeding_on(call_number: int, value: object = "ok"):
    """
    Build an operation that fails until the given call, then returns value.
    """
    calls: list[int] = []

    async def operation() -> object:
        calls.append(1)
        if len(calls) < call_number:
            raise RuntimeError("connection reset")
        return value

    return operation, calls


async def test_with_retry_returns_data_on_first_success() -> None:
    """
    ARRANGE: operation that succeeds immediately
    ACT:     with_retry
    ASSERT:  success with data and one attempt
    """
    operation, _ = _succeeding_on(1, value={"id": 1})

    actual = await with_retry(operation, "source", sleep=SleepRecorder())

    assert (actual.success, actual.data, actual.attempts) == (True, {"id": 1}, 1)


async def test_with_retry_succeeds_on_second_call() -> None:
    """
    ARRANGE: operation failing once, then succeeding; on_retry recorder
    ACT:     with_retry
    ASSERT:  success after two attempts
    """
    operation, _ = _succeeding_on(2)

    actual = await with_retry(operation, "source", sleep=SleepRecorder())

    assert (actual.success, actual.attempts) == (True, 2)


async def test_with_retry_invokes_on_retry_once_after_first_failure() -> None:
    """
    ARRANGE: operation failing once, then succeeding; on_retry recorder
    ACT:     with_retry
    ASSERT:  on_retry called exactly once with attempt 1
    """
    operation, _ = _succeeding_on(2)
    retries: list[tuple[int, str]] = []
    options = RetryOptions(
        on_retry=lambda attempt, error: retries.append((attempt, str(error))),
    )

    await with_retry(operation, "source", options, sleep=SleepRecorder())

    assert retries == [(1, "connection reset")]


async def test_with_retry_rate_limit_uses_tripling_schedule() -> None:
    """
    ARRANGE: operation always failing with a 429 rate-limit message
    ACT:     with_retry with defaults
    ASSERT:  waits 1s, 3s, 9s, including after the final attempt
    """
    operation, _ = _failing("rate limit exceeded (429)")
    sleep = SleepRecorder()

    await with_retry(operation, "source", sleep=sleep)

    assert sleep.delays == [1.0, 3.0, 9.0]


async def test_with_retry_rate_limit_exhaustion_reports_last_error() -> None:
    """
    ARRANGE: operation always failing with a 429 rate-limit message
    ACT:     with_retry with defaults
    ASSERT:  failure with the message and attempts equal to max_retries
    """
    operation, calls = _failing("rate limit exceeded (429)")

    actual = await with_retry(operation, "source", sleep=SleepRecorder())

    assert (actual.success, actual.error, actual.attempts, len(calls)) == (
        False,
        "rate limit exceeded (429)",
        3,
        3,
    )


async def test_with_retry_rate_limit_skips_on_retry() -> None:
    """
    ARRANGE: rate-limited operation and an on_retry recorder
    ACT:     with_retry
    ASSERT:  on_retry never called
    """
    operation, _ = _failing("Rate Limit reached")
    retries: list[int] = []
    options = RetryOptions(on_retry=lambda attempt, error: retries.append(attempt))

    await with_retry(operation, "source", options, sleep=SleepRecorder())

    assert retries == []


async def test_with_retry_rate_limit_delay_is_capped() -> None:
    """
    ARRANGE: base delay 4s, cap 10s, always rate limited
    ACT:     with_retry
    ASSERT:  delays 4s, then capped at 10s
    """
    operation, _ = _failing("HTTP 429")
    sleep = SleepRecorder()
    options = RetryOptions(base_delay=4.0, max_delay=10.0)

    await with_retry(operation, "source", options, sleep=sleep)

    assert sleep.delays == [4.0, 10.0, 10.0]


async def test_with_retry_generic_failure_uses_doubling_schedule() -> None:
    """
    ARRANGE: operation always failing with a generic error
    ACT:     with_retry with defaults
    ASSERT:  waits 1s then 2s, and not after the final attempt
    """
    operation, _ = _failing("boom")
    sleep = SleepRecorder()

    await with_retry(operation, "source", sleep=sleep)

    assert sleep.delays == [1.0, 2.0]


async def test_with_retry_generic_failure_calls_on_retry_between_attempts() -> None:
    """
    ARRANGE: operation always failing, four attempts allowed
    ACT:     with_retry
    ASSERT:  on_retry called for attempts 1 to 3 only
    """
    operation, _ = _failing("boom")
    retries: list[int] = []
    options = RetryOptions(
        max_retries=4,
        on_retry=lambda attempt, error: retries.append(attempt),
    )

    await with_retry(operation, "source", options, sleep=SleepRecorder())

    assert retries == [1, 2, 3]


async def test_with_retry_timeout_counts_as_failure() -> None:
    """
    ARRANGE: operation slower than a tiny timeout, one attempt
    ACT:     with_retry
    ASSERT:  failure with a timeout message
    """
    finished = asyncio.Event()

    async def slow() -> str:
        await asyncio.sleep(0.05)
        finished.set()
        return "late"

    options = RetryOptions(max_retries=1, timeout=0.01)

    actual = await with_retry(slow, "source", options, sleep=SleepRecorder())
    await asyncio.wait_for(finished.wait(), timeout=1.0)

    assert (actual.success, actual.error) == (False, "Timeout after 0.01s")


async def test_with_retry_timed_out_operation_keeps_running() -> None:
    """
    ARRANGE: operation slower than the timeout that records completion
    ACT:     with_retry, then wait for the abandoned operation
    ASSERT:  the operation still runs to completion
    """
    finished = asyncio.Event()

    async def slow() -> None:
        await asyncio.sleep(0.05)
        finished.set()

    options = RetryOptions(max_retries=1, timeout=0.01)

    await with_retry(slow, "source", options, sleep=SleepRecorder())
    await asyncio.wait_for(finished.wait(), timeout=1.0)

    assert finished.is_set()


async def test_with_retry_cancelled_caller_consumes_late_failure(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """
    ARRANGE: slow operation that fails after its caller is cancelled
    ACT:     cancel the task running with_retry, then let the operation finish
    ASSERT:  the late failure is consumed and logged as abandoned
    """
    finished = asyncio.Event()

    async def slow_failure() -> None:
        await asyncio.sleep(0.05)
        finished.set()
        raise RuntimeError("late failure")

    options = RetryOptions(max_retries=1, timeout=5.0)
    caller = asyncio.ensure_future(
        with_retry(slow_failure, "source", options, sleep=SleepRecorder()),
    )
    await asyncio.sleep(0.01)

    with caplog.at_level("DEBUG", logger="startup_scout.adapters.data_sources._utils.retry"):
        caller.cancel()
        with pytest.raises(asyncio.CancelledError):
            await caller
        await asyncio.wait_for(finished.wait(), timeout=1.0)
        await asyncio.sleep(0.05)

    assert "Abandoned attempt finished with error: late failure" in caplog.text


async def test_with_retry_uses_exception_type_for_empty_messages() -> None:
    """
    ARRANGE: operation raising an exception without a message
    ACT:     with_retry with one attempt
    ASSERT:  error is the exception type name
    """

    async def operation() -> None:
        raise ValueError

    actual = await with_retry(
        operation,
        "source",
        RetryOptions(max_retries=1),
        sleep=SleepRecorder(),
    )

    assert actual.error == "ValueError"


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("Client error '429 Too Many Requests'", True),
        ("API RATE LIMIT exceeded", True),
        ("503 Service Unavailable", False),
    ],
)
def test_is_rate_limited(message: str, expected: bool) -> None:
    """
    ARRANGE: error message
    ACT:     is_rate_limited
    ASSERT:  classification matches
    """
    actual = is_rate_limited(message)

    assert actual is expected


async def test_execute_with_retry_isolates_failures() -> None:
    """
    ARRANGE: one always-succeeding and one always-failing task
    ACT:     execute_with_retry
    ASSERT:  both keys present; first succeeds, second fails
    """
    ok, _ = _succeeding_on(1)
    bad, _ = _failing("boom")
    options = RetryOptions(max_retries=2)

    actual = await execute_with_retry(
        [RetryTask("ok", ok, options), RetryTask("bad", bad, options)],
        sleep=SleepRecorder(),
    )

    assert (actual["ok"].success, actual["bad"].success) == (True, False)


async def test_execute_with_retry_is_independent_of_completion_order() -> None:
    """
    ARRANGE: slow success and fast failure
    ACT:     execute_with_retry
    ASSERT:  key set equals the input names with the right outcomes
    """

    async def slow_ok() -> str:
        await asyncio.sleep(0.02)
        return "done"

    fast_bad, _ = _failing("boom")
    options = RetryOptions(max_retries=1)

    actual = await execute_with_retry(
        [RetryTask("slow", slow_ok, options), RetryTask("fast", fast_bad, options)],
    )

    assert {name: result.success for name, result in actual.items()} == {
        "slow": True,
        "fast": False,
    }


async def test_execute_with_retry_records_executor_errors() -> None:
    """
    ARRANGE: task whose on_retry callback raises
    ACT:     execute_with_retry
    ASSERT:  the task is reported as failed rather than propagating
    """

    def explode(attempt: int, error: Exception) -> None:
        raise RuntimeError("callback failed")

    bad, _ = _failing("boom")
    options = RetryOptions(max_retries=2, on_retry=explode)

    actual = await execute_with_retry(
        [RetryTask("bad", bad, options)],
        sleep=SleepRecorder(),
    )

    assert (actual["bad"].success, actual["bad"].error) == (False, "callback failed")


async def test_execute_with_retry_empty_input_returns_empty_mapping() -> None:
    """
    ARRANGE: no tasks
    ACT:     execute_with_retry
    ASSERT:  empty mapping
    """
    actual = await execute_with_retry([])

    assert actual == {}
