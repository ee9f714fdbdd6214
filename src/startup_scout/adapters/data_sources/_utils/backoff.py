# _utils/backoff.py

STANDARD_FACTOR = 2.0
RATE_LIMIT_FACTOR = 3.0


def backoff_delay(
    attempt: int,
    *,
    base: float = 1.0,
    cap: float = 10.0,
    factor: float = STANDARD_FACTOR,
) -> float:
    """
    Compute the pause before retrying after a failed attempt.

    The delay grows geometrically from the base by the given factor and is
    bounded by the cap. Rate-limited failures use a steeper factor than
    ordinary ones.

    Args:
        attempt: 1-based number of the attempt that just failed.
        base: Delay after the first failure, in seconds.
        cap: Upper bound on any delay, in seconds.
        factor: Growth factor between consecutive attempts.

    Returns:
        float: Delay in seconds, ``min(base * factor ** (attempt - 1), cap)``.
    """
    return min(base * factor ** (attempt - 1), cap)
