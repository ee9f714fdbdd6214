# _utils/_client.py

import httpx

_USER_AGENT = "startup-scout/0.1 (startup discovery)"

_DEFAULT_TIMEOUT = httpx.Timeout(10.0, connect=5.0)


def make_client(**overrides: object) -> httpx.AsyncClient:
    """
    Create the shared async HTTP client used by every data source.

    Sets a descriptive User-Agent, follows redirects and applies a default
    timeout; any keyword argument overrides the corresponding client setting.

    Returns:
        httpx.AsyncClient: A client to be used as an async context manager.
    """
    settings: dict[str, object] = {
        "headers": {"User-Agent": _USER_AGENT, "Accept": "application/json"},
        "timeout": _DEFAULT_TIMEOUT,
        "follow_redirects": True,
    }
    settings.update(overrides)
    return httpx.AsyncClient(**settings)
