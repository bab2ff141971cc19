"""
Shared HTTP client with automatic retry and backoff.

Provides a pre-configured ``requests.Session`` that retries on transient
network errors (timeouts, connection resets, 429/502/503/504) with
exponential backoff. Every datasource goes through ``session`` (usually via
``get_json``) so tests can patch a single seam.

Calendarific authenticates with an ``api_key`` query parameter, so URLs are
passed through ``redact_url`` before they reach an exception message.

Usage::

    from dateclash.services.http import get_json

    payload = get_json("https://archive-api.open-meteo.com/v1/archive", params={...})
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Default retry strategy: Open-Meteo and OpenHolidays both answer 429 under load.
DEFAULT_RETRY = Retry(
    total=4,
    backoff_factor=2,  # 0s, 2s, 4s, 8s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = "dateclash/0.1 (event date risk analysis)"

#: Query parameters whose values never appear in error messages or logs.
SENSITIVE_PARAMS = frozenset({"api_key", "apikey", "key", "token"})


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session; import and use directly.
session: requests.Session = create_session()


def redact_url(url: str) -> str:
    """Mask credential query parameters so a request URL can be logged.

    >>> redact_url("https://calendarific.com/api/v2/holidays?api_key=s3cret&year=2026")
    'https://calendarific.com/api/v2/holidays?api_key=***&year=2026'
    """
    parts = urlsplit(url)
    if not parts.query:
        return url
    query = [
        (name, "***" if name.lower() in SENSITIVE_PARAMS else value)
        for name, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*")))


def get_json(
    url: str,
    params: dict[str, Any] | None = None,
    *,
    expect: type | tuple[type, ...] | None = None,
) -> Any:
    """GET ``url`` and decode the JSON body.

    Args:
        url: Endpoint URL.
        params: Query parameters.
        expect: Required top-level JSON type(s), e.g. ``dict``; None accepts any.

    Raises:
        requests.HTTPError: On a non-2xx status. The message carries the
            redacted URL, never the raw one.
        requests.RequestException: On network failure.
        ValueError: If the body is not valid JSON or not of the ``expect`` type.
    """
    resp = session.get(url, params=params or {})
    try:
        resp.raise_for_status()
    except requests.HTTPError:
        msg = f"{resp.status_code} {resp.reason} for url: {redact_url(str(resp.url))}"
        raise requests.HTTPError(msg, response=resp) from None

    payload = resp.json()
    if expect is not None and not isinstance(payload, expect):
        msg = f"Unexpected {type(payload).__name__} body from {redact_url(str(resp.url))}"
        raise ValueError(msg)
    return payload
