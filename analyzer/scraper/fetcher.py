"""HTTP fetcher: a single GET per URL, following redirects."""

from __future__ import annotations

import logging

import httpx

from analyzer.config import settings
from analyzer.scraper.models import RawPage

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")

INVALID_PROTOCOL_MESSAGE = "Invalid protocol; only http and https are supported."


class FetchError(Exception):
    """Raised when a page cannot be retrieved or read."""


class InvalidURLError(FetchError):
    """Raised when the target URL is malformed or uses an unsupported scheme."""


def validate_url(url: str) -> httpx.URL:
    """Parse *url* and check that it is an absolute http(s) URL.

    Raises:
        InvalidURLError: If *url* cannot be parsed, or its scheme is not
            ``http``/``https``.
    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidURLError(str(exc) or "Invalid URL") from exc

    if not parsed.scheme:
        raise InvalidURLError("Invalid URL")
    if parsed.scheme not in _ALLOWED_SCHEMES:
        raise InvalidURLError(INVALID_PROTOCOL_MESSAGE)
    if not parsed.host:
        raise InvalidURLError("Invalid URL")
    return parsed


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    4xx/5xx responses are returned like any other; the status code is part of
    the analysis.  The body is streamed and reading stops with a
    :class:`FetchError` once it grows past ``settings.max_body_bytes``.

    Raises:
        InvalidURLError: If the URL is rejected by :func:`validate_url`.
        FetchError: If the body is larger than the configured limit.
        httpx.HTTPError: On transport failures (DNS, connection, timeout …).
    """
    validate_url(url)
    logger.info("[fetcher] GET %s", url)

    with httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        with client.stream("GET", url) as response:
            body = bytearray()
            for chunk in response.iter_bytes():
                body.extend(chunk)
                if len(body) > settings.max_body_bytes:
                    raise FetchError(
                        f"Response body exceeds {settings.max_body_bytes} bytes."
                    )
            encoding = response.encoding or "utf-8"
            status_code = response.status_code

    html = bytes(body).decode(encoding, errors="replace")
    logger.info("[fetcher] HTTP %s %s (%d bytes)", status_code, url, len(body))
    return RawPage(url=url, html=html, status_code=status_code)
