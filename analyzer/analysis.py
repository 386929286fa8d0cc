"""Page analysis pipeline.

``analyze_url`` orchestrates the request cycle from a raw URL to the JSON
payload served to clients:

    validate → fetch → extract → serialise

Every failure is reported in the payload as ``{"error": <message>}``, never
alongside analysis fields.
"""

from __future__ import annotations

import logging
from typing import Any

from analyzer.scraper.extractor import analyze_page
from analyzer.scraper.fetcher import fetch_url

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Failed to fetch or process the URL."


def error_payload(message: str) -> dict[str, Any]:
    """Return the single-field error object sent in place of a result."""
    return {"error": message or FALLBACK_ERROR_MESSAGE}


def analyze_url(url: str) -> dict[str, Any]:
    """Fetch *url* and return its SEO signals as a JSON-ready dict.

    No retries are made.  Invalid URLs are rejected before any network
    access; transport failures, timeouts and oversized bodies are turned
    into an error payload carrying the underlying message.
    """
    try:
        raw = fetch_url(url)
        result = analyze_page(raw)
    except Exception as exc:
        logger.warning("[analysis] %s failed: %s", url, exc)
        return error_payload(str(exc))

    logger.info(
        "[analysis] %s status=%s title_len=%d words=%d",
        url,
        result.status_code,
        result.meta_title_length,
        result.word_count_in_p_tags,
    )
    return result.to_dict()
