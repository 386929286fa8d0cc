"""SEO signal extraction: turns raw HTML into an :class:`AnalysisResult`.

Extraction is pattern based, not a DOM parse.  Two limitations follow from
that and are relied on by existing clients:

* a tag nested inside another tag of the same name ends the outer match at
  the inner closing tag;
* ``<meta>`` tags are only recognised when ``name``/``property`` comes before
  ``content``.
"""

from __future__ import annotations

import re

from analyzer.scraper.models import AnalysisResult, RawPage

_SUBTAG_RE = re.compile(r"<[^>]+>")
_PARAGRAPH_RE = re.compile(r"<p(?:\s[^>]*)?>(.*?)</?p>", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _meta_pattern(attribute: str, key: str) -> re.Pattern[str]:
    # The key itself is matched case-sensitively inside an otherwise
    # case-insensitive pattern.
    return re.compile(
        rf"<meta[^>]*{attribute}=[\"'](?-i:{re.escape(key)})[\"'][^>]*"
        rf"content=[\"']([^\"']*)[\"'][^>]*>",
        re.IGNORECASE,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_tag_content(html: str, tag_name: str) -> str:
    """Return the stripped inner text of the first ``<tag_name>``, or ``""``."""
    tag = re.escape(tag_name)
    match = re.search(
        rf"<{tag}(?:\s[^>]*)?>(.*?)</{tag}>", html, re.IGNORECASE | re.DOTALL
    )
    if match:
        return match.group(1).strip()
    return ""


def get_meta_content(html: str, key: str) -> str:
    """Return the ``content`` of the ``<meta>`` tag identified by *key*.

    A ``name="<key>"`` tag wins over a ``property="<key>"`` tag; an empty
    string is returned when neither exists.
    """
    for attribute in ("name", "property"):
        match = _meta_pattern(attribute, key).search(html)
        if match:
            return match.group(1)
    return ""


def get_document_title(html: str) -> str:
    """Return the best available page title.

    Fallback chain: ``<title>`` tag, then ``og:title`` meta, then ``title``
    meta.  Returns an empty string if all three are empty.
    """
    return (
        get_tag_content(html, "title")
        or get_meta_content(html, "og:title")
        or get_meta_content(html, "title")
    )


def count_words_in_p_tags(html: str) -> int:
    """Count whitespace-separated words inside every ``<p>`` element.

    Each span runs from a ``<p>`` opening tag to the next ``</p>`` or ``<p>``,
    so an unclosed paragraph is cut off by the one that follows it.  A span
    cannot cross a line break, so paragraphs with wrapped text are skipped.
    Nested tags inside a span are treated as word separators.
    """
    total = 0
    for match in _PARAGRAPH_RE.finditer(html):
        text = _SUBTAG_RE.sub(" ", match.group(1))
        total += len(text.split())
    return total


def analyze_html(html: str, status_code: int) -> AnalysisResult:
    """Build an :class:`AnalysisResult` from *html* and its HTTP status."""
    return AnalysisResult(
        status_code=status_code,
        meta_title=get_document_title(html),
        meta_description=get_meta_content(html, "description"),
        word_count_in_p_tags=count_words_in_p_tags(html),
    )


def analyze_page(raw: RawPage) -> AnalysisResult:
    """Convenience wrapper around :func:`analyze_html` for a fetched page."""
    return analyze_html(raw.html, raw.status_code)
