"""Scraper package — web fetch & SEO signal extraction."""

from analyzer.scraper.extractor import analyze_html, analyze_page
from analyzer.scraper.fetcher import FetchError, InvalidURLError, fetch_url
from analyzer.scraper.models import AnalysisResult, RawPage

__all__ = [
    "fetch_url",
    "analyze_html",
    "analyze_page",
    "AnalysisResult",
    "RawPage",
    "FetchError",
    "InvalidURLError",
]
