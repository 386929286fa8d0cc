"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class AnalysisResult:
    """SEO signals extracted from a single :class:`RawPage`.

    The two ``*_length`` values are derived from the strings they measure,
    so they always agree with them.
    """

    status_code: int
    meta_title: str = ""
    meta_description: str = ""
    word_count_in_p_tags: int = 0

    @property
    def meta_title_length(self) -> int:
        return len(self.meta_title)

    @property
    def meta_description_length(self) -> int:
        return len(self.meta_description)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON payload served to clients (camelCase keys)."""
        return {
            "statusCode": self.status_code,
            "metaTitle": self.meta_title,
            "metaTitleLength": self.meta_title_length,
            "metaDescription": self.meta_description,
            "metaDescriptionLength": self.meta_description_length,
            "wordCountInPTags": self.word_count_in_p_tags,
        }
