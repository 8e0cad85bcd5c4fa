"""Data models for the analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class AnalysisRequest:
    """A validated request to analyze one URL."""

    url: str


@dataclass
class RawDocument:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int
    content_type: str = ""


@dataclass(frozen=True)
class ExtractedFields:
    """SEO-relevant fields pulled out of one HTML document."""

    title: Optional[str]
    meta_description: Optional[str]
    meta_keywords: Tuple[str, ...] = ()
    character_count: int = 0
    line_count: int = 0
    keyword_frequency: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class AnalysisResult:
    """The response payload for one analysis.  Never persisted."""

    url: str
    fields: ExtractedFields
    analyzed_at: datetime

    # ------------------------------------------------------------------
    # Wire format
    # ------------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        """Serialise to the camelCase JSON payload returned by the API."""
        return {
            "url": self.url,
            "title": self.fields.title,
            "metaDescription": self.fields.meta_description,
            "metaKeywords": list(self.fields.meta_keywords),
            "characterCount": self.fields.character_count,
            "lineCount": self.fields.line_count,
            "keywordFrequency": dict(self.fields.keyword_frequency),
            "analyzedAt": self.analyzed_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisResult":
        """Inverse of :meth:`to_dict`."""
        return cls(
            url=data["url"],
            fields=ExtractedFields(
                title=data.get("title"),
                meta_description=data.get("metaDescription"),
                meta_keywords=tuple(data.get("metaKeywords") or ()),
                character_count=int(data["characterCount"]),
                line_count=int(data["lineCount"]),
                keyword_frequency={
                    k: int(v) for k, v in (data.get("keywordFrequency") or {}).items()
                },
            ),
            analyzed_at=datetime.fromisoformat(data["analyzedAt"]),
        )
