"""Analyzer: assembles extracted fields into an :class:`AnalysisResult`.

Usage::

    from backend.analysis import analyze_url

    result = analyze_url("https://example.com")
    print(result.to_dict())
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from backend.scraper.extractor import extract_fields
from backend.scraper.fetcher import fetch_document
from backend.scraper.models import (
    AnalysisRequest,
    AnalysisResult,
    ExtractedFields,
    RawDocument,
)
from backend.scraper.urls import validate_target_url

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], RawDocument]


def build_result(
    request: AnalysisRequest,
    fields: ExtractedFields,
    now: Optional[datetime] = None,
) -> AnalysisResult:
    """Stamp *fields* with the capture time.  Extracted values pass through as-is."""
    return AnalysisResult(
        url=request.url,
        fields=fields,
        analyzed_at=now or datetime.now(timezone.utc),
    )


def analyze_url(url: str, fetch: Fetcher = fetch_document) -> AnalysisResult:
    """Run validate → fetch → extract → build for a single URL.

    Raises:
        ValidationError: Before any network I/O if *url* is unusable.
        NetworkError, UpstreamHTTPError: Propagated from *fetch*.
    """
    request = AnalysisRequest(url=validate_target_url(url))
    raw = fetch(request.url)
    fields = extract_fields(raw.html)
    logger.info(
        "Analyzed %s (%d chars, %d keywords)",
        request.url,
        fields.character_count,
        len(fields.meta_keywords),
    )
    return build_result(request, fields)
