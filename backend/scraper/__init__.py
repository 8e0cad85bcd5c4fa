"""Scraper package — web fetch & SEO field extraction."""

from backend.scraper.extractor import extract_fields
from backend.scraper.fetcher import fetch_document
from backend.scraper.models import (
    AnalysisRequest,
    AnalysisResult,
    ExtractedFields,
    RawDocument,
)
from backend.scraper.urls import validate_target_url

__all__ = [
    "fetch_document",
    "extract_fields",
    "validate_target_url",
    "AnalysisRequest",
    "AnalysisResult",
    "ExtractedFields",
    "RawDocument",
]
