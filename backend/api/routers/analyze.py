"""SEO analysis endpoint.

Routes
------
POST /analyze    Body: {"url": "https://..."}    → analyze_url

Failures are raised as :class:`~backend.errors.AnalysisError` subclasses and
turned into ``{"error": ...}`` bodies by the handlers registered in
:mod:`backend.api.app`.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from backend.analysis import analyze_url
from backend.scraper.fetcher import fetch_document

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    url: str


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    title: Optional[str]
    meta_description: Optional[str] = Field(alias="metaDescription")
    meta_keywords: list[str] = Field(alias="metaKeywords")
    character_count: int = Field(alias="characterCount")
    line_count: int = Field(alias="lineCount")
    keyword_frequency: dict[str, int] = Field(alias="keywordFrequency")
    analyzed_at: str = Field(alias="analyzedAt")


class ErrorResponse(BaseModel):
    error: str


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.post(
    "",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze_endpoint(body: AnalyzeRequest) -> dict[str, Any]:
    """Fetch a single page and report its title, meta tags and keyword counts.

    The URL is validated before any network call; nothing is stored.
    """
    result = analyze_url(body.url, fetch=fetch_document)
    return result.to_dict()
