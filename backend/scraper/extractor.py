"""Field extraction: turns raw HTML into :class:`ExtractedFields`.

Everything here is pure and tolerant of broken markup: anything that cannot
be located comes back absent (``None`` / empty) rather than raising.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup

from backend.scraper.models import ExtractedFields

logger = logging.getLogger(__name__)

# Elements whose text never reaches the rendered page.
_INVISIBLE_TAGS = ["script", "style", "noscript", "template", "title"]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _meta_content(soup: BeautifulSoup, name: str) -> Optional[str]:
    """Return the ``content`` of the first ``<meta name=...>`` tag, trimmed."""
    pattern = re.compile(rf"^\s*{re.escape(name)}\s*$", re.IGNORECASE)
    tag = soup.find("meta", attrs={"name": pattern})
    if tag is None:
        return None
    content = tag.get("content")
    if content is None:
        return None
    return content.strip()


def _extract_title(soup: BeautifulSoup) -> Optional[str]:
    tag = soup.find("title")
    if tag is None:
        return None
    return tag.get_text().strip()


def _split_keywords(content: Optional[str]) -> List[str]:
    """Split a comma-separated keyword list, dropping blanks."""
    if not content:
        return []
    return [kw.strip() for kw in content.split(",") if kw.strip()]


def _visible_text(soup: BeautifulSoup) -> str:
    for tag in soup(_INVISIBLE_TAGS):
        tag.decompose()
    return soup.get_text(separator=" ")


def _count_keyword(keyword: str, text: str) -> int:
    """Case-insensitive count of *keyword* as a whole word/phrase in *text*."""
    pattern = re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)", re.IGNORECASE)
    return len(pattern.findall(text))


def _line_count(html: str) -> int:
    """Newline-delimited segments; the empty document has zero lines."""
    if not html:
        return 0
    return html.count("\n") + 1


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_fields(html: str) -> ExtractedFields:
    """Extract title, meta tags, structural counts and keyword frequency.

    Markup the parser rejects outright yields absent title, description and
    keywords; the raw-text counts are still reported.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.info("Parser rejected markup, reporting counts only: %s", exc)
        return ExtractedFields(
            title=None,
            meta_description=None,
            character_count=len(html),
            line_count=_line_count(html),
        )

    title = _extract_title(soup)
    description = _meta_content(soup, "description")
    keywords = _split_keywords(_meta_content(soup, "keywords"))

    frequency: Dict[str, int] = {}
    if keywords:
        text = _visible_text(soup)
        seen: set[str] = set()
        for kw in keywords:
            if kw.lower() in seen:
                continue
            seen.add(kw.lower())
            frequency[kw] = _count_keyword(kw, text)

    return ExtractedFields(
        title=title,
        meta_description=description,
        meta_keywords=tuple(keywords),
        character_count=len(html),
        line_count=_line_count(html),
        keyword_frequency=frequency,
    )
