"""HTTP fetcher: one GET per call, no retries."""

from __future__ import annotations

import logging

import httpx

from backend.config import settings
from backend.errors import NetworkError, UpstreamHTTPError, ValidationError
from backend.scraper.models import RawDocument
from backend.scraper.urls import validate_target_url

logger = logging.getLogger(__name__)


def _guard_request(request: httpx.Request) -> None:
    """httpx request hook: re-validate every hop, redirects included.

    The first hop is checked before the client is opened, so a rejection
    here means the target redirected somewhere forbidden.
    """
    try:
        validate_target_url(str(request.url))
    except ValidationError as exc:
        logger.warning("Blocked redirect to %s: %s", request.url, exc.message)
        raise NetworkError(f"redirect blocked: {exc.message}") from exc


def fetch_document(url: str) -> RawDocument:
    """Fetch *url* and return a :class:`RawDocument`.

    Redirects are followed (up to ``settings.max_redirects``); every hop is
    checked by :func:`validate_target_url`.

    Raises:
        ValidationError: If *url* itself is unusable or forbidden.
        NetworkError: If the host cannot be reached, DNS fails, the request
            times out, or a redirect points at a forbidden target.
        UpstreamHTTPError: If the final response status is 400 or above.
    """
    url = validate_target_url(url)
    logger.info("Fetching %s", url)
    try:
        with httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
            follow_redirects=True,
            max_redirects=settings.max_redirects,
            event_hooks={"request": [_guard_request]},
        ) as client:
            response = client.get(url)
    except httpx.TimeoutException as exc:
        logger.warning("Timed out fetching %s: %s", url, exc)
        raise NetworkError(
            f"timed out after {settings.request_timeout:g}s fetching {url}"
        ) from exc
    except httpx.TooManyRedirects as exc:
        logger.warning("Too many redirects fetching %s", url)
        raise NetworkError(f"too many redirects fetching {url}") from exc
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        logger.warning("Could not reach %s: %s", url, exc)
        raise NetworkError(f"could not reach {url}: {exc}") from exc

    if response.status_code >= 400:
        logger.warning("Upstream %s answered HTTP %d", url, response.status_code)
        raise UpstreamHTTPError(
            f"{url} answered with HTTP {response.status_code}",
            upstream_status=response.status_code,
        )

    return RawDocument(
        url=str(response.url),
        html=response.text,
        status_code=response.status_code,
        content_type=response.headers.get("content-type", ""),
    )
