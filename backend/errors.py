"""Error taxonomy for the analysis flow.

Every failure the flow can produce is an :class:`AnalysisError`.  Each kind
carries the HTTP status the API layer answers with, so the request handler
maps errors to responses without knowing about individual kinds.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for all analysis failures."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class ValidationError(AnalysisError):
    """The caller supplied a missing, malformed or forbidden URL."""

    status_code = 400


class NetworkError(AnalysisError):
    """The target could not be reached (DNS, connect, timeout, transport)."""


class UpstreamHTTPError(AnalysisError):
    """The target answered with a 4xx/5xx status."""

    def __init__(self, message: str, upstream_status: int) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status


class ParseError(AnalysisError):
    """Reserved: extraction degrades to absent fields instead of failing."""
