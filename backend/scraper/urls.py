"""Target URL validation.

Callers hand us arbitrary URLs, so before anything is fetched the URL must
parse as a pydantic ``HttpUrl`` (absolute, ``http``/``https``) and, unless
disabled in settings, must not point at the local machine or a private
network.  Only IP literals (in any form the resolver accepts, e.g. ``127.1``)
and ``localhost`` are checked; no DNS lookups happen here.
"""

from __future__ import annotations

import ipaddress
import socket
from typing import Any, Optional, Union

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from backend.config import settings
from backend.errors import ValidationError

_http_url = TypeAdapter(HttpUrl)

_LOCAL_HOSTNAMES = frozenset({"localhost", "localhost.localdomain"})

_IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _parse_ip(host: str) -> Optional[_IPAddress]:
    """Return *host* as an IP address, accepting short/numeric IPv4 forms."""
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        pass
    try:
        # inet_aton understands "127.1", "2130706433", "0x7f.0.0.1", "0".
        return ipaddress.IPv4Address(socket.inet_aton(host))
    except OSError:
        return None


def _is_forbidden_host(host: str) -> bool:
    host = host.strip("[]").lower().rstrip(".")
    if host in _LOCAL_HOSTNAMES or host.endswith(".localhost"):
        return True
    addr = _parse_ip(host)
    if addr is None:
        return False
    return (
        addr.is_private
        or addr.is_loopback
        or addr.is_link_local
        or addr.is_reserved
        or addr.is_multicast
        or addr.is_unspecified
    )


def validate_target_url(url: Any) -> str:
    """Return *url* stripped of surrounding whitespace if it may be fetched.

    Raises:
        ValidationError: If *url* is missing, empty, not an absolute
            http/https URL, or targets a forbidden host.
    """
    if not isinstance(url, str):
        raise ValidationError("url must be a string")
    url = url.strip()
    if not url:
        raise ValidationError("url must not be empty")

    try:
        parsed = _http_url.validate_python(url)
    except PydanticValidationError as exc:
        reason = exc.errors()[0].get("msg", "invalid URL")
        raise ValidationError(f"url {url!r} is not a valid absolute URL: {reason}") from exc

    if settings.block_private_targets and _is_forbidden_host(parsed.host or ""):
        raise ValidationError(f"url targets a forbidden host: {parsed.host!r}")

    return url
