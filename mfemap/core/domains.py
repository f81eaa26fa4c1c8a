from __future__ import annotations

import logging
import re
from typing import Iterable
from urllib.parse import SplitResult, urlsplit

from mfemap.core.metadata import DomainGroup

log = logging.getLogger(__name__)

REMOTE_ENTRY_MARKER = "remoteentry.js"
WEBPACK_SHARING_MARKERS = ("webpack_sharing", "__webpack_init_sharing__")
DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}

_ORIGIN_PREFIX = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*://[^/?#\s]+)")


def split_url(url: str) -> SplitResult | None:
    """Returns the split URL, or None when it has no scheme or a malformed port.

    Host-less URLs such as ``file:///app.js`` still split; their host is empty.
    """

    try:
        parts = urlsplit(url.strip())
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return None
    if not parts.scheme:
        return None
    return parts


def format_host(parts: SplitResult) -> str:
    hostname = parts.hostname or ""
    if ":" in hostname:
        hostname = f"[{hostname}]"
    port = parts.port
    if port is None or DEFAULT_PORTS.get(parts.scheme) == port:
        return hostname
    return f"{hostname}:{port}"


def get_origin(url: str) -> str:
    parts = split_url(url)
    if parts is not None:
        return f"{parts.scheme}://{format_host(parts)}"
    match = _ORIGIN_PREFIX.match(url)
    if match:
        return match.group(1)
    log.debug("Using raw string as origin for unparseable URL %r", url)
    return url


def has_remote_entry(script_url: str) -> bool:
    return REMOTE_ENTRY_MARKER in script_url.lower()


def has_webpack_sharing(script_url: str) -> bool:
    lowered = script_url.lower()
    return any(marker in lowered for marker in WEBPACK_SHARING_MARKERS)


def group_scripts_by_domain(script_urls: Iterable[str]) -> dict[str, DomainGroup]:
    """Groups script URLs by origin; dict order is the first-seen order of each origin."""

    groups: dict[str, DomainGroup] = {}
    for script_url in script_urls:
        domain = get_origin(script_url)
        group = groups.setdefault(domain, DomainGroup(domain=domain))
        group.scripts.append(script_url)
        if has_remote_entry(script_url):
            group.has_remote_entry = True
        if has_webpack_sharing(script_url):
            group.has_webpack_sharing = True
    return groups
