from __future__ import annotations

import logging
import re

from mfemap.core.domains import DEFAULT_PORTS, get_origin, group_scripts_by_domain, split_url
from mfemap.core.metadata import DomainGroup
from mfemap.core.records import MfeAnalysis, MfeInfo, PageSnapshot

log = logging.getLogger(__name__)

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9-]")


def determine_shell(domain_groups: dict[str, DomainGroup], page_url: str) -> str:
    """Picks the shell origin: the page's origin, else the first origin without a
    remote entry, else the origin with the most scripts."""

    page_domain = get_origin(page_url)

    page_group = domain_groups.get(page_domain)
    if page_group is not None and not page_group.has_remote_entry:
        return page_domain

    for domain, group in domain_groups.items():
        if not group.has_remote_entry:
            return domain

    shell_domain = page_domain
    max_scripts = 0
    for domain, group in domain_groups.items():
        if len(group.scripts) > max_scripts:
            max_scripts = len(group.scripts)
            shell_domain = domain
    return shell_domain


def extract_mfe_name(domain: str) -> str:
    parts = split_url(domain)
    if parts is None:
        return _UNSAFE_NAME_CHARS.sub("-", domain)
    hostname = parts.hostname or ""
    if ":" in hostname:
        hostname = f"[{hostname}]"
    port = parts.port
    if port == DEFAULT_PORTS.get(parts.scheme):
        port = None
    if hostname == "localhost" and port is not None:
        return f"mfe-{port}"
    return hostname.replace(".", "-")


def detect_mfe(snapshot: PageSnapshot) -> MfeAnalysis:
    log.info("Detecting Module Federation architecture...")
    domain_groups = group_scripts_by_domain(snapshot.script_urls)
    log.info("Found %d unique domain(s)", len(domain_groups))

    shell = determine_shell(domain_groups, snapshot.url)
    log.info("Shell domain: %s", shell)

    mfes: list[MfeInfo] = []
    for domain, group in domain_groups.items():
        if domain == shell:
            continue
        if not group.is_federated:
            log.debug("Ignoring %s: no Module Federation markers", domain)
            continue
        name = extract_mfe_name(domain)
        mfes.append(MfeInfo(name=name, scripts=list(group.scripts)))
        log.info("Detected MFE: %s (%s)", name, domain)

    return MfeAnalysis(shell=shell, mfes=mfes)
