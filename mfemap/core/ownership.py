from __future__ import annotations

from typing import Callable

from mfemap.core.metadata import SHELL, Owner, Ownership
from mfemap.core.records import MfeAnalysis
from mfemap.utils.dom import DomDocument, DomNode

OWNERSHIP_HINT_ATTRIBUTES = ("data-mfe", "data-microfrontend", "data-remote")
GENERIC_CONTAINER_MARKERS = ("mfe", "remote", "microfrontend")

OwnerRule = Callable[[DomNode, MfeAnalysis, DomDocument], Ownership | None]


def ownership_hint(node: DomNode) -> str | None:
    for attribute in OWNERSHIP_HINT_ATTRIBUTES:
        value = node.get(attribute)
        if value:
            return value
    return None


def _owner_from_hint(node: DomNode, analysis: MfeAnalysis, document: DomDocument) -> Ownership | None:
    hint = ownership_hint(node)
    if hint is None:
        return None
    hint = hint.lower()
    for mfe in analysis.mfes:
        name = mfe.name.lower()
        if hint in name or name in hint:
            return Owner(mfe.name)
    return None


def _container_matches(container_text: str, mfe_name: str) -> bool:
    if mfe_name.lower() in container_text:
        return True
    return any(marker in container_text for marker in GENERIC_CONTAINER_MARKERS)


def _owner_from_containers(node: DomNode, analysis: MfeAnalysis, document: DomDocument) -> Ownership | None:
    root = document.root
    current = node.parent
    while current is not None and current != root:
        container_id = current.get("id")
        container_class = current.get("class")
        if container_id or container_class:
            container_text = f"{container_id or ''} {container_class or ''}".lower()
            # A generic marker claims the element for whichever MFE is tested first.
            for mfe in analysis.mfes:
                if _container_matches(container_text, mfe.name):
                    return Owner(mfe.name)
        current = current.parent
    return None


OWNER_RULES: list[OwnerRule] = [_owner_from_hint, _owner_from_containers]


def infer_owner(node: DomNode, analysis: MfeAnalysis, document: DomDocument) -> Ownership:
    for rule in OWNER_RULES:
        owner = rule(node, analysis, document)
        if owner is not None:
            return owner
    return SHELL
