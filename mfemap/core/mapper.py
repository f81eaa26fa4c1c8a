from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from mfemap.core.metadata import InteractiveElement, Owner, Shell
from mfemap.core.ownership import infer_owner
from mfemap.core.records import ElementRecord, InteractionMap, MfeAnalysis, PageSnapshot
from mfemap.core.roles import BUTTON, CHECKBOX, COMBOBOX, LINK, RADIO, TEXTBOX, resolve_name, resolve_role
from mfemap.core.selector import generate_selector
from mfemap.utils.dom import DomDocument, DomNode, parse_html

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractionPass:
    name: str
    query: str
    roles: frozenset[str]


EXTRACTION_PASSES = (
    ExtractionPass(
        name="buttons",
        query='button, input[type="button"], input[type="submit"], input[type="reset"], [role="button"]',
        roles=frozenset({BUTTON}),
    ),
    ExtractionPass(
        name="links",
        query='a[href], [role="link"]',
        roles=frozenset({LINK}),
    ),
    ExtractionPass(
        name="form controls",
        query=(
            'input:not([type="button"]):not([type="submit"]):not([type="reset"]), textarea, select, '
            '[role="textbox"], [role="combobox"], [role="checkbox"], [role="radio"]'
        ),
        roles=frozenset({TEXTBOX, COMBOBOX, CHECKBOX, RADIO}),
    ),
)


def describe_element(node: DomNode, role: str, analysis: MfeAnalysis, document: DomDocument) -> InteractiveElement:
    return InteractiveElement(
        role=role,
        accessible_name=resolve_name(node),
        selector=generate_selector(node, role),
        tag_name=node.tag_name,
        owner=infer_owner(node, analysis, document),
    )


def extract_interactive_elements(document: DomDocument, analysis: MfeAnalysis) -> list[InteractiveElement]:
    """Runs the button, link and form-control passes in order.

    An element is claimed by the first pass whose query matches it, even when its
    resolved role belongs to another pass; such elements are not extracted.
    """

    elements: list[InteractiveElement] = []
    visited: set[DomNode] = set()
    for extraction in EXTRACTION_PASSES:
        for node in document.select(extraction.query):
            if node in visited:
                continue
            visited.add(node)
            role = resolve_role(node)
            if role not in extraction.roles:
                log.debug("Skipping <%s> with role %r during %s pass", node.tag_name, role, extraction.name)
                continue
            elements.append(describe_element(node, role, analysis, document))
    return elements


def group_by_owner(elements: list[InteractiveElement], analysis: MfeAnalysis) -> InteractionMap:
    shell: list[ElementRecord] = []
    mfes: dict[str, list[ElementRecord]] = {name: [] for name in analysis.mfe_names}
    for element in elements:
        record = ElementRecord.from_element(element)
        match element.owner:
            case Owner(name=name) if name in mfes:
                mfes[name].append(record)
            case Owner(name=name):
                log.warning("Unknown MFE owner %r, assigning element to shell", name)
                shell.append(record)
            case Shell():
                shell.append(record)
    return InteractionMap(shell=shell, mfes=mfes)


def build_map(document: DomDocument, analysis: MfeAnalysis) -> InteractionMap:
    elements = extract_interactive_elements(document, analysis)
    log.info("Found %d interactive elements", len(elements))
    interaction_map = group_by_owner(elements, analysis)
    log.info("Shell: %d elements", len(interaction_map.shell))
    for name, items in interaction_map.mfes.items():
        log.info("%s: %d elements", name, len(items))
    return interaction_map


def map_interactions(
    snapshot: PageSnapshot,
    analysis: MfeAnalysis,
    parser: Callable[[str], DomDocument] = parse_html,
) -> InteractionMap:
    log.info("Mapping interactive elements...")
    return build_map(parser(snapshot.dom_source), analysis)
