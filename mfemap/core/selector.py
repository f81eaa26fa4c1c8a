from __future__ import annotations

from mfemap.utils.dom import DomNode

NAMED_FIELD_TAGS = ("input", "select")


def escape_attribute_value(value: str) -> str:
    return value.replace('"', '\\"')


def generate_selector(node: DomNode, role: str) -> str:
    """Builds a role-first CSS selector. Only the id and name forms are likely to be unique."""

    element_id = node.get("id")
    if element_id:
        return f'[role="{role}"]#{element_id}'

    name = node.get("name")
    if name and node.tag_name in NAMED_FIELD_TAGS:
        return f'[role="{role}"][name="{name}"]'

    aria_label = node.get("aria-label")
    if aria_label and aria_label.strip():
        return f'[role="{role}"][aria-label="{escape_attribute_value(aria_label)}"]'

    return f'{node.tag_name}[role="{role}"]'
