from __future__ import annotations

from typing import Callable

from mfemap.utils.dom import DomNode

BUTTON = "button"
LINK = "link"
TEXTBOX = "textbox"
COMBOBOX = "combobox"
CHECKBOX = "checkbox"
RADIO = "radio"
GENERIC = "generic"

ROLES = (BUTTON, LINK, TEXTBOX, COMBOBOX, CHECKBOX, RADIO, GENERIC)
BUTTON_INPUT_TYPES = frozenset({"button", "submit", "reset"})
TOGGLE_INPUT_TYPES = frozenset({"checkbox", "radio"})

Rule = tuple[Callable[[DomNode], bool], Callable[[DomNode], str]]


def _input_type(node: DomNode) -> str:
    return (node.get("type") or "text").strip().lower()


def _input_role(node: DomNode) -> str:
    input_type = _input_type(node)
    if input_type in BUTTON_INPUT_TYPES:
        return BUTTON
    if input_type == "checkbox":
        return CHECKBOX
    if input_type == "radio":
        return RADIO
    return TEXTBOX


def _is_tag(*names: str) -> Callable[[DomNode], bool]:
    return lambda node: node.tag_name in names


def _constant(value: str) -> Callable[[DomNode], str]:
    return lambda node: value


ROLE_RULES: list[Rule] = [
    (lambda node: bool(node.get("role")), lambda node: node.get("role") or ""),
    (_is_tag("button"), _constant(BUTTON)),
    (_is_tag("a"), _constant(LINK)),
    (_is_tag("input"), _input_role),
    (_is_tag("select"), _constant(COMBOBOX)),
    (_is_tag("textarea"), _constant(TEXTBOX)),
    (lambda node: node.has("onclick") or node.has("tabindex"), _constant(BUTTON)),
]


def resolve_role(node: DomNode) -> str:
    for applies, role in ROLE_RULES:
        if applies(node):
            return role(node)
    return GENERIC


def _attribute(name: str, *tags: str) -> Callable[[DomNode], str]:
    def read(node: DomNode) -> str:
        if tags and node.tag_name not in tags:
            return ""
        return (node.get(name) or "").strip()

    return read


def _text_content(node: DomNode) -> str:
    if node.tag_name not in ("a", "button"):
        return ""
    return node.text()


def _input_value(node: DomNode) -> str:
    if node.tag_name != "input":
        return ""
    value = node.get("value")
    if value is None:
        # Checkboxes and radios report "on" when no value attribute is set.
        return "on" if _input_type(node) in TOGGLE_INPUT_TYPES else ""
    return value.strip()


def _image_alt(node: DomNode) -> str:
    image = node.find("img")
    if image is None:
        return ""
    return (image.get("alt") or "").strip()


# aria-labelledby is not resolved.
NAME_SOURCES: list[Callable[[DomNode], str]] = [
    _attribute("aria-label"),
    _text_content,
    _attribute("placeholder", "input", "textarea"),
    _attribute("title"),
    _input_value,
    _image_alt,
]


def resolve_name(node: DomNode) -> str:
    for source in NAME_SOURCES:
        name = source(node)
        if name:
            return name
    return node.tag_name
