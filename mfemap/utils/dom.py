from __future__ import annotations

from typing import Protocol

from bs4 import BeautifulSoup, Tag


class DomNode(Protocol):
    """Read-only view of one element, the only surface the engine relies on."""

    @property
    def tag_name(self) -> str: ...

    @property
    def parent(self) -> DomNode | None: ...

    def get(self, name: str) -> str | None: ...

    def has(self, name: str) -> bool: ...

    def text(self) -> str: ...

    def find(self, tag_name: str) -> DomNode | None: ...


class DomDocument(Protocol):
    @property
    def root(self) -> DomNode: ...

    def select(self, selector: str) -> list[DomNode]: ...


class SoupNode:
    """Adapts a BeautifulSoup tag; equality follows tag identity."""

    __slots__ = ("tag",)

    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupNode) and other.tag is self.tag

    def __hash__(self) -> int:
        return id(self.tag)

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag_name}>)"

    @property
    def tag_name(self) -> str:
        return (self.tag.name or "").lower()

    @property
    def parent(self) -> SoupNode | None:
        parent = self.tag.parent
        return SoupNode(parent) if parent is not None else None

    def get(self, name: str) -> str | None:
        return self.tag.get(name)

    def has(self, name: str) -> bool:
        return self.tag.has_attr(name)

    def text(self) -> str:
        return self.tag.get_text().strip()

    def find(self, tag_name: str) -> SoupNode | None:
        match = self.tag.find(tag_name)
        return SoupNode(match) if isinstance(match, Tag) else None


class SoupDocument:
    """Document backed by BeautifulSoup's ``html.parser`` tree."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    @property
    def root(self) -> SoupNode:
        # Fragments captured from body.innerHTML have no <body>; the soup itself stands in.
        body = self.soup.body
        return SoupNode(body if body is not None else self.soup)

    def select(self, selector: str) -> list[SoupNode]:
        return [SoupNode(tag) for tag in self.soup.select(selector)]


def parse_html(markup: str) -> SoupDocument:
    soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
    return SoupDocument(soup)
