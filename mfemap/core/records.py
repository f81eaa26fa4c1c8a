from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mfemap.core.metadata import InteractiveElement


class Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PageSnapshot(Record):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = ""
    url: str
    dom_source: str = Field(default="", alias="dom")
    script_urls: tuple[str, ...] = Field(default=(), alias="scriptUrls")

    @field_validator("script_urls")
    @classmethod
    def deduplicate_scripts(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(value))


class MfeInfo(Record):
    name: str
    scripts: list[str] = Field(default_factory=list)


class MfeAnalysis(Record):
    shell: str
    mfes: list[MfeInfo] = Field(default_factory=list)

    @property
    def mfe_names(self) -> list[str]:
        return [mfe.name for mfe in self.mfes]


class ElementRecord(Record):
    role: str
    accessible_name: str = Field(alias="accessibleName")
    selector: str
    tag_name: str = Field(alias="tagName")
    mfe_owner: str | None = Field(default=None, alias="mfeOwner")

    @classmethod
    def from_element(cls, element: InteractiveElement) -> ElementRecord:
        return cls(
            role=element.role,
            accessible_name=element.accessible_name,
            selector=element.selector,
            tag_name=element.tag_name,
            mfe_owner=element.mfe_owner,
        )


class InteractionMap(Record):
    shell: list[ElementRecord] = Field(default_factory=list)
    mfes: dict[str, list[ElementRecord]] = Field(default_factory=dict)

    @property
    def element_count(self) -> int:
        return len(self.shell) + sum(len(items) for items in self.mfes.values())
