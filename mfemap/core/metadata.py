from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class DomainGroup:
    domain: str
    scripts: list[str] = field(default_factory=list)
    has_remote_entry: bool = False
    has_webpack_sharing: bool = False

    @property
    def is_federated(self) -> bool:
        return self.has_remote_entry or self.has_webpack_sharing


@dataclass(frozen=True, slots=True)
class Shell:
    """Element belongs to the host application."""


@dataclass(frozen=True, slots=True)
class Owner:
    """Element belongs to the named micro-frontend."""

    name: str


Ownership = Shell | Owner

SHELL = Shell()


@dataclass(frozen=True, slots=True)
class InteractiveElement:
    role: str
    accessible_name: str
    selector: str
    tag_name: str
    owner: Ownership = SHELL

    @property
    def mfe_owner(self) -> str | None:
        match self.owner:
            case Owner(name=name):
                return name
            case Shell():
                return None


@dataclass(slots=True)
class RunRecord:
    stage: str
    source: str
    success: bool
    shell: str = ""
    mfe_count: int = 0
    element_count: int = 0
    error: str = ""
    artifact_paths: dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        return {
            "stage": self.stage,
            "source": self.source,
            "success": self.success,
            "shell": self.shell,
            "mfe_count": self.mfe_count,
            "element_count": self.element_count,
            "error": self.error,
            "artifact_paths": self.artifact_paths,
        }
