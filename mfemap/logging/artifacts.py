from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from mfemap.core.exceptions import ArtifactReadError
from mfemap.core.records import InteractionMap, MfeAnalysis, PageSnapshot

log = logging.getLogger(__name__)

SNAPSHOT_FILENAME = "page-snapshot.json"
ANALYSIS_FILENAME = "mfe-analysis.json"
INTERACTION_MAP_FILENAME = "interaction-map.json"

ModelT = TypeVar("ModelT", bound=BaseModel)


class ArtifactManager:
    """Reads and writes the JSON artifacts passed between pipeline stages."""

    def __init__(self, root: str | Path = "outputs") -> None:
        self.root = Path(root)
        self.snapshot_path = self.root / SNAPSHOT_FILENAME
        self.analysis_path = self.root / ANALYSIS_FILENAME
        self.interaction_map_path = self.root / INTERACTION_MAP_FILENAME

    def _ensure_structure(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def write_snapshot(self, snapshot: PageSnapshot) -> Path:
        return self._write(self.snapshot_path, snapshot.to_payload())

    def write_analysis(self, analysis: MfeAnalysis) -> Path:
        return self._write(self.analysis_path, analysis.to_payload())

    def write_interaction_map(self, interaction_map: InteractionMap) -> Path:
        return self._write(self.interaction_map_path, interaction_map.to_payload())

    def read_snapshot(self, path: str | Path | None = None) -> PageSnapshot:
        return self._read(Path(path) if path else self.snapshot_path, PageSnapshot)

    def read_analysis(self, path: str | Path | None = None) -> MfeAnalysis:
        return self._read(Path(path) if path else self.analysis_path, MfeAnalysis)

    def read_interaction_map(self, path: str | Path | None = None) -> InteractionMap:
        return self._read(Path(path) if path else self.interaction_map_path, InteractionMap)

    def reset(self) -> Path:
        self._ensure_structure()
        for child in self.root.iterdir():
            if child.is_dir():
                shutil.rmtree(child)
            elif child.is_file() and child.name != ".gitkeep":
                child.unlink()
        return self.root

    def _write(self, path: Path, payload: dict) -> Path:
        self._ensure_structure()
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        log.info("Saved output to: %s", path)
        return path

    @staticmethod
    def _read(path: Path, model: type[ModelT]) -> ModelT:
        log.info("Reading %s from: %s", model.__name__, path)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ArtifactReadError(f"Artifact not found: {path}") from exc
        except json.JSONDecodeError as exc:
            raise ArtifactReadError(f"Artifact is not valid JSON: {path} ({exc})") from exc
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise ArtifactReadError(f"Artifact {path} is not a valid {model.__name__}: {exc}") from exc
