from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from mfemap.config.schema import MapperConfig


class ConfigLoader:
    """Loads and validates the JSON mapper configuration."""

    @staticmethod
    def load(path: str | Path | None = None, **overrides: Any) -> MapperConfig:
        payload: dict[str, Any] = {}
        if path is not None:
            config_path = Path(path)
            with config_path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        payload.update({key: value for key, value in overrides.items() if value is not None})
        return MapperConfig.model_validate(payload)
