from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator


class MapperConfig(BaseModel):
    output_dir: str = "outputs"
    browser: str = "chrome"
    headless: bool = True
    page_load_timeout_seconds: int = 30
    settle_timeout_seconds: float = Field(default=5.0, ge=0)
    window_size: str = "1440,1200"
    log_level: str = "INFO"

    @field_validator("browser")
    @classmethod
    def validate_browser(cls, value: str) -> str:
        normalized = value.lower()
        if normalized not in {"chrome", "firefox"}:
            raise ValueError(f"Unsupported browser: {value}")
        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalized
