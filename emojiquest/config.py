from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "EMOJIQUEST_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseModel):
    seed: int | None = None
    player_name: str = "alk"
    fish: int = Field(default=3, ge=0)
    trolls: int = Field(default=5, ge=0)
    spiders: int = Field(default=2, ge=0)
    # cosmetic pause between frames
    frame_delay_ms: int = Field(default=50, ge=0)
    log_file: str | None = None
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        raw = {
            name: env[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in env
        }
        return cls.model_validate(raw)

    @property
    def frame_delay(self) -> float:
        return self.frame_delay_ms / 1000
