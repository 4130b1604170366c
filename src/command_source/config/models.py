from __future__ import annotations

import codecs
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Config models map YAML sections to typed structures.


class SourceConfig(BaseModel):
    # Selects the command source variant and, for headless runs, the script to replay.
    model_config = ConfigDict(extra="forbid")
    mode: Literal["interactive", "headless"] = "interactive"
    script: str | None = None
    encoding: str = Field(default="utf-8", min_length=1)
    decode_errors: Literal["strict", "replace"] = "replace"

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value: object) -> object:
        # Mode names are matched case-insensitively, as on the command line.
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value

    @model_validator(mode="after")
    def _require_script_for_headless(self) -> SourceConfig:
        if self.mode == "headless" and not self.script:
            raise ValueError("source.script is required when source.mode is headless")
        return self


class LoggingConfig(BaseModel):
    # Diagnostics are opt-in and always go to a JSONL file, never to the console.
    model_config = ConfigDict(extra="forbid")
    enabled: bool = False
    path: str = Field(default="logs/command_source.jsonl", min_length=1)


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
