from __future__ import annotations

import codecs
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures; every section has defaults.


class ParallelConfig(BaseModel):
    # Parallel pass settings; default_workers=None means "ask the host".
    model_config = ConfigDict(extra="forbid")
    executor: Literal["process", "thread"] = "process"
    start_method: Literal["spawn", "fork", "forkserver"] = "spawn"
    default_workers: int | None = Field(default=None, ge=1)


class InputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    encoding: str = "utf-8"
    decode_errors: Literal["strict", "replace"] = "replace"

    @model_validator(mode="after")
    def _known_encoding(self) -> InputConfig:
        # Unknown codecs fail at load time, not when the input file is read.
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"input.encoding is not a known codec: {self.encoding}") from exc
        return self


class OutputConfig(BaseModel):
    # Optional file copy of the console report.
    model_config = ConfigDict(extra="forbid")
    file_path: str | None = None
    atomic_replace: bool = False


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: Literal["none", "stderr", "jsonl"] = "none"
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    parallel: ParallelConfig = Field(default_factory=ParallelConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
