from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from prime_count.domain.logging import LogMessage
from prime_count.ports.log_sink import LogSink

LEVELS: dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class NullLogSink(LogSink):
    def emit(self, message: LogMessage) -> None:
        _ = message

    def close(self) -> None:
        return None


class StreamLogSink(LogSink):
    # One compact JSON object per line; stderr by default so the report on stdout stays clean.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        target = self._stream if self._stream is not None else sys.stderr
        target.write(json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False) + "\n")

    def close(self) -> None:
        return None


class JsonlLogSink(LogSink):
    # File-backed structured log sink, appended to across runs.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class LevelFilterLogSink(LogSink):
    # Drops messages below the configured threshold before they reach the wrapped sink.
    def __init__(self, sink: LogSink, level: str = "INFO") -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self._sink = sink
        self._threshold = LEVELS[level]

    def emit(self, message: LogMessage) -> None:
        if LEVELS.get(message.level, LEVELS["ERROR"]) >= self._threshold:
            self._sink.emit(message)

    def close(self) -> None:
        self._sink.close()


def log_event(sink: LogSink | None, level: str, message: str, **fields: object) -> None:
    if sink is None:
        return
    sink.emit(LogMessage(level=level, message=message, fields=fields))


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
