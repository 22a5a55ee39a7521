from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from prime_count.ports.report_sink import ReportSink


@dataclass
class StreamReportSink(ReportSink):
    # Writes report lines to a text stream (stdout unless told otherwise).
    stream: TextIO | None = None

    def write_line(self, line: str) -> None:
        target = self.stream if self.stream is not None else sys.stdout
        target.write(line + "\n")

    def close(self) -> None:
        # The stream is borrowed, so only flush it.
        target = self.stream if self.stream is not None else sys.stdout
        target.flush()


@dataclass
class FileReportSink(ReportSink):
    path: Path
    encoding: str = "utf-8"
    atomic_replace: bool = False
    _handle: TextIO | None = field(default=None, init=False, repr=False)
    _temp_path: Path | None = field(default=None, init=False, repr=False)

    def write_line(self, line: str) -> None:
        # Open lazily so construction does not touch filesystem.
        if self._handle is None:
            self._open()
        assert self._handle is not None
        self._handle.write(line + "\n")

    def close(self) -> None:
        # Close is idempotent; safe to call multiple times.
        if self._handle is None:
            return
        self._handle.flush()
        self._handle.close()
        self._handle = None

        if self.atomic_replace and self._temp_path is not None:
            self._temp_path.replace(self.path)
            self._temp_path = None

    def _open(self) -> None:
        if self.atomic_replace:
            self._temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            self._handle = self._temp_path.open("w", encoding=self.encoding)
        else:
            self._handle = self.path.open("w", encoding=self.encoding)


class FanoutReportSink(ReportSink):
    # Duplicates every line to each wrapped sink in order.
    def __init__(self, sinks: Sequence[ReportSink]) -> None:
        self._sinks = tuple(sinks)

    def write_line(self, line: str) -> None:
        for sink in self._sinks:
            sink.write_line(line)

    def close(self) -> None:
        for sink in self._sinks:
            sink.close()
