from __future__ import annotations

from pathlib import Path
from typing import TextIO

from prime_count.adapters.input_source import FileNumberSource
from prime_count.adapters.logging import JsonlLogSink, LevelFilterLogSink, NullLogSink, StreamLogSink
from prime_count.adapters.output_sink import FanoutReportSink, FileReportSink, StreamReportSink
from prime_count.ports.log_sink import LogSink
from prime_count.ports.report_sink import ReportSink
from prime_count.usecases.config_models import InputConfig, LoggingConfig, OutputConfig


def file_number_source(path: Path, settings: InputConfig) -> FileNumberSource:
    # Factory for file-based number source.
    return FileNumberSource(path, encoding=settings.encoding, decode_errors=settings.decode_errors)


def report_sink(settings: OutputConfig, stream: TextIO | None = None) -> ReportSink:
    # Console always; a file copy only when output.file_path is set.
    console = StreamReportSink(stream)
    if settings.file_path is None:
        return console
    copy = FileReportSink(Path(settings.file_path), atomic_replace=settings.atomic_replace)
    return FanoutReportSink([console, copy])


def log_sink(settings: LoggingConfig, stream: TextIO | None = None) -> LogSink:
    if settings.sink == "none":
        return NullLogSink()
    if settings.sink == "stderr":
        return LevelFilterLogSink(StreamLogSink(stream), settings.level)
    assert settings.path is not None
    return LevelFilterLogSink(JsonlLogSink(Path(settings.path)), settings.level)
