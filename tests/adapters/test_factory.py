from __future__ import annotations

import io
from pathlib import Path

from prime_count.adapters.factory import file_number_source, log_sink, report_sink
from prime_count.adapters.logging import LevelFilterLogSink, NullLogSink
from prime_count.adapters.output_sink import FanoutReportSink, StreamReportSink
from prime_count.usecases.config_models import InputConfig, LoggingConfig, OutputConfig


def test_file_number_source_uses_input_settings(tmp_path: Path) -> None:
    source = file_number_source(tmp_path / "n.txt", InputConfig(encoding="latin-1", decode_errors="strict"))
    assert source.encoding == "latin-1"
    assert source.decode_errors == "strict"


def test_report_sink_is_console_only_by_default() -> None:
    assert isinstance(report_sink(OutputConfig(), io.StringIO()), StreamReportSink)


def test_report_sink_adds_file_copy_when_configured(tmp_path: Path) -> None:
    path = tmp_path / "report.txt"
    stream = io.StringIO()
    sink = report_sink(OutputConfig(file_path=str(path)), stream)
    assert isinstance(sink, FanoutReportSink)
    sink.write_line("line")
    sink.close()
    assert stream.getvalue() == "line\n"
    assert path.read_text(encoding="utf-8") == "line\n"


def test_log_sink_selection(tmp_path: Path) -> None:
    assert isinstance(log_sink(LoggingConfig()), NullLogSink)
    assert isinstance(log_sink(LoggingConfig(sink="stderr")), LevelFilterLogSink)
    jsonl = log_sink(LoggingConfig(sink="jsonl", path=str(tmp_path / "log.jsonl")))
    assert isinstance(jsonl, LevelFilterLogSink)
    jsonl.close()
