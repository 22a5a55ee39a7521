from .input_source import FileNumberSource
from .logging import JsonlLogSink, LevelFilterLogSink, NullLogSink, StreamLogSink
from .output_sink import FanoutReportSink, FileReportSink, StreamReportSink
from .services.prime_checker import TrialDivisionPrimeChecker

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "FanoutReportSink",
    "FileNumberSource",
    "FileReportSink",
    "JsonlLogSink",
    "LevelFilterLogSink",
    "NullLogSink",
    "StreamLogSink",
    "StreamReportSink",
    "TrialDivisionPrimeChecker",
]
