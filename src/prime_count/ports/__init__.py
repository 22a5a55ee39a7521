from .input_source import NumberSource
from .log_sink import LogSink
from .prime_checker import PrimeChecker
from .report_sink import ReportSink

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "LogSink",
    "NumberSource",
    "PrimeChecker",
    "ReportSink",
]
