from __future__ import annotations

from typing import Protocol, runtime_checkable


# ReportSink port defines where formatted report lines go.
@runtime_checkable
class ReportSink(Protocol):
    def write_line(self, line: str) -> None:
        """Write a single, already formatted report line."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("ReportSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Finalize and release resources held by the sink."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("ReportSink is a port; use a concrete adapter.")
