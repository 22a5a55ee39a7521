from __future__ import annotations

from prime_count.domain.messages import BenchmarkReport, ModeResult

MISMATCH_WARNING = "Warning: counts do not match between modes."


def format_report(report: BenchmarkReport) -> list[str]:
    # Console layout: header, one block per mode, optional trailing warning.
    unit = "threads" if report.executor == "thread" else "processes"
    lines = [
        f"Input file: {report.input_path}",
        f"Total numbers parsed: {report.total_numbers}",
        "",
        "Single-thread:",
        *_mode_lines(report.sequential),
        "",
        f"Multi-thread ({report.effective_workers} {unit}):",
        *_mode_lines(report.parallel),
    ]
    if not report.counts_match:
        lines.extend(["", MISMATCH_WARNING])
    return lines


def _mode_lines(result: ModeResult) -> list[str]:
    return [
        f"  Prime count: {result.prime_count}",
        f"  Elapsed time: {result.elapsed_ms:.3f} ms",
    ]
