from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from prime_count.adapters.factory import file_number_source, log_sink, report_sink
from prime_count.adapters.logging import log_event
from prime_count.config.loader import ConfigError, load_config
from prime_count.domain.reasons import ReasonCode
from prime_count.ports.log_sink import LogSink
from prime_count.usecases.benchmark import run_benchmark
from prime_count.usecases.config_models import AppConfig
from prime_count.usecases.counting import WorkerTaskError
from prime_count.usecases.format_report import format_report

USAGE = "Usage: prime-count <input-file> [worker-count]"

# This module is a thin wrapper: parse arguments, wire adapters, print outcomes.
# Counting and timing live in usecases; nothing below this layer prints.


def build_parser() -> argparse.ArgumentParser:
    # Both positionals are optional so a missing input path prints usage instead of exiting.
    parser = argparse.ArgumentParser(
        prog="prime-count",
        description="Count primes in a file sequentially and in parallel, and time both passes",
    )
    parser.add_argument("input_file", nargs="?", help="Path to a text file of integers")
    parser.add_argument(
        "worker_count",
        nargs="?",
        help="Number of parallel workers (defaults to the host CPU count)",
    )
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--executor", choices=["process", "thread"], help="Override parallel.executor")
    parser.add_argument(
        "--start-method",
        choices=["spawn", "fork", "forkserver"],
        help="Override parallel.start_method",
    )
    parser.add_argument("--output", help="Also write the report to this file")
    parser.add_argument("--log-sink", choices=["none", "stderr", "jsonl"], help="Override logging.sink")
    parser.add_argument("--log-path", help="Override logging.path (JSONL sink)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override logging.level",
    )
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def detect_default_workers() -> int:
    return os.cpu_count() or 1


def resolve_worker_count(text: str | None, fallback: int) -> int:
    # Absent, non-integer or non-positive values fall back to the injected default.
    if text is None:
        return fallback
    try:
        parsed = int(text)
    except ValueError:
        return fallback
    if parsed < 1:
        return fallback
    return parsed


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    # CLI flags take precedence over config; the result is re-validated as a whole.
    data = config.model_dump()
    if args.executor is not None:
        data["parallel"]["executor"] = args.executor
    if args.start_method is not None:
        data["parallel"]["start_method"] = args.start_method
    if args.output is not None:
        data["output"]["file_path"] = args.output
    if args.log_sink is not None:
        data["logging"]["sink"] = args.log_sink
    if args.log_path is not None:
        data["logging"]["path"] = args.log_path
    if args.log_level is not None:
        data["logging"]["level"] = args.log_level
    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def run(
    argv: Sequence[str] | None = None,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    default_workers: int | None = None,
) -> int:
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    args = parse_args(argv)

    try:
        config = load_config(Path(args.config)) if args.config else AppConfig()
        config = apply_overrides(config, args)
    except (ConfigError, OSError) as exc:
        print(f"Invalid config: {exc}", file=err)
        return 2

    if args.input_file is None:
        print(USAGE, file=out)
        return 0

    if default_workers is None:
        default_workers = config.parallel.default_workers or detect_default_workers()
    workers = resolve_worker_count(args.worker_count, default_workers)

    log = log_sink(config.logging, stream=err)
    try:
        return _run_benchmark(args.input_file, workers, config, log, out, err)
    finally:
        log.close()


def _run_benchmark(
    input_file: str,
    workers: int,
    config: AppConfig,
    log: LogSink,
    out: TextIO,
    err: TextIO,
) -> int:
    source = file_number_source(Path(input_file), config.input)
    try:
        numbers = source.read()
    except (OSError, UnicodeDecodeError) as exc:
        log_event(log, "ERROR", "input_read_failed", reason=ReasonCode.INPUT_READ_ERROR.value, error=str(exc))
        print(f"Failed to read file: {exc}", file=err)
        return 0

    if not numbers:
        log_event(log, "INFO", "no_numbers_found", reason=ReasonCode.NO_NUMBERS_FOUND.value, path=input_file)
        print(f"No numbers found in file: {input_file}", file=out)
        return 0

    log_event(log, "INFO", "numbers_parsed", path=input_file, count=len(numbers), workers=workers)

    try:
        report = run_benchmark(
            numbers,
            workers,
            input_path=input_file,
            executor=config.parallel.executor,
            start_method=config.parallel.start_method,
            log=log,
        )
    except WorkerTaskError as exc:
        print(f"Worker task failed: {exc}", file=err)
        return 0

    sink = report_sink(config.output, stream=out)
    try:
        for line in format_report(report):
            sink.write_line(line)
    finally:
        sink.close()
    return 0
