from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from prime_count.domain.numbers import parse_numbers
from prime_count.ports.input_source import NumberSource


@dataclass(frozen=True, slots=True)
class FileNumberSource(NumberSource):
    # Reads the whole file and extracts numbers; files larger than memory are out of scope.
    path: Path
    encoding: str = "utf-8"
    decode_errors: str = "replace"

    def __post_init__(self) -> None:
        if self.decode_errors not in {"strict", "replace"}:
            raise ValueError("decode_errors must be one of: strict, replace")

    def read(self) -> tuple[int, ...]:
        # Missing or unreadable files raise OSError; the CLI turns that into a message.
        text = self.path.read_text(encoding=self.encoding, errors=self.decode_errors)
        return parse_numbers(text)
