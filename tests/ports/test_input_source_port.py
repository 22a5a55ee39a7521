from __future__ import annotations

from pathlib import Path

import pytest

from prime_count.adapters.input_source import FileNumberSource
from prime_count.ports.input_source import NumberSource


def test_file_number_source_conforms_to_port(tmp_path: Path) -> None:
    assert isinstance(FileNumberSource(tmp_path / "numbers.txt"), NumberSource)


def test_number_source_port_default_raises() -> None:
    class _PortOnly(NumberSource):
        pass

    with pytest.raises(NotImplementedError):
        _PortOnly().read()
