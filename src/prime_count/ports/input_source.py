from __future__ import annotations

from typing import Protocol, runtime_checkable


# NumberSource port defines how the number sequence enters the system.
@runtime_checkable
class NumberSource(Protocol):
    def read(self) -> tuple[int, ...]:
        """Return every number from the source in input order."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("NumberSource is a port; use a concrete adapter.")
