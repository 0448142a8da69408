from __future__ import annotations

from dataclasses import dataclass

# Ordered station keys, source first. Plain tuple so it serializes as-is.
StationPath = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NoPathFound:
    """Search outcome for a destination that cannot be reached.

    This is a result, not an error: the stations exist but the graph does not
    connect them. It is falsy so callers can write ``if not path``.
    """

    source: str
    destination: str

    def __bool__(self) -> bool:
        return False
