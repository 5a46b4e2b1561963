"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable pair of source and target squares."""

    source: Square
    target: Square

    def __str__(self) -> str:
        return f"{square_name(self.source)}{square_name(self.target)}"
