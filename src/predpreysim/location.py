from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A (row, col) position on the field."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
