"""
Rectangular grid holding at most one animal per cell.

The grid is the single source of truth for occupancy. Animals keep a
back-reference to their own location and update both sides through
`Animal.set_location` / `Animal.set_dead`.
"""
from __future__ import annotations

import random
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from predpreysim.errors import ConfigurationError, OutOfBoundsError
from predpreysim.location import Location

# Kind codes used in snapshots.
EMPTY = 0
KIND_CODES: Dict[str, int] = {"prey": 1, "predator": 2}
CODE_KINDS: Dict[int, str] = {code: kind for kind, code in KIND_CODES.items()}

_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class FieldSnapshot:
    """Read-only picture of the field at a tick boundary."""

    def __init__(self, grid: np.ndarray):
        self._grid = grid.copy()
        self._grid.setflags(write=False)

    @property
    def grid(self) -> np.ndarray:
        return self._grid

    @property
    def depth(self) -> int:
        return int(self._grid.shape[0])

    @property
    def width(self) -> int:
        return int(self._grid.shape[1])

    def kind_at(self, location: Location) -> Optional[str]:
        return CODE_KINDS.get(int(self._grid[location.row, location.col]))

    def occupied(self) -> Iterator[Tuple[Location, str]]:
        rows, cols = np.nonzero(self._grid)
        for row, col in zip(rows.tolist(), cols.tolist()):
            yield Location(row, col), CODE_KINDS[int(self._grid[row, col])]

    def counts(self) -> Dict[str, int]:
        return {kind: int(np.sum(self._grid == code)) for kind, code in KIND_CODES.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldSnapshot):
            return NotImplemented
        return np.array_equal(self._grid, other._grid)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        counts = ", ".join(f"{kind}={n}" for kind, n in self.counts().items())
        return f"FieldSnapshot({self.depth}x{self.width}, {counts})"


class Field:
    def __init__(self, depth: int, width: int):
        if depth <= 0 or width <= 0:
            raise ConfigurationError(
                f"Field dimensions must be greater than zero, got {depth}x{width}."
            )
        self._depth = depth
        self._width = width
        self._cells: List[List[Optional[object]]] = [
            [None for _ in range(width)] for _ in range(depth)
        ]

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def width(self) -> int:
        return self._width

    def in_bounds(self, location: Location) -> bool:
        return 0 <= location.row < self._depth and 0 <= location.col < self._width

    def _check(self, location: Location) -> None:
        if not self.in_bounds(location):
            raise OutOfBoundsError(
                f"Location {location} outside field of size {self._depth}x{self._width}"
            )

    def clear(self) -> None:
        for row in self._cells:
            for col in range(self._width):
                row[col] = None

    def clear_location(self, location: Location) -> None:
        self._check(location)
        self._cells[location.row][location.col] = None

    def place(self, organism: object, location: Location) -> None:
        self._check(location)
        self._cells[location.row][location.col] = organism

    def get_object_at(self, location: Location) -> Optional[object]:
        self._check(location)
        return self._cells[location.row][location.col]

    def adjacent_locations(
        self, location: Location, rng: Optional[random.Random] = None
    ) -> List[Location]:
        """
        In-bounds Moore neighbours of `location`, in row-major offset order.
        Passing `rng` shuffles them, which is how movement direction is chosen.
        """
        self._check(location)
        neighbours = []
        for dr, dc in _OFFSETS:
            candidate = Location(location.row + dr, location.col + dc)
            if self.in_bounds(candidate):
                neighbours.append(candidate)
        if rng is not None:
            rng.shuffle(neighbours)
        return neighbours

    def free_adjacent_locations(
        self, location: Location, rng: Optional[random.Random] = None
    ) -> List[Location]:
        return [
            loc
            for loc in self.adjacent_locations(location, rng)
            if self._cells[loc.row][loc.col] is None
        ]

    def free_adjacent_location(
        self, location: Location, rng: Optional[random.Random] = None
    ) -> Optional[Location]:
        free = self.free_adjacent_locations(location, rng)
        return free[0] if free else None

    def locations(self) -> Iterator[Location]:
        for row in range(self._depth):
            for col in range(self._width):
                yield Location(row, col)

    def snapshot(self) -> FieldSnapshot:
        grid = np.full((self._depth, self._width), EMPTY, dtype=np.int8)
        for row_idx, row in enumerate(self._cells):
            for col_idx, occupant in enumerate(row):
                if occupant is not None:
                    grid[row_idx, col_idx] = KIND_CODES[occupant.kind]
        return FieldSnapshot(grid)
