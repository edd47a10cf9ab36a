"""
Views receive the field once per tick and decide whether the run is still
worth continuing.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from predpreysim.field import KIND_CODES, FieldSnapshot

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


class FieldStats:
    """Per-kind population counts of one snapshot."""

    def __init__(self, snapshot: FieldSnapshot):
        self.counts: Dict[str, int] = snapshot.counts()

    def population(self) -> int:
        return sum(self.counts.values())

    def is_viable(self) -> bool:
        # more than one kind still alive
        return sum(1 for n in self.counts.values() if n > 0) > 1

    def details(self) -> str:
        return " ".join(f"{kind}={n}" for kind, n in self.counts.items())


class SimulatorView:
    def __init__(self, depth: int, width: int):
        self.depth = depth
        self.width = width
        self.colors: Dict[str, Color] = {}

    def set_color(self, kind: str, color: Color) -> None:
        if kind not in KIND_CODES:
            raise ValueError(f"Unknown animal kind: {kind}")
        self.colors[kind] = color

    def show_status(self, step: int, snapshot: FieldSnapshot) -> None:
        """Called once per tick; the base view displays nothing."""

    def is_viable(self, snapshot: FieldSnapshot) -> bool:
        return FieldStats(snapshot).is_viable()


class HistoryView(SimulatorView):
    """Headless view: keeps population series and logs progress."""

    def __init__(
        self,
        depth: int,
        width: int,
        log_every: int = 0,
        record_snapshots: bool = False,
    ):
        super().__init__(depth, width)
        self.log_every = log_every
        self.record_snapshots = record_snapshots
        self.history: Dict[str, List[int]] = {
            "tick": [],
            "prey_count": [],
            "predator_count": [],
        }
        self.snapshots: List[FieldSnapshot] = []
        self.last_stats: Optional[FieldStats] = None

    def show_status(self, step: int, snapshot: FieldSnapshot) -> None:
        stats = FieldStats(snapshot)
        self.last_stats = stats
        if step == 0:
            # a reset starts a new series
            for series in self.history.values():
                series.clear()
            self.snapshots.clear()
        self.history["tick"].append(step)
        self.history["prey_count"].append(stats.counts["prey"])
        self.history["predator_count"].append(stats.counts["predator"])
        if self.record_snapshots:
            self.snapshots.append(snapshot)
        if self.log_every > 0 and step % self.log_every == 0:
            logger.info(
                "t=%04d prey=%4d pred=%4d",
                step,
                stats.counts["prey"],
                stats.counts["predator"],
            )
