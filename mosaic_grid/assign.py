# mosaic_grid/assign.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .constants import GRID_SIZE
from .core_types import ColorEntry, GridInvariantError, OccupancyMap, PlacementCandidate
from .search import find_nearest_open_cell, target_cell


@dataclass(frozen=True)
class Placement:
    """One claimed cell, recorded in processing order."""

    entry: ColorEntry
    target_row: int
    target_col: int
    distance: float  # weighted, 0.0 for a direct claim
    radius: int  # ring the cell came from, 0 for a direct claim

    @property
    def displaced(self) -> bool:
        return self.radius > 0


@dataclass(frozen=True)
class GridAssignment:
    placements: Tuple[Placement, ...]
    occupied: OccupancyMap

    @property
    def size(self) -> int:
        return int(self.occupied.shape[0])

    def entries_row_major(self) -> List[ColorEntry]:
        return sorted(
            (p.entry for p in self.placements), key=lambda e: (e.row, e.col)
        )


def new_occupancy_map(size: int = GRID_SIZE) -> OccupancyMap:
    return np.zeros((size, size), dtype=np.bool_)


def assign_grid(
    candidates: Iterable[PlacementCandidate],
    occupied: Optional[OccupancyMap] = None,
    size: int = GRID_SIZE,
) -> GridAssignment:
    """
    Greedy placement in the order given.

    Each candidate takes its target cell when free, otherwise the nearest free
    cell from the ring search. Earlier candidates are never displaced.
    `occupied` is copied, not mutated.
    """
    occ = new_occupancy_map(size) if occupied is None else occupied.copy()
    capacity = int(occ.size - occ.sum())
    placements: List[Placement] = []

    for n, cand in enumerate(candidates):
        if n >= capacity:
            raise GridInvariantError(
                f"candidate #{n + 1} ({cand.entry.hex3}) exceeds {capacity} free cells"
            )
        t_row, t_col = target_cell(cand.ideal_row, cand.ideal_col, occ.shape[1])

        if not occ[t_row, t_col]:
            row, col, distance, radius = t_row, t_col, 0.0, 0
        else:
            row, col, distance, radius = find_nearest_open_cell(occ, t_row, t_col)

        occ[row, col] = True
        placements.append(
            Placement(
                entry=cand.entry.placed(row, col),
                target_row=t_row,
                target_col=t_col,
                distance=distance,
                radius=radius,
            )
        )

    occ.flags.writeable = False
    return GridAssignment(placements=tuple(placements), occupied=occ)


__all__ = ["Placement", "GridAssignment", "new_occupancy_map", "assign_grid"]
