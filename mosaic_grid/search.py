# mosaic_grid/search.py
from __future__ import annotations

"""
Nearest open cell search.

Expands square rings around a target cell and returns the free cell with the
smallest weighted distance

    |dr| * ROW_WEIGHT + HUE_WEIGHT * min(|dc|, size - |dc|)

Rows do not wrap. Columns wrap, since hue is circular.

Exports:
  wrapped_col_delta(dc, size)
  weighted_distance(dr, dc, size)
  ring_offsets(radius, size)
  target_cell(ideal_row, ideal_col, size)
  find_nearest_open_cell(occupied, target_row, target_col)
"""

from functools import lru_cache
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .constants import GRID_SIZE, HUE_WEIGHT, MAX_SEARCH_RADIUS, ROW_WEIGHT
from .core_types import Cell, GridInvariantError, OccupancyMap, clamp_value, js_round


class SearchHit(NamedTuple):
    row: int
    col: int
    distance: float
    radius: int  # ring the cell was found on


def wrapped_col_delta(dc: int, size: int = GRID_SIZE) -> int:
    """Shorter way round the circular column axis."""
    d = abs(int(dc)) % size
    return min(d, size - d)


def weighted_distance(dr: int, dc: int, size: int = GRID_SIZE) -> float:
    return abs(int(dr)) * ROW_WEIGHT + HUE_WEIGHT * wrapped_col_delta(dc, size)


@lru_cache(maxsize=None)
def ring_offsets(
    radius: int, size: int = GRID_SIZE
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Perimeter of the square at Chebyshev distance `radius`.

    Returns (dr, dc, cost) int/int/float arrays in scan order: dr ascending,
    then dc ascending. Arrays are read-only.
    """
    pairs = [
        (dr, dc)
        for dr in range(-radius, radius + 1)
        for dc in range(-radius, radius + 1)
        if abs(dr) == radius or abs(dc) == radius
    ]
    dr = np.array([p[0] for p in pairs], dtype=np.int64)
    dc = np.array([p[1] for p in pairs], dtype=np.int64)
    abs_dc = np.abs(dc)
    cost = np.abs(dr) * ROW_WEIGHT + HUE_WEIGHT * np.minimum(abs_dc, size - abs_dc)
    for arr in (dr, dc, cost):
        arr.flags.writeable = False
    return dr, dc, cost


def target_cell(ideal_row: float, ideal_col: float, size: int = GRID_SIZE) -> Cell:
    """Round an ideal coordinate to a cell: row clamped, column wrapped."""
    row = int(clamp_value(js_round(ideal_row), 0, size - 1))
    col = js_round(ideal_col) % size
    return row, col


def find_nearest_open_cell(
    occupied: OccupancyMap,
    target_row: int,
    target_col: int,
    max_radius: int = MAX_SEARCH_RADIUS,
) -> SearchHit:
    """
    Closest free cell to (target_row, target_col), scanning rings 1..max_radius.

    The target cell itself is not considered; callers claim it directly when
    free. Scanning stops once the best hit is strictly closer than the next
    ring's radius. Ties go to the first cell in scan order.

    Raises GridInvariantError when no free cell is reachable.
    """
    size = int(occupied.shape[1])
    n_rows = int(occupied.shape[0])
    best: Optional[SearchHit] = None

    for radius in range(1, max_radius + 1):
        if best is not None and best.distance < radius:
            break

        dr, dc, cost = ring_offsets(radius, size)
        rows = target_row + dr
        in_range = (rows >= 0) & (rows < n_rows)
        if not in_range.any():
            continue
        rows = rows[in_range]
        cols = (target_col + dc[in_range]) % size
        costs = cost[in_range]

        free_idx = np.flatnonzero(~occupied[rows, cols])
        if free_idx.size == 0:
            continue
        k = int(free_idx[np.argmin(costs[free_idx])])
        if best is None or costs[k] < best.distance:
            best = SearchHit(int(rows[k]), int(cols[k]), float(costs[k]), radius)

    if best is None:
        raise GridInvariantError(
            f"no free cell within radius {max_radius} of ({target_row}, {target_col}); "
            f"{int(occupied.sum())}/{occupied.size} cells occupied"
        )
    return best


__all__ = [
    "SearchHit",
    "wrapped_col_delta",
    "weighted_distance",
    "ring_offsets",
    "target_cell",
    "find_nearest_open_cell",
]
