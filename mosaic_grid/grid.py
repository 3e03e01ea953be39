# mosaic_grid/grid.py
from __future__ import annotations

"""
Mosaic grid construction and the process-wide cache.

Exports:
  build_mosaic_grid(adapter=None, *, debug=False) -> GridAssignment   (uncached)
  MosaicCache                                                          (lazy, built once)
  get_mosaic_grid()   -> tuple[ColorEntry, ...]   4096 entries, row-major
  get_mosaic_lookup() -> Mapping[hex3, ColorEntry]
  get_mosaic_color(hex3) -> ColorEntry | None
  get_mosaic_matrix() -> 64 rows of 64 entries

The grid is a pure function of the fixed colour universe, so there is no
invalidation API.
"""

import threading
import time
from collections import Counter
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

from .assign import GridAssignment, assign_grid
from .constants import GRID_SIZE, TOTAL_COLORS
from .core_types import ColorEntry, ColourSpaceAdapter, GridInvariantError, normalise_hex3
from .planner import plan_placements
from .universe import generate_colour_universe
from .utils import debug_log, format_seconds_compact, key_value_pairs_to_string


def _verify_complete(assignment: GridAssignment) -> None:
    placements = assignment.placements
    if len(placements) != TOTAL_COLORS:
        raise GridInvariantError(
            f"placed {len(placements)} colours, expected {TOTAL_COLORS}"
        )
    cells = {(p.entry.row, p.entry.col) for p in placements}
    if len(cells) != TOTAL_COLORS:
        raise GridInvariantError(
            f"{TOTAL_COLORS - len(cells)} cells hold more than one colour"
        )
    if not bool(assignment.occupied.all()):
        raise GridInvariantError(
            f"{int((~assignment.occupied).sum())} cells left unassigned"
        )


def build_mosaic_grid(
    adapter: Optional[ColourSpaceAdapter] = None, *, debug: bool = False
) -> GridAssignment:
    """
    Enumerate, plan and assign all 4096 colours.

    Pipeline: generate_colour_universe -> plan_placements -> assign_grid, then
    a completeness check. Raises GridInvariantError if the result is not a
    bijection between colours and cells.
    """
    t0 = time.perf_counter()
    entries = generate_colour_universe(adapter)
    candidates = plan_placements(entries)
    t_plan = time.perf_counter()

    assignment = assign_grid(candidates, size=GRID_SIZE)
    _verify_complete(assignment)
    t_done = time.perf_counter()

    if debug:
        tiers = Counter(c.tier for c in candidates)
        displaced = [p for p in assignment.placements if p.displaced]
        debug_log(
            key_value_pairs_to_string(
                [(f"Tier {t.name.lower()}", tiers.get(t, 0)) for t in sorted(tiers)]
            )
        )
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Placed", len(assignment.placements)),
                    ("Displaced", len(displaced)),
                    ("Widest ring", max((p.radius for p in displaced), default=0)),
                    ("Plan time", format_seconds_compact(t_plan - t0)),
                    ("Assign time", format_seconds_compact(t_done - t_plan)),
                ]
            )
        )
    return assignment


class _Snapshot(NamedTuple):
    grid: Tuple[ColorEntry, ...]
    lookup: Mapping[str, ColorEntry]
    matrix: Tuple[Tuple[ColorEntry, ...], ...]


class MosaicCache:
    """
    Lazily built grid, lookup and matrix.

    The first caller builds under a lock and publishes all three views at
    once; later callers read the published snapshot without locking.
    """

    def __init__(self, adapter: Optional[ColourSpaceAdapter] = None) -> None:
        self._adapter = adapter
        self._lock = threading.Lock()
        self._snapshot: Optional[_Snapshot] = None
        self.build_count = 0

    def _ensure_built(self) -> _Snapshot:
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot
        with self._lock:
            if self._snapshot is not None:
                return self._snapshot
            assignment = build_mosaic_grid(self._adapter)
            grid = tuple(assignment.entries_row_major())
            snapshot = _Snapshot(
                grid=grid,
                lookup=MappingProxyType({e.hex3: e for e in grid}),
                matrix=tuple(
                    grid[row * GRID_SIZE : (row + 1) * GRID_SIZE]
                    for row in range(GRID_SIZE)
                ),
            )
            self.build_count += 1
            self._snapshot = snapshot
            return snapshot

    def grid(self) -> Tuple[ColorEntry, ...]:
        return self._ensure_built().grid

    def lookup(self) -> Mapping[str, ColorEntry]:
        return self._ensure_built().lookup

    def matrix(self) -> Tuple[Tuple[ColorEntry, ...], ...]:
        return self._ensure_built().matrix

    def color(self, hex3: str) -> Optional[ColorEntry]:
        return self.lookup().get(normalise_hex3(hex3))


_CACHE = MosaicCache()


def get_mosaic_grid() -> Tuple[ColorEntry, ...]:
    """All 4096 placed entries in row-major order (cached after first call)."""
    return _CACHE.grid()


def get_mosaic_lookup() -> Mapping[str, ColorEntry]:
    """Read-only hex3 -> entry mapping (cached after first call)."""
    return _CACHE.lookup()


def get_mosaic_color(hex3: str) -> Optional[ColorEntry]:
    """Entry for a shorthand key ('f0a', '#F0A'), or None outside the universe."""
    return _CACHE.color(hex3)


def get_mosaic_matrix() -> Tuple[Tuple[ColorEntry, ...], ...]:
    """Grid as 64 rows of 64 entries; matrix[row][col]."""
    return _CACHE.matrix()


__all__ = [
    "build_mosaic_grid",
    "MosaicCache",
    "get_mosaic_grid",
    "get_mosaic_lookup",
    "get_mosaic_color",
    "get_mosaic_matrix",
]
