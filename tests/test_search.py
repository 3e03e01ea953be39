from __future__ import annotations

import numpy as np
import pytest

from mosaic_grid.assign import new_occupancy_map
from mosaic_grid.core_types import GridInvariantError
from mosaic_grid.search import (
    find_nearest_open_cell,
    ring_offsets,
    target_cell,
    weighted_distance,
    wrapped_col_delta,
)


def test_wrapped_col_delta_takes_shorter_way():
    assert wrapped_col_delta(63) == 1
    assert wrapped_col_delta(-63) == 1
    assert wrapped_col_delta(62) == 2
    assert wrapped_col_delta(32) == 32
    assert wrapped_col_delta(64) == 0
    assert wrapped_col_delta(5) == 5


def test_weighted_distance_is_anisotropic():
    assert weighted_distance(2, 0) == 2.0
    assert weighted_distance(0, 2) == 3.0
    assert weighted_distance(-1, -1) == 2.5
    # Hue 359 vs hue 1: columns 63 and 0 are neighbours, not 63 apart.
    assert weighted_distance(0, 63 - 0) == 1.5


def test_ring_offsets_are_the_square_perimeter():
    for radius in (1, 2, 5):
        dr, dc, cost = ring_offsets(radius)
        assert len(dr) == 8 * radius
        assert np.all(np.maximum(np.abs(dr), np.abs(dc)) == radius)
        assert len({(a, b) for a, b in zip(dr.tolist(), dc.tolist())}) == 8 * radius
    dr, dc, _ = ring_offsets(1)
    assert list(zip(dr.tolist(), dc.tolist())) == [
        (-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1),
    ]


def test_ring_costs_match_weighted_distance():
    dr, dc, cost = ring_offsets(40)
    for a, b, c in zip(dr.tolist(), dc.tolist(), cost.tolist()):
        assert c == weighted_distance(a, b)


def test_target_cell_rounds_clamps_and_wraps():
    assert target_cell(10.4, 20.5) == (10, 21)
    assert target_cell(-3.0, 0.2) == (0, 0)
    assert target_cell(70.0, 62.4) == (63, 62)
    assert target_cell(5.0, 63.6) == (5, 0)


def test_prefers_row_move_over_column_move():
    occ = new_occupancy_map()
    occ[10, 10] = True
    hit = find_nearest_open_cell(occ, 10, 10)
    # (9, 10) and (11, 10) cost 1.0; the scan reaches dr=-1 first.
    assert (hit.row, hit.col, hit.distance, hit.radius) == (9, 10, 1.0, 1)


def test_column_neighbour_when_rows_blocked():
    occ = new_occupancy_map()
    occ[:, 10] = True
    hit = find_nearest_open_cell(occ, 10, 10)
    assert (hit.row, hit.col) == (10, 9)
    assert hit.distance == 1.5


def test_top_row_does_not_wrap_vertically():
    occ = new_occupancy_map()
    occ[0, :] = True
    occ[63, 5] = False
    hit = find_nearest_open_cell(occ, 0, 5)
    assert (hit.row, hit.col) == (1, 5)


def test_hue_wrap_collision_resolves_across_seam():
    occ = np.ones((64, 64), dtype=np.bool_)
    occ[10, 63] = False
    occ[10, 5] = False
    hit = find_nearest_open_cell(occ, 10, 0)
    assert (hit.row, hit.col) == (10, 63)
    assert hit.distance == pytest.approx(1.5)


def test_keeps_scanning_while_next_ring_can_win():
    occ = np.ones((64, 64), dtype=np.bool_)
    occ[29, 29] = False  # ring 1, cost 2.5
    occ[28, 30] = False  # ring 2, cost 2.0
    hit = find_nearest_open_cell(occ, 30, 30)
    assert (hit.row, hit.col, hit.distance, hit.radius) == (28, 30, 2.0, 2)


def test_cheaper_cell_on_same_ring_wins():
    occ = np.ones((64, 64), dtype=np.bool_)
    occ[30, 32] = False  # ring 2, cost 3.0
    occ[28, 30] = False  # ring 2, cost 2.0
    occ[27, 30] = False  # ring 3, cost 3.0
    hit = find_nearest_open_cell(occ, 30, 30)
    assert (hit.row, hit.col, hit.distance) == (28, 30, 2.0)


def test_far_cell_is_found_on_wide_ring():
    occ = np.ones((64, 64), dtype=np.bool_)
    occ[63, 32] = False
    hit = find_nearest_open_cell(occ, 0, 0)
    assert (hit.row, hit.col) == (63, 32)
    assert hit.distance == pytest.approx(63 + 1.5 * 32)


def test_full_grid_is_fatal():
    occ = np.ones((64, 64), dtype=np.bool_)
    with pytest.raises(GridInvariantError, match="no free cell"):
        find_nearest_open_cell(occ, 12, 34)
