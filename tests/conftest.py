from __future__ import annotations

import pytest

from mosaic_grid.grid import build_mosaic_grid


@pytest.fixture(scope="session")
def assignment():
    """One full uncached build shared by the grid-level tests."""
    return build_mosaic_grid()
