# mosaic_grid/__init__.py
"""
mosaic_grid package.

Purpose:
  Places all 4,096 shorthand (#rgb) colours on a 64x64 grid, hue across columns
  and OKLCH lightness down rows. Vivid colours claim their ideal cell first;
  near-greys fill what is left. See mosaic_report.py for the CLI.

Public API:
  get_mosaic_grid   : 4096 placed entries, row-major (cached).
  get_mosaic_lookup : hex3 -> entry mapping (cached).
  get_mosaic_color  : single entry by hex3, or None.
  get_mosaic_matrix : grid as 64 rows of 64 entries (cached).
  build_mosaic_grid : uncached builder, returns the full GridAssignment.
  colour_convert    : sRGB -> OKLab / OKLCH.
  core_types        : value objects (RawColor, ColorEntry, Tier, ...) and errors.

Quick start:
  from mosaic_grid import get_mosaic_color
  entry = get_mosaic_color("f0a")
  entry.row, entry.col
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import constants
from . import core_types
from . import utils

from .core_types import (  # noqa: E402,F401
    ColorEntry,
    GridInvariantError,
    InvalidColorFormat,
    PerceptualColor,
    RawColor,
    Tier,
)
from .grid import (  # noqa: E402,F401
    MosaicCache,
    build_mosaic_grid,
    get_mosaic_color,
    get_mosaic_grid,
    get_mosaic_lookup,
    get_mosaic_matrix,
)

__all__ = [
    "__version__",
    "colour_convert",
    "constants",
    "core_types",
    "utils",
    "ColorEntry",
    "GridInvariantError",
    "InvalidColorFormat",
    "PerceptualColor",
    "RawColor",
    "Tier",
    "MosaicCache",
    "build_mosaic_grid",
    "get_mosaic_color",
    "get_mosaic_grid",
    "get_mosaic_lookup",
    "get_mosaic_matrix",
]
