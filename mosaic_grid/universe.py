# mosaic_grid/universe.py
from __future__ import annotations

"""
The 12-bit colour universe.

Exports:
  generate_colour_universe(adapter=rgb_to_oklch) -> list[ColorEntry]
  universe_index(r, g, b) -> int
"""

from typing import List, Optional

import numpy as np

from .colour_convert import rgb_to_oklch
from .constants import NIBBLE_LEVELS, TOTAL_COLORS
from .core_types import (
    ColorEntry,
    ColourSpaceAdapter,
    GridInvariantError,
    PerceptualColor,
    RawColor,
    U8Rgb,
    expand_nibble,
)


def universe_index(r: int, g: int, b: int) -> int:
    """Position of (r, g, b) in enumeration order: r*256 + g*16 + b."""
    return (r * NIBBLE_LEVELS + g) * NIBBLE_LEVELS + b


def _raw_colours() -> List[RawColor]:
    return [
        RawColor(r, g, b)
        for r in range(NIBBLE_LEVELS)
        for g in range(NIBBLE_LEVELS)
        for b in range(NIBBLE_LEVELS)
    ]


def generate_colour_universe(
    adapter: Optional[ColourSpaceAdapter] = None,
) -> List[ColorEntry]:
    """
    Enumerate all 4096 shorthand colours in r -> g -> b order.

    Each colour is nibble-expanded to 8-bit and converted to OKLCH in a single
    batch call to `adapter` (default rgb_to_oklch). Entries come back unplaced.
    """
    convert = adapter if adapter is not None else rgb_to_oklch
    raws = _raw_colours()

    rgb_u8: U8Rgb = np.array(
        [
            (expand_nibble(c.r), expand_nibble(c.g), expand_nibble(c.b))
            for c in raws
        ],
        dtype=np.uint8,
    )
    lch = np.asarray(convert(rgb_u8), dtype=np.float64).reshape(-1, 3)
    if lch.shape[0] != TOTAL_COLORS:
        raise GridInvariantError(
            f"adapter returned {lch.shape[0]} rows for {TOTAL_COLORS} colours"
        )

    return [
        ColorEntry(
            raw=raw,
            perceptual=PerceptualColor(
                l=float(lch[i, 0]), c=float(lch[i, 1]), h=float(lch[i, 2])
            ),
        )
        for i, raw in enumerate(raws)
    ]


__all__ = ["generate_colour_universe", "universe_index"]
