# mosaic_grid/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, errors and lightweight helpers.
"""

import math
import re
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Callable, Dict, Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .constants import NIBBLE_LEVELS, NIBBLE_SCALE

# Basic aliases

RGBTuple = Tuple[int, int, int]
Hex3 = str  # "f0a"
Hex6 = str  # "#FF00AA"
Cell = Tuple[int, int]  # (row, col)

U8Rgb = NDArray[np.uint8]  # (N, 3)
Lch = NDArray[np.float64]  # (N, 3) OKLCH rows
OccupancyMap = NDArray[np.bool_]  # (GRID_SIZE, GRID_SIZE)

# Batch colour-space adapter: (N,3) uint8 sRGB -> (N,3) L, C, H
ColourSpaceAdapter = Callable[[U8Rgb], Lch]

_HEX3_RE = re.compile(r"^#?([0-9a-f]{3})$")


# Errors


class InvalidColorFormat(ValueError):
    """Raised for a colour key outside the 12-bit shorthand domain."""


class GridInvariantError(AssertionError):
    """
    A placement invariant was broken.

    Only reachable through a bug in enumeration, tiering or assignment.
    Never retried.
    """


# Value objects


class Tier(IntEnum):
    """Placement priority; lower values are placed first."""

    VIVID = 1
    MODERATE = 2
    NEAR_ACHROMATIC = 3


@dataclass(frozen=True)
class RawColor:
    """A 4-bit-per-channel colour (each nibble in 0..15)."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value < NIBBLE_LEVELS:
                raise InvalidColorFormat(
                    f"nibble {name}={value} outside 0..{NIBBLE_LEVELS - 1}"
                )

    @classmethod
    def from_hex3(cls, text: str) -> "RawColor":
        """Parse 'f0a' or '#F0A' into a RawColor."""
        r, g, b = parse_hex3(text)
        return cls(r, g, b)

    @property
    def hex3(self) -> Hex3:
        return f"{self.r:x}{self.g:x}{self.b:x}"

    @property
    def rgb(self) -> RGBTuple:
        return (expand_nibble(self.r), expand_nibble(self.g), expand_nibble(self.b))

    @property
    def hex6(self) -> Hex6:
        r, g, b = self.rgb
        return f"#{r:02X}{g:02X}{b:02X}"

    @property
    def index(self) -> int:
        return self.r * NIBBLE_LEVELS * NIBBLE_LEVELS + self.g * NIBBLE_LEVELS + self.b


@dataclass(frozen=True)
class PerceptualColor:
    """OKLCH triple: l in 0..1, c in 0..~0.4, h in [0, 360)."""

    l: float  # noqa: E741
    c: float
    h: float


@dataclass(frozen=True)
class ColorEntry:
    """A mosaic colour; row/col stay None until the assigner places it."""

    raw: RawColor
    perceptual: PerceptualColor
    row: Optional[int] = None
    col: Optional[int] = None

    @property
    def hex3(self) -> Hex3:
        return self.raw.hex3

    @property
    def hex6(self) -> Hex6:
        return self.raw.hex6

    @property
    def rgb(self) -> RGBTuple:
        return self.raw.rgb

    @property
    def is_placed(self) -> bool:
        return self.row is not None and self.col is not None

    def placed(self, row: int, col: int) -> "ColorEntry":
        """Return a copy of this entry fixed at (row, col)."""
        if self.is_placed:
            raise GridInvariantError(
                f"{self.hex3} already placed at ({self.row}, {self.col})"
            )
        return replace(self, row=int(row), col=int(col))

    def as_dict(self) -> Dict[str, object]:
        """Plain-dict view: hex3, hex6, rgb, perceptual, row, col."""
        r, g, b = self.rgb
        return {
            "hex3": self.hex3,
            "hex6": self.hex6,
            "rgb": {"r": r, "g": g, "b": b},
            "perceptual": {
                "l": self.perceptual.l,
                "c": self.perceptual.c,
                "h": self.perceptual.h,
            },
            "row": self.row,
            "col": self.col,
        }


@dataclass(frozen=True)
class PlacementCandidate:
    """An entry with its fractional ideal cell and priority tier."""

    entry: ColorEntry
    ideal_row: float
    ideal_col: float
    tier: Tier

    @property
    def chroma(self) -> float:
        return self.entry.perceptual.c


# Small helpers


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def js_round(value: float) -> int:
    """Round half up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def expand_nibble(nibble: int) -> int:
    """4-bit channel to 8-bit: 0x0 -> 0x00, 0xA -> 0xAA, 0xF -> 0xFF."""
    return int(nibble) * NIBBLE_SCALE


def normalise_hex3(text: str) -> str:
    """Strip whitespace and at most one leading '#', lowercase."""
    if not isinstance(text, str):
        return ""
    s = text.strip().lower()
    return s[1:] if s.startswith("#") else s


def parse_hex3(text: Union[str, object]) -> Tuple[int, int, int]:
    """
    Parse a shorthand hex key into nibbles.

    Accepts 'rgb' or '#rgb', case-insensitive.
    Raises InvalidColorFormat otherwise.
    """
    if not isinstance(text, str):
        raise InvalidColorFormat(f"hex3 must be a string, got {type(text).__name__}")
    m = _HEX3_RE.match(text.strip().lower())
    if m is None:
        raise InvalidColorFormat(f"invalid hex3 colour {text!r}; expected [0-9a-f]{{3}}")
    digits = m.group(1)
    return (int(digits[0], 16), int(digits[1], 16), int(digits[2], 16))


__all__ = [
    # aliases / types
    "RGBTuple",
    "Hex3",
    "Hex6",
    "Cell",
    "U8Rgb",
    "Lch",
    "OccupancyMap",
    "ColourSpaceAdapter",
    # errors
    "InvalidColorFormat",
    "GridInvariantError",
    # value objects
    "Tier",
    "RawColor",
    "PerceptualColor",
    "ColorEntry",
    "PlacementCandidate",
    # helpers
    "clamp_value",
    "js_round",
    "expand_nibble",
    "normalise_hex3",
    "parse_hex3",
]
