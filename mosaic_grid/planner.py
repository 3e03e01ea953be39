# mosaic_grid/planner.py
from __future__ import annotations

"""
Placement planning: ideal cell and priority tier for each colour.

Hue maps linearly onto columns (0..63) and lightness onto rows, lightest at
row 0. The column axis does not wrap in storage, so a hue seam sits between
column 63 and column 0; only the search distance treats hue as circular.
"""

from typing import Iterable, List, Tuple

from .constants import (
    MAX_INDEX,
    MODERATE_CHROMA_MIN,
    VIVID_CHROMA_MIN,
    VIVID_LIGHTNESS_MAX,
    VIVID_LIGHTNESS_MIN,
)
from .core_types import ColorEntry, PerceptualColor, PlacementCandidate, Tier


def ideal_position(perceptual: PerceptualColor) -> Tuple[float, float]:
    """Fractional (row, col): row = (1 - L) * 63, col = (H / 360) * 63."""
    ideal_row = (1.0 - perceptual.l) * MAX_INDEX
    ideal_col = (perceptual.h / 360.0) * MAX_INDEX
    return ideal_row, ideal_col


def classify_tier(perceptual: PerceptualColor) -> Tier:
    c, l = perceptual.c, perceptual.l  # noqa: E741
    if c >= VIVID_CHROMA_MIN and VIVID_LIGHTNESS_MIN <= l <= VIVID_LIGHTNESS_MAX:
        return Tier.VIVID
    if c >= MODERATE_CHROMA_MIN:
        return Tier.MODERATE
    return Tier.NEAR_ACHROMATIC


def plan_candidate(entry: ColorEntry) -> PlacementCandidate:
    ideal_row, ideal_col = ideal_position(entry.perceptual)
    return PlacementCandidate(
        entry=entry,
        ideal_row=ideal_row,
        ideal_col=ideal_col,
        tier=classify_tier(entry.perceptual),
    )


def placement_order(candidates: Iterable[PlacementCandidate]) -> List[PlacementCandidate]:
    """Tier ascending, then chroma descending. Stable, so ties keep input order."""
    return sorted(candidates, key=lambda cand: (int(cand.tier), -cand.chroma))


def plan_placements(entries: Iterable[ColorEntry]) -> List[PlacementCandidate]:
    """Annotate entries with ideal cell and tier, in processing order."""
    return placement_order(plan_candidate(e) for e in entries)


__all__ = [
    "ideal_position",
    "classify_tier",
    "plan_candidate",
    "placement_order",
    "plan_placements",
]
