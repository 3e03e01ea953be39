"""
Grid geometry and placement tunables used across the project.

- Grid geometry (GRID_SIZE, TOTAL_COLORS)
- 12-bit colour cube (NIBBLE_LEVELS, NIBBLE_SCALE)
- Tier thresholds (VIVID_*, MODERATE_*)
- Ring search weights (ROW_WEIGHT, HUE_WEIGHT, MAX_SEARCH_RADIUS)
"""
from __future__ import annotations

# =========================
# Grid geometry
# =========================
GRID_SIZE: int = 64
TOTAL_COLORS: int = GRID_SIZE * GRID_SIZE  # 4096
MAX_INDEX: int = GRID_SIZE - 1  # 63, scale for ideal row/col

# =========================
# 12-bit colour cube
# =========================
NIBBLE_LEVELS: int = 16
NIBBLE_SCALE: int = 17  # 0x0 -> 0x00, 0xF -> 0xFF

# =========================
# Tiers (OKLCH units)
# =========================
VIVID_CHROMA_MIN: float = 0.08
VIVID_LIGHTNESS_MIN: float = 0.15
VIVID_LIGHTNESS_MAX: float = 0.95
MODERATE_CHROMA_MIN: float = 0.02

# =========================
# Ring search
# =========================
ROW_WEIGHT: float = 1.0  # lightness displacement
HUE_WEIGHT: float = 1.5  # hue displacement, per column
MAX_SEARCH_RADIUS: int = GRID_SIZE

__all__ = [
    "GRID_SIZE",
    "TOTAL_COLORS",
    "MAX_INDEX",
    "NIBBLE_LEVELS",
    "NIBBLE_SCALE",
    "VIVID_CHROMA_MIN",
    "VIVID_LIGHTNESS_MIN",
    "VIVID_LIGHTNESS_MAX",
    "MODERATE_CHROMA_MIN",
    "ROW_WEIGHT",
    "HUE_WEIGHT",
    "MAX_SEARCH_RADIUS",
]
