# mosaic_grid/colour_convert.py
from __future__ import annotations

"""
Colour conversions (sRGB, D65) into OKLab / OKLCH.

Exports:
  rgb_to_linear(srgb)
  rgb_to_oklab(rgb)
  oklab_to_oklch(lab)
  rgb_to_oklch(rgb)     batch adapter used by the universe generator
  to_perceptual(rgb)    scalar form returning PerceptualColor
"""

import numpy as np

from .core_types import Lch, PerceptualColor, RGBTuple


# sRGB to linear


def rgb_to_linear(srgb: np.ndarray) -> np.ndarray:
    """
    Convert sRGB (non-linear 0..1) to linear RGB (0..1). Vectorised.
    Args:
      srgb: array[...] in 0..1 (float)
    Returns:
      float64 array, same shape
    """
    srgb_f = srgb.astype(np.float64, copy=False)
    with np.errstate(invalid="ignore"):
        linear = np.where(
            srgb_f <= 0.04045, srgb_f / 12.92, ((srgb_f + 0.055) / 1.055) ** 2.4
        )
    return linear.astype(np.float64, copy=False)


# sRGB to OKLab


def rgb_to_oklab(rgb: np.ndarray) -> np.ndarray:
    """
    sRGB to OKLab.
    Accepts uint8 [0..255] or float [0..1]. Preserves shape (...,3). Returns float64.
    """
    rgb_f = rgb.astype(np.float64, copy=False)
    if np.issubdtype(rgb.dtype, np.integer):
        rgb_f = rgb_f / 255.0

    r_lin = rgb_to_linear(rgb_f[..., 0])
    g_lin = rgb_to_linear(rgb_f[..., 1])
    b_lin = rgb_to_linear(rgb_f[..., 2])

    # Linear RGB -> LMS
    lms_l = 0.4122214708 * r_lin + 0.5363325363 * g_lin + 0.0514459929 * b_lin
    lms_m = 0.2119034982 * r_lin + 0.6806995451 * g_lin + 0.1073969566 * b_lin
    lms_s = 0.0883024619 * r_lin + 0.2817188376 * g_lin + 0.6299787005 * b_lin

    l_ = np.cbrt(lms_l)
    m_ = np.cbrt(lms_m)
    s_ = np.cbrt(lms_s)

    out = np.empty(rgb_f.shape, dtype=np.float64)
    out[..., 0] = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    out[..., 1] = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    out[..., 2] = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_
    return out


# OKLab to OKLCH


def oklab_to_oklch(lab: np.ndarray) -> Lch:
    """
    OKLab[...,3] to OKLCH[...,3] (hue degrees in [0,360)).
    Returns float64 with shape preserved.
    """
    orig_shape = lab.shape
    flat = lab.reshape(-1, 3).astype(np.float64, copy=False)
    L = flat[:, 0]
    a = flat[:, 1]
    b = flat[:, 2]
    C = np.hypot(a, b)
    h = np.degrees(np.arctan2(b, a))
    h = np.where(h < 0.0, h + 360.0, h)
    h = np.where(h >= 360.0, 0.0, h)  # -tiny + 360 rounds to 360.0
    lch = np.stack([L, C, h], axis=1)
    return lch.reshape(orig_shape)


def rgb_to_oklch(rgb: np.ndarray) -> Lch:
    """Batch adapter: sRGB (...,3) to OKLCH (...,3)."""
    return oklab_to_oklch(rgb_to_oklab(rgb))


def to_perceptual(rgb: RGBTuple) -> PerceptualColor:
    """Single 8-bit RGB triple to PerceptualColor."""
    row = rgb_to_oklch(np.asarray([rgb], dtype=np.uint8))[0]
    return PerceptualColor(l=float(row[0]), c=float(row[1]), h=float(row[2]))


__all__ = [
    "rgb_to_linear",
    "rgb_to_oklab",
    "oklab_to_oklch",
    "rgb_to_oklch",
    "to_perceptual",
]
