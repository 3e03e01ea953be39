from __future__ import annotations

import numpy as np
import pytest

from mosaic_grid.colour_convert import (
    oklab_to_oklch,
    rgb_to_linear,
    rgb_to_oklab,
    rgb_to_oklch,
    to_perceptual,
)


def test_black_and_white_anchor_lightness():
    black = to_perceptual((0, 0, 0))
    white = to_perceptual((255, 255, 255))
    assert black.l == pytest.approx(0.0, abs=1e-9)
    assert black.c == pytest.approx(0.0, abs=1e-9)
    assert white.l == pytest.approx(1.0, abs=1e-6)
    assert white.c < 1e-4


def test_pure_red_matches_reference_oklch():
    red = to_perceptual((255, 0, 0))
    assert red.l == pytest.approx(0.62796, abs=1e-3)
    assert red.c == pytest.approx(0.25768, abs=1e-3)
    assert red.h == pytest.approx(29.23, abs=0.1)


def test_hue_is_in_half_open_range():
    rgb = np.array(
        [[255, 0, 0], [0, 255, 0], [0, 0, 255], [255, 0, 255], [17, 34, 51]],
        dtype=np.uint8,
    )
    lch = rgb_to_oklch(rgb)
    assert lch.shape == (5, 3)
    assert np.all(lch[:, 2] >= 0.0) and np.all(lch[:, 2] < 360.0)


def test_batch_and_scalar_agree():
    rgb = np.array([[255, 0, 170], [68, 136, 204]], dtype=np.uint8)
    batch = rgb_to_oklch(rgb)
    for row, expected in zip(rgb.tolist(), batch):
        p = to_perceptual(tuple(row))
        assert (p.l, p.c, p.h) == pytest.approx(tuple(expected))


def test_float_input_is_treated_as_unit_range():
    u8 = rgb_to_oklab(np.array([[255, 128, 0]], dtype=np.uint8))
    f = rgb_to_oklab(np.array([[1.0, 128 / 255, 0.0]]))
    assert np.allclose(u8, f)


def test_linearisation_endpoints():
    out = rgb_to_linear(np.array([0.0, 1.0, 0.04045]))
    assert out[0] == 0.0
    assert out[1] == pytest.approx(1.0)
    assert out[2] == pytest.approx(0.04045 / 12.92)


def test_oklab_to_oklch_preserves_shape():
    lab = np.zeros((2, 2, 3))
    lab[..., 0] = 0.5
    lab[0, 0, 1:] = (0.0, 0.1)
    lch = oklab_to_oklch(lab)
    assert lch.shape == (2, 2, 3)
    assert lch[0, 0, 1] == pytest.approx(0.1)
    assert lch[0, 0, 2] == pytest.approx(90.0)
