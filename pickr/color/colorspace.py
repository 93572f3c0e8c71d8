# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion graph (HSV is the canonical model):

    HSL ↔ HSV ↔ RGB ↔ CMYK

Units used throughout:
- Hue in degrees [0, 360]
- Saturation / value / lightness in percent [0, 100]
- RGB channels as floats in [0, 255] (rounding is left to the caller)
- CMYK components in percent [0, 100]

All functions accept arrays of shape (..., 3) or (..., 4) and are pure
NumPy, so a single color and a whole track of colors go through the same
code path.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


# =============================================================================
# Rounding
# =============================================================================


def round_half_away(values: ArrayLike) -> NDArray[np.float64]:
    """
    Round to the nearest integer, halves away from zero.

    ``np.round`` rounds halves to even (``np.round(0.5) == 0``), which is
    not what a color readout should show.
    """
    values = np.asarray(values, dtype=np.float64)
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


# =============================================================================
# HSV ↔ RGB
# =============================================================================


def hsv_to_rgb(hsv: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSV to RGB.

    Uses the piecewise-linear channel form
    ``f(n) = v - v * s * clip(min(k, 4 - k), 0, 1)`` with
    ``k = (n + h / 60) mod 6`` for n = 5, 3, 1 (red, green, blue).

    Args:
        hsv: Array of shape (..., 3) with (h°, s%, v%)

    Returns:
        Array of shape (..., 3) with unrounded RGB values in [0, 255]
    """
    hsv = np.asarray(hsv, dtype=np.float64)

    h = hsv[..., 0] / 60.0
    s = hsv[..., 1] / 100.0
    v = hsv[..., 2] / 100.0

    def channel(n: int) -> NDArray[np.float64]:
        k = (n + h) % 6.0
        return v - v * s * np.clip(np.minimum(k, 4.0 - k), 0.0, 1.0)

    rgb = np.stack([channel(5), channel(3), channel(1)], axis=-1)
    return rgb * 255.0


def rgb_to_hsv(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert RGB to HSV.

    Args:
        rgb: Array of shape (..., 3) with RGB values in [0, 255]

    Returns:
        Array of shape (..., 3) with (h°, s%, v%); h is in [0, 360) and
        is 0 for grays.
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0

    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]

    max_c = rgb.max(axis=-1)
    min_c = rgb.min(axis=-1)
    delta = max_c - min_c

    # Grays divide by zero here; np.where discards those lanes
    with np.errstate(divide="ignore", invalid="ignore"):
        h = np.where(
            delta == 0.0,
            0.0,
            np.where(
                max_c == r,
                ((g - b) / delta) % 6.0,
                np.where(max_c == g, (b - r) / delta + 2.0, (r - g) / delta + 4.0),
            ),
        )
        s = np.where(max_c > 0.0, delta / max_c, 0.0)

    return np.stack([h * 60.0, s * 100.0, max_c * 100.0], axis=-1)


# =============================================================================
# HSV ↔ HSL
# =============================================================================


def hsv_to_hsl(hsv: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSV to HSL. Hue passes through unchanged.

    Args:
        hsv: Array of shape (..., 3) with (h°, s%, v%)

    Returns:
        Array of shape (..., 3) with (h°, s%, l%)
    """
    hsv = np.asarray(hsv, dtype=np.float64)

    h = hsv[..., 0]
    s = hsv[..., 1] / 100.0
    v = hsv[..., 2] / 100.0

    l = v * (1.0 - s / 2.0)
    denom = np.minimum(l, 1.0 - l)
    with np.errstate(divide="ignore", invalid="ignore"):
        s_l = np.where(denom > 0.0, (v - l) / denom, 0.0)

    return np.stack([h, s_l * 100.0, l * 100.0], axis=-1)


def hsl_to_hsv(hsl: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSL to HSV. Hue passes through unchanged.

    Args:
        hsl: Array of shape (..., 3) with (h°, s%, l%)

    Returns:
        Array of shape (..., 3) with (h°, s%, v%)
    """
    hsl = np.asarray(hsl, dtype=np.float64)

    h = hsl[..., 0]
    s = hsl[..., 1] / 100.0
    l = hsl[..., 2] / 100.0

    v = l + s * np.minimum(l, 1.0 - l)
    with np.errstate(divide="ignore", invalid="ignore"):
        s_v = np.where(v > 0.0, 2.0 * (1.0 - l / v), 0.0)

    return np.stack([h, s_v * 100.0, v * 100.0], axis=-1)


# =============================================================================
# RGB ↔ CMYK
# =============================================================================


def rgb_to_cmyk(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert RGB to CMYK (naive subtractive model, no ICC profile).

    Pure black maps to (0, 0, 0, 100).

    Args:
        rgb: Array of shape (..., 3) with RGB values in [0, 255]

    Returns:
        Array of shape (..., 4) with (c%, m%, y%, k%)
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0

    k = 1.0 - rgb.max(axis=-1)
    ink = 1.0 - k
    with np.errstate(divide="ignore", invalid="ignore"):
        cmy = np.where(
            ink[..., np.newaxis] > 0.0,
            (1.0 - rgb - k[..., np.newaxis]) / ink[..., np.newaxis],
            0.0,
        )

    return np.concatenate([cmy, k[..., np.newaxis]], axis=-1) * 100.0


def cmyk_to_rgb(cmyk: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CMYK to RGB.

    Args:
        cmyk: Array of shape (..., 4) with (c%, m%, y%, k%)

    Returns:
        Array of shape (..., 3) with unrounded RGB values in [0, 255]
    """
    cmyk = np.asarray(cmyk, dtype=np.float64) / 100.0
    cmy = cmyk[..., :3]
    k = cmyk[..., 3:4]
    return 255.0 * (1.0 - cmy) * (1.0 - k)
