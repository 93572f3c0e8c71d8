# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""
Mapping between drag-control positions and color components.

Three tracks, each with a forward (pixel -> component) and an inverse
(component -> pixel) function:

    palette   2D   x -> saturation, y -> value (top = bright)
    hue       1D   y -> hue
    opacity   1D   y -> alpha

Both directions are pure functions of (position, track size). Control
positions are always re-derived from the color, never accumulated from
deltas, so a resize or a typed color can never leave a handle out of sync.

Pixel coordinates are measured from the track's top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass

from pickr.color.colorspace import round_half_away
from pickr.color.hsva import HSVaColor


@dataclass(frozen=True, slots=True)
class TrackSize:
    """
    Pixel extent of a drag track.

    Attributes:
        width: Track width in pixels (only the palette uses it)
        height: Track height in pixels
    """
    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate the track extent."""
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Track size cannot be negative, got {self.width}x{self.height}"
            )


@dataclass(frozen=True, slots=True)
class ControlPositions:
    """
    Handle positions of all three controls for one color.

    Attributes:
        palette: (x, y) inside the saturation/value track
        hue: y inside the hue track
        opacity: y inside the opacity track
    """
    palette: tuple[float, float]
    hue: float
    opacity: float


def _ratio(position: float, extent: float) -> float:
    """Position as a fraction of the extent, clamped to [0, 1]."""
    if extent <= 0:
        return 0.0
    return min(max(position / extent, 0.0), 1.0)


def _round(value: float) -> float:
    return float(round_half_away(value))


# =============================================================================
# Forward: position -> color component
# =============================================================================


def position_to_saturation_value(
    x: float, y: float, track: TrackSize
) -> tuple[float, float]:
    """
    Saturation and value for a palette handle position.

    ``s = round(100 * x / W)``, ``v = round(100 - 100 * y / H)``.
    """
    s = _round(100.0 * _ratio(x, track.width))
    v = _round(100.0 - 100.0 * _ratio(y, track.height))
    return s, v


def position_to_hue(y: float, track: TrackSize) -> float:
    """Hue for a hue-slider position: ``h = round(360 * y / H)``."""
    return _round(360.0 * _ratio(y, track.height))


def position_to_alpha(y: float, track: TrackSize) -> float:
    """Alpha for an opacity-slider position: ``a = round(100 * y / H) / 100``."""
    return _round(100.0 * _ratio(y, track.height)) / 100.0


# =============================================================================
# Inverse: color component -> position
# =============================================================================


def saturation_value_to_position(
    s: float, v: float, track: TrackSize
) -> tuple[float, float]:
    """Palette handle position: ``x = W * s / 100``, ``y = H * (1 - v / 100)``."""
    return track.width * s / 100.0, track.height * (1.0 - v / 100.0)


def hue_to_position(h: float, track: TrackSize) -> float:
    """Hue-slider position: ``y = H * h / 360``."""
    return track.height * h / 360.0


def alpha_to_position(a: float, track: TrackSize) -> float:
    """Opacity-slider position: ``y = H * a``."""
    return track.height * a


def control_positions(
    color: HSVaColor,
    palette: TrackSize,
    hue: TrackSize,
    opacity: TrackSize,
) -> ControlPositions:
    """
    Derive every handle position from a color in one pass.

    Args:
        color: The color to display
        palette: Current saturation/value track size
        hue: Current hue track size
        opacity: Current opacity track size

    Returns:
        ControlPositions for the three controls
    """
    return ControlPositions(
        palette=saturation_value_to_position(color.s, color.v, palette),
        hue=hue_to_position(color.h, hue),
        opacity=alpha_to_position(color.a, opacity),
    )
