# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""Pixel geometry: control-position mapping and popup placement."""

from pickr.geometry.mapping import (
    ControlPositions,
    TrackSize,
    alpha_to_position,
    control_positions,
    hue_to_position,
    position_to_alpha,
    position_to_hue,
    position_to_saturation_value,
    saturation_value_to_position,
)
from pickr.geometry.placement import (
    POPUP_GAP,
    Alignment,
    Placement,
    Rect,
    Viewport,
    compute_placement,
    horizontal_offset,
)

__all__ = [
    # Mapping
    "TrackSize",
    "ControlPositions",
    "position_to_saturation_value",
    "saturation_value_to_position",
    "position_to_hue",
    "hue_to_position",
    "position_to_alpha",
    "alpha_to_position",
    "control_positions",
    # Placement
    "POPUP_GAP",
    "Alignment",
    "Rect",
    "Viewport",
    "Placement",
    "horizontal_offset",
    "compute_placement",
]
