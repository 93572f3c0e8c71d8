# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""
Pickr -- color picker core.

Color model, text parsing, control geometry and popup placement for an
embeddable HSV color picker, plus the controller that ties them together.

Quick start::

    from pickr import PickerController

    picker = PickerController({"defaultColor": "#42445A"})
    picker.set_color("rgb 10 10 200")
    picker.get_color().to_hex()        # '#0A0AC8'
    str(picker.get_color().to_hsla())  # 'hsla(240, 90%, 41%, 1)'
"""

from __future__ import annotations

__version__ = "0.1.3"

from pickr.color import (
    CMYK,
    HSLA,
    HSVA,
    RGBA,
    HSVaColor,
    OutputFormat,
    parse_to_color,
    parse_to_hsva,
)
from pickr.geometry import Alignment, Placement, Rect, TrackSize, Viewport, compute_placement
from pickr.picker import PickerController, PickerOptions, apply_defaults, create

__all__ = [
    # Core API
    "PickerController",
    "PickerOptions",
    "apply_defaults",
    "create",
    # Color model
    "HSVaColor",
    "OutputFormat",
    "RGBA",
    "HSLA",
    "HSVA",
    "CMYK",
    "parse_to_hsva",
    "parse_to_color",
    # Geometry
    "TrackSize",
    "Rect",
    "Viewport",
    "Alignment",
    "Placement",
    "compute_placement",
    # Version
    "__version__",
]
