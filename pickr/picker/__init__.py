# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""
Picker orchestration.

The controller owns the color state; controls and the popup surface are
collaborators reached only through the interfaces in ``controls``.
"""

from pickr.picker.controller import (
    InputAuthority,
    PickerComponents,
    PickerController,
    create,
)
from pickr.picker.controls import (
    DragControl,
    FormatSelector,
    HeadlessSurface,
    Moveable,
    PopupSurface,
)
from pickr.picker.options import PickerOptions, apply_defaults
from pickr.picker.styles import CLEARED_BACKGROUND, PreviewStyles, preview_styles

__all__ = [
    "PickerController",
    "PickerComponents",
    "InputAuthority",
    "create",
    # Configuration
    "PickerOptions",
    "apply_defaults",
    # Collaborators
    "DragControl",
    "Moveable",
    "FormatSelector",
    "PopupSurface",
    "HeadlessSurface",
    # Swatches
    "PreviewStyles",
    "preview_styles",
    "CLEARED_BACKGROUND",
]
