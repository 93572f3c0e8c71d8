# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""CSS background values the surface paints after every color change."""

from __future__ import annotations

from dataclasses import dataclass

from pickr.color.colorspace import round_half_away
from pickr.color.hsva import HSLA, RGBA, HSVaColor


# Anchor button background while the picker is cleared
CLEARED_BACKGROUND = "rgba(255, 255, 255, 0.4)"


@dataclass(frozen=True, slots=True)
class PreviewStyles:
    """
    Derived swatch backgrounds; recomputed from colors, never stored.

    Attributes:
        current: Palette handle and current-color swatch
        palette_track: Saturation/value track (black overlay on a
            white-to-hue gradient, both faded by alpha)
        hue_handle: Hue slider handle (pure hue)
        opacity_handle: Opacity slider handle
        last: Last-saved swatch
        button: Anchor button
    """
    current: str
    palette_track: str
    hue_handle: str
    opacity_handle: str
    last: str
    button: str


def preview_styles(
    color: HSVaColor, last_color: HSVaColor, cleared: bool = False
) -> PreviewStyles:
    """Build the swatch backgrounds for a working and a last-saved color."""
    current = str(color.to_rgba())
    last = str(last_color.to_rgba())
    hue = int(round_half_away(color.h))

    palette_track = (
        f"linear-gradient(to top, {RGBA(0, 0, 0, color.a)}, transparent), "
        f"linear-gradient(to left, {HSLA(hue, 100, 50, color.a)}, "
        f"{RGBA(255, 255, 255, color.a)})"
    )

    return PreviewStyles(
        current=current,
        palette_track=palette_track,
        hue_handle=f"hsl({hue}, 100%, 50%)",
        opacity_handle=str(RGBA(0, 0, 0, color.a)),
        last=last,
        button=CLEARED_BACKGROUND if cleared else last,
    )
