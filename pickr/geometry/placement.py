# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""
Viewport-aware popup placement.

The popup is laid out relative to its anchor button. The result is an
offset from the popup's default anchored position:

    below (default)          above (flipped)
    ┌────────┐               ┌──────────────┐
    │ anchor │               │    popup     │
    └────────┘               └──────────────┘
       5px gap                   5px gap
    ┌──────────────┐         ┌────────┐
    │    popup     │         │ anchor │
    └──────────────┘         └────────┘

Horizontal alignment (popup edge relative to the anchor):

    left    popup's right edge meets the anchor's right edge
    middle  popup centred on the anchor
    right   popup's left edge meets the anchor's left edge

Containment is best effort: an alignment that would push the popup past
the left viewport edge falls back to ``right``, one that would push it past
the right edge falls back to ``left``. A popup wider than the room on both
sides of its anchor can still overflow.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


logger = logging.getLogger(__name__)


# Gap between anchor and popup, in pixels
POPUP_GAP = 5.0


class Alignment(Enum):
    """Requested horizontal alignment of the popup."""
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Union[str, Alignment]) -> Alignment:
        """Accept an Alignment or its option string (``"middle"``)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Alignment must be one of left/middle/right, got {value!r}"
            ) from None


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Axis-aligned rectangle in viewport coordinates.

    Attributes:
        left: Distance from the viewport's left edge
        top: Distance from the viewport's top edge
        width: Width in pixels
        height: Height in pixels
    """
    left: float
    top: float
    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate the rectangle has a non-negative size."""
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect size cannot be negative, got {self.width}x{self.height}"
            )

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True, slots=True)
class Viewport:
    """Visible window size in pixels."""
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Placement:
    """
    Popup offset relative to its default anchored position.

    Attributes:
        top: Vertical offset in pixels
        left: Horizontal offset in pixels
        alignment: Alignment actually used (may differ from the requested one)
        margin: (left, top) margin moving the popup origin onto the anchor;
            only set when the popup is appended to the document root
    """
    top: float = 0.0
    left: float = 0.0
    alignment: Alignment = Alignment.RIGHT
    margin: Optional[tuple[float, float]] = None


def horizontal_offset(alignment: Alignment, anchor: Rect, popup: Rect) -> float:
    """Candidate left offset for an alignment."""
    if alignment == Alignment.LEFT:
        return -popup.width + anchor.width
    elif alignment == Alignment.MIDDLE:
        return -popup.width / 2 + anchor.width / 2
    else:
        return 0.0


def compute_placement(
    anchor: Rect,
    popup: Rect,
    viewport: Viewport,
    alignment: Alignment = Alignment.MIDDLE,
    current: Optional[Placement] = None,
    append_to_root: bool = False,
) -> Placement:
    """
    Place the popup so it stays inside the viewport where possible.

    Args:
        anchor: Anchor button rectangle
        popup: Popup rectangle, measured while rendered at ``current``
        viewport: Visible window size
        alignment: Requested horizontal alignment
        current: Offset the popup is currently rendered at (default: none)
        append_to_root: Popup lives at the document root and must be
            moved onto the anchor with a margin

    Returns:
        Placement with the new offsets

    Vertical rule: flip above the anchor when the popup overflows the
    bottom edge; otherwise sit below the anchor if it fits there; if
    neither holds, keep the current vertical offset.

    With ``append_to_root`` the popup is judged where the margin puts it
    (on the anchor), whatever position it was measured at.
    """
    if current is None:
        current = Placement()

    if append_to_root:
        popup = Rect(
            anchor.left + current.left,
            anchor.top + current.top,
            popup.width,
            popup.height,
        )

    if popup.bottom > viewport.height:
        top = -popup.height - POPUP_GAP
    elif anchor.bottom + popup.height < viewport.height:
        top = anchor.height + POPUP_GAP
    else:
        top = current.top

    # Where the popup's left edge would be with a zero offset
    origin = popup.left - current.left

    effective = alignment
    left = horizontal_offset(alignment, anchor, popup)
    if origin + left < 0:
        effective = Alignment.RIGHT
    elif origin + left + popup.width > viewport.width:
        effective = Alignment.LEFT

    if effective != alignment:
        logger.debug(
            f"Popup alignment {alignment.value} overflows the viewport, "
            f"using {effective.value}"
        )
        left = horizontal_offset(effective, anchor, popup)

    margin = (anchor.left, anchor.top) if append_to_root else None
    return Placement(top=top, left=left, alignment=effective, margin=margin)
