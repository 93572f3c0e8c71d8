# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""
Collaborator interfaces of the picker, with headless implementations.

The controller only talks to these seams:

- DragControl: a handle inside a track (palette, hue slider, opacity slider)
- FormatSelector: single-select list of result formats
- PopupSurface: whatever actually draws the popup (DOM, Qt, a test double)

Each control has exactly one callback slot, owned by the controller.
The headless classes keep all state in memory so the picker runs without
any UI toolkit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, Sequence, runtime_checkable

from pickr.color.hsva import OutputFormat
from pickr.geometry.mapping import TrackSize
from pickr.geometry.placement import Placement, Rect, Viewport
from pickr.picker.styles import PreviewStyles


MoveCallback = Callable[[float, float], None]
SelectCallback = Callable[[OutputFormat], None]


# =============================================================================
# Drag Controls
# =============================================================================


@runtime_checkable
class DragControl(Protocol):
    """Protocol for a draggable handle inside a track."""

    on_move: Optional[MoveCallback]

    def track(self) -> TrackSize:
        """Current track size, read fresh on every call."""
        ...

    @property
    def position(self) -> tuple[float, float]:
        """Current handle position inside the track."""
        ...

    def update(self, x: float, y: float) -> None:
        """Reposition programmatically; must not invoke ``on_move``."""
        ...

    def destroy(self) -> None:
        """Release listeners; no callbacks fire afterwards."""
        ...


class Moveable:
    """
    Headless drag control.

    ``move_to`` is the user path (clamp, then notify); ``update`` is the
    programmatic path (clamp, no notification).
    """

    def __init__(
        self,
        track: TrackSize,
        *,
        lock_x: bool = False,
        on_move: Optional[MoveCallback] = None,
    ) -> None:
        self._track = track
        self.lock_x = lock_x
        self.on_move = on_move
        self._x = 0.0
        self._y = 0.0
        self._destroyed = False

    def track(self) -> TrackSize:
        return self._track

    def resize(self, track: TrackSize) -> None:
        """Change the track size; the handle is clamped into the new track."""
        self._track = track
        self._x, self._y = self._clamp(self._x, self._y)

    @property
    def position(self) -> tuple[float, float]:
        return self._x, self._y

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def _clamp(self, x: float, y: float) -> tuple[float, float]:
        x = min(max(x, 0.0), self._track.width)
        y = min(max(y, 0.0), self._track.height)
        return x, y

    def move_to(self, x: float, y: float) -> None:
        """Pointer moved the handle to (x, y)."""
        if self._destroyed:
            return
        if self.lock_x:
            x = self._x
        self._x, self._y = self._clamp(x, y)
        self.trigger()

    def trigger(self) -> None:
        """Re-emit the current position to ``on_move``."""
        if self.on_move is not None and not self._destroyed:
            self.on_move(self._x, self._y)

    def update(self, x: float, y: float) -> None:
        if self.lock_x:
            x = self._x
        self._x, self._y = self._clamp(x, y)

    def destroy(self) -> None:
        self.on_move = None
        self._destroyed = True


# =============================================================================
# Format Selector
# =============================================================================


class FormatSelector:
    """
    Single-select list of output formats.

    The first format is active initially. ``on_select`` fires only when the
    active format actually changes.
    """

    def __init__(
        self,
        formats: Sequence[OutputFormat],
        on_select: Optional[SelectCallback] = None,
    ) -> None:
        if not formats:
            raise ValueError("FormatSelector needs at least one format")
        self._formats = tuple(formats)
        self._active = self._formats[0]
        self.on_select = on_select
        self._destroyed = False

    @property
    def formats(self) -> tuple[OutputFormat, ...]:
        return self._formats

    @property
    def active(self) -> OutputFormat:
        return self._active

    def select(self, fmt: OutputFormat) -> None:
        if fmt not in self._formats:
            raise ValueError(
                f"Format {fmt.value} is not enabled "
                f"(enabled: {', '.join(f.value for f in self._formats)})"
            )
        if fmt == self._active:
            return
        self._active = fmt
        if self.on_select is not None and not self._destroyed:
            self.on_select(fmt)

    def destroy(self) -> None:
        self.on_select = None
        self._destroyed = True


# =============================================================================
# Popup Surface
# =============================================================================


@runtime_checkable
class PopupSurface(Protocol):
    """Protocol for the layer that renders the popup and its anchor."""

    def anchor_rect(self) -> Rect:
        """Anchor button rectangle in viewport coordinates."""
        ...

    def popup_rect(self) -> Rect:
        """Popup rectangle as currently rendered."""
        ...

    def viewport(self) -> Viewport:
        ...

    def apply_placement(self, placement: Placement) -> None:
        ...

    def set_visible(self, visible: bool) -> None:
        ...

    def set_swatches(self, styles: PreviewStyles) -> None:
        ...

    def set_output_text(self, text: str) -> None:
        ...

    def remove(self) -> None:
        """Detach the picker from the host page."""
        ...


@dataclass
class HeadlessSurface:
    """
    In-memory popup surface.

    The popup rectangle follows the applied placement, so measuring after
    a placement behaves like a rendered popup would.

    Attributes:
        anchor: Anchor button rectangle
        popup_size: (width, height) of the popup
        viewport_size: Visible window size
        append_to_root: Popup origin comes from the placement margin
            instead of the anchor position
    """
    anchor: Rect = field(default_factory=lambda: Rect(0.0, 0.0, 40.0, 30.0))
    popup_size: tuple[float, float] = (250.0, 300.0)
    viewport_size: Viewport = field(default_factory=lambda: Viewport(1024.0, 768.0))
    append_to_root: bool = False
    placement: Placement = field(default_factory=Placement)
    visible: bool = False
    swatches: Optional[PreviewStyles] = None
    output_text: str = ""
    removed: bool = False

    def anchor_rect(self) -> Rect:
        return self.anchor

    def popup_rect(self) -> Rect:
        if self.append_to_root:
            origin_left, origin_top = self.placement.margin or (0.0, 0.0)
        else:
            origin_left, origin_top = self.anchor.left, self.anchor.top
        width, height = self.popup_size
        return Rect(
            origin_left + self.placement.left,
            origin_top + self.placement.top,
            width,
            height,
        )

    def viewport(self) -> Viewport:
        return self.viewport_size

    def apply_placement(self, placement: Placement) -> None:
        self.placement = placement

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def set_swatches(self, styles: PreviewStyles) -> None:
        self.swatches = styles

    def set_output_text(self, text: str) -> None:
        self.output_text = text

    def remove(self) -> None:
        self.removed = True
