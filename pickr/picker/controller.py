# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""
PickerController -- owner of the picker's color state.

The controller is the only writer of the working color and the last-saved
color. Controls report raw handle positions, the result field reports
typed text; both are turned into a new HSVaColor here, and every dependent
view (handle positions, swatches, output text) is derived from it again.

State facets:
    visibility       hidden | visible
    input authority  PROGRAM | USER_TEXT

While authority is USER_TEXT the output text is left alone, so a color
the user is typing is not reformatted under the cursor. Any drag or a
format switch hands authority back to PROGRAM.

Rejected numbers and unparsable text are ignored (the last good color
stays); the host only hears about successful transitions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional

from pickr.color.hsva import HSVaColor, OutputFormat
from pickr.color.parse import parse_to_color, parse_to_hsva
from pickr.geometry.mapping import (
    ControlPositions,
    control_positions,
    position_to_alpha,
    position_to_hue,
    position_to_saturation_value,
)
from pickr.geometry.placement import Placement, compute_placement
from pickr.picker.controls import (
    DragControl,
    FormatSelector,
    HeadlessSurface,
    Moveable,
    PopupSurface,
)
from pickr.picker.options import PickerOptions, apply_defaults
from pickr.picker.styles import PreviewStyles, preview_styles


logger = logging.getLogger(__name__)


class InputAuthority(Enum):
    """Which source currently governs the output text."""
    PROGRAM = "program"
    USER_TEXT = "user_text"


@dataclass
class PickerComponents:
    """
    Handles of the controls owned by one controller.

    Attributes:
        palette: Saturation/value drag control (2D)
        hue_slider: Hue drag control (x locked)
        opacity_slider: Opacity drag control (x locked)
        formats: Output format selector
    """
    palette: DragControl
    hue_slider: DragControl
    opacity_slider: DragControl
    formats: FormatSelector

    @classmethod
    def headless(cls, options: PickerOptions) -> PickerComponents:
        """In-memory controls sized from the options."""
        return cls(
            palette=Moveable(options.palette_size),
            hue_slider=Moveable(options.slider_size, lock_x=True),
            opacity_slider=Moveable(options.slider_size, lock_x=True),
            formats=FormatSelector(options.output_formats),
        )


class PickerController:
    """
    Color picker state machine.

    Args:
        options: PickerOptions, or a mapping passed through apply_defaults
        surface: Popup renderer (default: HeadlessSurface)
        components: Control handles (default: headless controls)

    Example:
        >>> picker = PickerController({"defaultColor": "#42445A"})
        >>> picker.set_color("hsla(120, 50%, 50%, 0.5)")
        True
        >>> str(picker.get_color().to_rgba())
        'rgba(64, 191, 64, 0.5)'
    """

    def __init__(
        self,
        options: Optional[PickerOptions | Mapping[str, Any]] = None,
        *,
        surface: Optional[PopupSurface] = None,
        components: Optional[PickerComponents] = None,
    ) -> None:
        if not isinstance(options, PickerOptions):
            options = apply_defaults(options)
        self._options = options

        if surface is None:
            surface = HeadlessSurface(append_to_root=options.append_to_root)
        self._surface = surface
        self._components = components or PickerComponents.headless(options)

        self._color = HSVaColor()
        self._last_color = HSVaColor()
        self._authority = InputAuthority.PROGRAM
        self._visible = False
        self._cleared = False
        self._destroyed = False
        self._output_text = ""
        self._placement = Placement()

        self._bind_components()

        if options.always_visible:
            self.show()
        else:
            self.hide()

        # PickerOptions already rejected an unparsable default
        self._color = parse_to_color(options.default_color)
        self._sync_controls()
        self._color_changed()
        self.save()

    def _bind_components(self) -> None:
        comp = self._components
        comp.palette.on_move = self._on_palette_move
        comp.hue_slider.on_move = self._on_hue_move
        comp.opacity_slider.on_move = self._on_opacity_move
        comp.formats.on_select = self._on_format_select

    def _check_alive(self) -> None:
        if self._destroyed:
            raise RuntimeError("Picker has been destroyed")

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def options(self) -> PickerOptions:
        return self._options

    @property
    def components(self) -> PickerComponents:
        return self._components

    @property
    def surface(self) -> PopupSurface:
        return self._surface

    def get_color(self) -> HSVaColor:
        """The working color."""
        return self._color

    @property
    def last_color(self) -> HSVaColor:
        """The most recently saved color."""
        return self._last_color

    @property
    def output_text(self) -> str:
        """Text currently shown in the result field."""
        return self._output_text

    @property
    def output_format(self) -> OutputFormat:
        return self._components.formats.active

    @property
    def authority(self) -> InputAuthority:
        return self._authority

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def cleared(self) -> bool:
        return self._cleared

    @property
    def placement(self) -> Placement:
        return self._placement

    @property
    def positions(self) -> ControlPositions:
        """Handle positions for the working color at the current track sizes."""
        comp = self._components
        return control_positions(
            self._color,
            comp.palette.track(),
            comp.hue_slider.track(),
            comp.opacity_slider.track(),
        )

    @property
    def styles(self) -> PreviewStyles:
        return preview_styles(self._color, self._last_color, self._cleared)

    # =========================================================================
    # Color input
    # =========================================================================

    def set_hsva(self, h: float = 360.0, s: float = 0.0, v: float = 0.0, a: float = 1.0) -> bool:
        """
        Replace the working color.

        Returns:
            False if any component is out of range (nothing changes),
            True otherwise. Setting the color it already has is a no-op
            that fires no notification.
        """
        self._check_alive()
        color = HSVaColor.from_hsva(h, s, v, a)
        if color is None:
            logger.debug(f"Rejected HSVA input: ({h}, {s}, {v}, {a})")
            return False
        if color == self._color:
            return True

        self._color = color
        self._sync_controls()
        self._color_changed()
        return True

    def set_color(self, text: str) -> bool:
        """
        Set the working color from color text (see pickr.color.parse).

        On success input authority becomes USER_TEXT; unparsable text
        changes nothing and returns False.
        """
        self._check_alive()
        parsed = parse_to_hsva(text)
        if parsed is None:
            return False
        accepted = self.set_hsva(*parsed)
        if accepted:
            self._authority = InputAuthority.USER_TEXT
        return accepted

    def input_text(self, text: str) -> bool:
        """
        The user typed into the result field.

        The typed text stays in the field as-is; the color follows it
        whenever the text parses.
        """
        self._check_alive()
        self._authority = InputAuthority.USER_TEXT
        self._output_text = text
        return self.set_color(text)

    def select_format(self, fmt: OutputFormat) -> bool:
        """
        Switch the result field to another enabled format.

        A format that is not enabled changes nothing and returns False.
        """
        self._check_alive()
        formats = self._components.formats
        if fmt not in formats.formats:
            logger.debug(f"Ignored disabled output format {fmt.value}")
            return False
        formats.select(fmt)
        return True

    # =========================================================================
    # Control callbacks
    # =========================================================================

    def _on_palette_move(self, x: float, y: float) -> None:
        s, v = position_to_saturation_value(x, y, self._components.palette.track())
        self._apply_drag(replace(self._color, s=s, v=v))

    def _on_hue_move(self, x: float, y: float) -> None:
        if not self._options.hue:
            return
        h = position_to_hue(y, self._components.hue_slider.track())
        self._apply_drag(replace(self._color, h=h))

    def _on_opacity_move(self, x: float, y: float) -> None:
        if not self._options.opacity:
            return
        a = position_to_alpha(y, self._components.opacity_slider.track())
        self._apply_drag(replace(self._color, a=a))

    def _on_format_select(self, fmt: OutputFormat) -> None:
        self._authority = InputAuthority.PROGRAM
        self._update_output()

    def _apply_drag(self, color: HSVaColor) -> None:
        self._authority = InputAuthority.PROGRAM
        if color == self._color:
            self._update_output()
            return
        self._color = color
        self._color_changed()

    # =========================================================================
    # Derived views
    # =========================================================================

    def _sync_controls(self) -> None:
        """Move every handle to where the working color puts it."""
        comp = self._components
        positions = self.positions
        comp.palette.update(*positions.palette)
        comp.hue_slider.update(0.0, positions.hue)
        comp.opacity_slider.update(0.0, positions.opacity)

    def _update_output(self) -> None:
        if self._authority == InputAuthority.PROGRAM:
            self._output_text = self._color.format(self.output_format)
        self._surface.set_output_text(self._output_text)

    def _refresh_views(self) -> None:
        self._update_output()
        self._surface.set_swatches(self.styles)

    def _color_changed(self) -> None:
        self._refresh_views()
        self._options.on_change(self._color, self)

    # =========================================================================
    # Save / clear
    # =========================================================================

    def save(self) -> None:
        """Commit the working color as the last-saved color."""
        self._check_alive()
        self._last_color = self._color.clone()
        self._cleared = False
        self._surface.set_swatches(self.styles)
        logger.debug(f"Saved color {self._last_color.to_hex()}")
        self._options.on_save(self._color, self)

    def clear(self) -> None:
        """
        Report "no color" to the host.

        The working color is kept; only the anchor shows the cleared state.
        """
        self._check_alive()
        self._cleared = True
        self._surface.set_swatches(self.styles)
        if not self._options.always_visible:
            self.hide()
        logger.debug("Picker cleared")
        self._options.on_save(None, self)

    def revert(self) -> bool:
        """Go back to the last-saved color (the last-color swatch)."""
        return self.set_hsva(*self._last_color.to_hsva())

    # =========================================================================
    # Visibility & placement
    # =========================================================================

    def reposition(self) -> Placement:
        """Recompute the popup placement from fresh geometry."""
        surface = self._surface
        self._placement = compute_placement(
            surface.anchor_rect(),
            surface.popup_rect(),
            surface.viewport(),
            self._options.alignment,
            current=self._placement,
            append_to_root=self._options.append_to_root,
        )
        surface.apply_placement(self._placement)
        return self._placement

    def show(self) -> None:
        self._check_alive()
        self._visible = True
        self._surface.set_visible(True)
        self.reposition()
        logger.debug("Picker shown")

    def hide(self) -> None:
        self._check_alive()
        self._visible = False
        self._surface.set_visible(False)
        logger.debug("Picker hidden")

    def toggle(self) -> None:
        """Anchor button click."""
        if self._options.always_visible:
            return
        if self._visible:
            self.hide()
        else:
            self.show()

    def on_resize(self) -> None:
        """Viewport was resized; tracks may have new sizes too."""
        self._check_alive()
        self._sync_controls()
        self.reposition()

    # =========================================================================
    # Teardown
    # =========================================================================

    def destroy(self) -> None:
        """Release every control; the picker cannot be used afterwards."""
        if self._destroyed:
            return
        comp = self._components
        for control in (comp.palette, comp.hue_slider, comp.opacity_slider, comp.formats):
            control.destroy()
        self._destroyed = True

    def destroy_and_remove(self) -> None:
        """Destroy and detach the picker from the host page."""
        self.destroy()
        self._surface.remove()


def create(options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> PickerController:
    """Build a picker from host settings."""
    return PickerController(apply_defaults(options, **overrides))
