# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""
Picker configuration.

``PickerOptions`` is fully populated and immutable. ``apply_defaults`` is
the single place where host-supplied settings are merged over the
defaults, so the controller never has to ask "was this option set?".
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from pickr.color.hsva import HSVaColor, OutputFormat
from pickr.color.parse import parse_to_hsva
from pickr.geometry.mapping import TrackSize
from pickr.geometry.placement import Alignment

if TYPE_CHECKING:
    from pickr.picker.controller import PickerController


ChangeCallback = Callable[[HSVaColor, "PickerController"], None]
SaveCallback = Callable[[Optional[HSVaColor], "PickerController"], None]


def _ignore(*_args: Any) -> None:
    """Default host callback."""
    return None


@dataclass(frozen=True, slots=True)
class PickerOptions:
    """
    Settings for one picker instance.

    Attributes:
        anchor: Host handle of the anchor element, passed through untouched
        default_color: Initial color, any text the parser accepts
        alignment: Requested horizontal popup alignment
        always_visible: Popup is always shown (inline picker)
        append_to_root: Popup lives at the document root, not beside the anchor
        on_change: Called with (color, picker) after every color change
        on_save: Called with (color, picker) on save, (None, picker) on clear
        hue: Hue slider enabled
        opacity: Opacity slider enabled
        output_formats: Result formats offered; the first one is active
        palette_size: Saturation/value track size for headless controls
        slider_size: Hue/opacity track size for headless controls
    """
    anchor: Any = None
    default_color: str = "fff"
    alignment: Alignment = Alignment.MIDDLE
    always_visible: bool = False
    append_to_root: bool = False
    on_change: ChangeCallback = _ignore
    on_save: SaveCallback = _ignore
    hue: bool = True
    opacity: bool = True
    output_formats: tuple[OutputFormat, ...] = tuple(OutputFormat)
    palette_size: TrackSize = TrackSize(160.0, 160.0)
    slider_size: TrackSize = TrackSize(8.0, 160.0)

    def __post_init__(self) -> None:
        """Validate settings that cannot be fixed up later."""
        if parse_to_hsva(self.default_color) is None:
            raise ValueError(f"default_color is not a color: {self.default_color!r}")
        if not isinstance(self.alignment, Alignment):
            raise ValueError(f"alignment must be an Alignment, got {self.alignment!r}")
        if not self.output_formats:
            raise ValueError("output_formats cannot be empty")
        if len(set(self.output_formats)) != len(self.output_formats):
            raise ValueError("output_formats cannot contain duplicates")


_FIELD_NAMES = frozenset(f.name for f in fields(PickerOptions))

# Host-facing camelCase names
_ALIASES = {
    "anchorElement": "anchor",
    "defaultColor": "default_color",
    "alwaysVisible": "always_visible",
    "appendToDocumentRoot": "append_to_root",
    "onChange": "on_change",
    "onSave": "on_save",
    "outputFormats": "output_formats",
    "paletteSize": "palette_size",
    "sliderSize": "slider_size",
}


def apply_defaults(
    options: Optional[Mapping[str, Any]] = None, **overrides: Any
) -> PickerOptions:
    """
    Merge host settings over the defaults.

    Args:
        options: Settings by field name or camelCase alias
        **overrides: Settings by field name, applied after ``options``

    Returns:
        Fully populated PickerOptions

    Raises:
        ValueError: Unknown option names or invalid values

    Example:
        >>> opts = apply_defaults({"defaultColor": "#42445A"}, alignment="left")
        >>> opts.alignment
        <Alignment.LEFT: 'left'>
    """
    merged: dict[str, Any] = {}
    for key, value in {**(options or {}), **overrides}.items():
        merged[_ALIASES.get(key, key)] = value

    unknown = set(merged) - _FIELD_NAMES
    if unknown:
        raise ValueError(f"Unknown picker options: {', '.join(sorted(unknown))}")

    if "alignment" in merged:
        merged["alignment"] = Alignment.parse(merged["alignment"])

    if "output_formats" in merged:
        merged["output_formats"] = tuple(
            fmt if isinstance(fmt, OutputFormat) else OutputFormat.from_label(fmt)
            for fmt in merged["output_formats"]
        )

    for key in ("palette_size", "slider_size"):
        if key in merged and not isinstance(merged[key], TrackSize):
            merged[key] = TrackSize(*merged[key])

    for key in ("on_change", "on_save"):
        if key in merged and merged[key] is None:
            merged[key] = _ignore

    return PickerOptions(**merged)
