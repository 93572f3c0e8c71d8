# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""
HSVaColor -- the canonical color value of the picker.

Design principles:
- Immutable: a frozen dataclass, replaced on every edit, never mutated
- Full precision: fields keep whatever the last edit produced; rounding
  happens only when a textual form is produced
- Derived, not cached: RGB / HEX / HSL / CMYK are computed on demand

Output formats:
    HEX   #RRGGBB              (always opaque, alpha is not encoded)
    RGBa  rgba(r, g, b, a)
    HSLa  hsla(h, s%, l%, a)
    HSVa  hsva(h, s%, v%, a)
    CMYK  cmyk(c%, m%, y%, k%) (alpha has no CMYK representation)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Callable, NamedTuple, Optional

from pickr.color.colorspace import (
    hsv_to_hsl,
    hsv_to_rgb,
    rgb_to_cmyk,
    rgb_to_hsv,
    round_half_away,
)


# =============================================================================
# Formatting Helpers
# =============================================================================


_HUNDREDTH = Decimal("0.01")


def _whole(value: float) -> int:
    """Round a degree / percent / channel value for display."""
    return int(round_half_away(value))


def _format_alpha(alpha: float) -> str:
    """Format alpha with at most two decimals and no trailing zeros."""
    # Rounded on the shortest decimal form, 0.145 -> 0.15
    rounded = Decimal(repr(float(alpha))).quantize(_HUNDREDTH, rounding=ROUND_HALF_UP)
    return f"{rounded:f}".rstrip("0").rstrip(".")


# =============================================================================
# Textual Projections
# =============================================================================


class RGBA(NamedTuple):
    """RGB channels (integers 0-255) plus alpha."""
    r: int
    g: int
    b: int
    a: float

    def __str__(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {_format_alpha(self.a)})"


class HSLA(NamedTuple):
    """Hue (degrees), saturation and lightness (percent) plus alpha."""
    h: float
    s: float
    l: float
    a: float

    def __str__(self) -> str:
        return (
            f"hsla({_whole(self.h)}, {_whole(self.s)}%, {_whole(self.l)}%, "
            f"{_format_alpha(self.a)})"
        )


class HSVA(NamedTuple):
    """Hue (degrees), saturation and value (percent) plus alpha."""
    h: float
    s: float
    v: float
    a: float

    def __str__(self) -> str:
        return (
            f"hsva({_whole(self.h)}, {_whole(self.s)}%, {_whole(self.v)}%, "
            f"{_format_alpha(self.a)})"
        )


class CMYK(NamedTuple):
    """Cyan, magenta, yellow and key, all in percent."""
    c: float
    m: float
    y: float
    k: float

    def __str__(self) -> str:
        return (
            f"cmyk({_whole(self.c)}%, {_whole(self.m)}%, "
            f"{_whole(self.y)}%, {_whole(self.k)}%)"
        )


class OutputFormat(Enum):
    """Result formats offered by the picker (values are the button labels)."""
    HEX = "HEX"
    RGBA = "RGBa"
    HSLA = "HSLa"
    HSVA = "HSVa"
    CMYK = "CMYK"

    @classmethod
    def from_label(cls, label: str) -> OutputFormat:
        """Look up a format by label, ignoring case (``"rgba"`` -> RGBA)."""
        for fmt in cls:
            if fmt.value.lower() == label.strip().lower():
                return fmt
        raise ValueError(f"Unknown output format: {label!r}")


# =============================================================================
# Core Color Type
# =============================================================================


def is_valid_hsva(h: float, s: float, v: float, a: float) -> bool:
    """
    True if every component lies in its domain.

    NaN and infinities fail the range comparisons; values that cannot be
    compared with numbers at all are rejected as well.
    """
    try:
        return (
            0.0 <= h <= 360.0
            and 0.0 <= s <= 100.0
            and 0.0 <= v <= 100.0
            and 0.0 <= a <= 1.0
        )
    except TypeError:
        return False


@dataclass(frozen=True, slots=True)
class HSVaColor:
    """
    A single color in HSV space with an alpha channel.

    Attributes:
        h: Hue in degrees (0-360; 0 and 360 are the same red)
        s: Saturation in percent (0 = gray, 100 = fully saturated)
        v: Value / brightness in percent (0 = black)
        a: Alpha (0 = transparent, 1 = opaque)
    """
    h: float = 0.0
    s: float = 0.0
    v: float = 0.0
    a: float = 1.0

    def __post_init__(self) -> None:
        """Validate components are within their domains."""
        if not 0.0 <= self.h <= 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.h}")
        if not 0.0 <= self.s <= 100.0:
            raise ValueError(f"Saturation must be 0-100, got {self.s}")
        if not 0.0 <= self.v <= 100.0:
            raise ValueError(f"Value must be 0-100, got {self.v}")
        if not 0.0 <= self.a <= 1.0:
            raise ValueError(f"Alpha must be 0-1, got {self.a}")

    @classmethod
    def from_hsva(
        cls, h: float, s: float, v: float, a: float = 1.0
    ) -> Optional[HSVaColor]:
        """
        Checked construction.

        Returns None instead of raising when any component is outside its
        domain, so callers can treat rejected input as a no-op.
        """
        if not is_valid_hsva(h, s, v, a):
            return None
        return cls(h=float(h), s=float(s), v=float(v), a=float(a))

    @classmethod
    def from_rgba(
        cls, r: float, g: float, b: float, a: float = 1.0
    ) -> Optional[HSVaColor]:
        """Checked construction from RGB channels (0-255) and alpha (0-1)."""
        try:
            in_range = all(0.0 <= c <= 255.0 for c in (r, g, b)) and 0.0 <= a <= 1.0
        except TypeError:
            return None
        if not in_range:
            return None
        h, s, v = (float(x) for x in rgb_to_hsv([r, g, b]))
        return cls.from_hsva(h, s, v, a)

    def to_rgba(self) -> RGBA:
        """RGB channels rounded to integers, alpha passed through."""
        r, g, b = (int(c) for c in round_half_away(hsv_to_rgb([self.h, self.s, self.v])))
        return RGBA(r, g, b, self.a)

    def to_hex(self) -> str:
        """
        Hex string like ``#3941C8``.

        Alpha is intentionally not encoded; HEX is the opaque display form.
        """
        r, g, b, _ = self.to_rgba()
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_hsla(self) -> HSLA:
        h, s, l = (float(x) for x in hsv_to_hsl([self.h, self.s, self.v]))
        return HSLA(h, s, l, self.a)

    def to_hsva(self) -> HSVA:
        """Full-precision components; ``HSVaColor(*c.to_hsva()) == c``."""
        return HSVA(self.h, self.s, self.v, self.a)

    def to_cmyk(self) -> CMYK:
        """CMYK derived from the displayed (rounded) RGB channels."""
        r, g, b, _ = self.to_rgba()
        c, m, y, k = (float(x) for x in rgb_to_cmyk([r, g, b]))
        return CMYK(c, m, y, k)

    def format(self, fmt: OutputFormat) -> str:
        """Render the color in the given output format."""
        return FORMATTERS[fmt](self)

    def clone(self) -> HSVaColor:
        """Structurally independent copy."""
        return replace(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "v": self.v, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict) -> HSVaColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], v=data["v"], a=data.get("a", 1.0))


FORMATTERS: dict[OutputFormat, Callable[[HSVaColor], str]] = {
    OutputFormat.HEX: lambda color: color.to_hex(),
    OutputFormat.RGBA: lambda color: str(color.to_rgba()),
    OutputFormat.HSLA: lambda color: str(color.to_hsla()),
    OutputFormat.HSVA: lambda color: str(color.to_hsva()),
    OutputFormat.CMYK: lambda color: str(color.to_cmyk()),
}
