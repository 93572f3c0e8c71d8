# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""
Free-form color text parsing.

Turns whatever a user typed into the result field into HSVA components.
Accepted input (case-insensitive, separators may be commas, spaces, slashes
or any mix, parentheses and a trailing semicolon are optional):

    #f0a  f0a  #ff00aa  #ff00aa80     hex, 3/4/6/8 digits
    rgb 10 10 200   rgba(10, 10, 200, 0.5)
    hsl(120, 50%, 50%)   hsla 120 50 50 .5
    hsv(120, 67%, 75%)   hsva 120 67 75 50%
    cmyk(75%, 0%, 75%, 25%)

Missing alpha defaults to 1. Anything else yields None; the parser never
raises for string input.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

import numpy as np

from pickr.color.colorspace import cmyk_to_rgb, hsl_to_hsv, rgb_to_hsv
from pickr.color.hsva import HSVA, HSVaColor


logger = logging.getLogger(__name__)


# =============================================================================
# Grammar
# =============================================================================

_HEX_RE = re.compile(r"#?([0-9a-f]+)", re.IGNORECASE)
_FUNCTION_RE = re.compile(
    r"(rgba?|hsla?|hsva?|cmyk)\s*\(?(.*?)\)?\s*;?",
    re.IGNORECASE | re.DOTALL,
)
_NUMBER_RE = re.compile(r"([+-]?(?:\d+(?:\.\d*)?|\.\d+))(%?)")
_SEPARATOR_RE = re.compile(r"[\s,/]+")

# (value, written with a percent sign)
Argument = tuple[float, bool]

_HSV_MAX = np.array([360.0, 100.0, 100.0])


def _split_arguments(body: str) -> Optional[list[Argument]]:
    """Split a function body into numeric arguments, or None on stray text."""
    args: list[Argument] = []
    for token in _SEPARATOR_RE.split(body.strip()):
        if not token:
            continue
        m = _NUMBER_RE.fullmatch(token)
        if not m:
            return None
        args.append((float(m.group(1)), bool(m.group(2))))
    return args


def _alpha(args: list[Argument], index: int) -> Optional[float]:
    """Optional alpha argument at ``index``; percent form is scaled to 0-1."""
    if len(args) <= index:
        return 1.0
    value, percent = args[index]
    if percent:
        value /= 100.0
    return value if 0.0 <= value <= 1.0 else None


def _percent(arg: Argument) -> Optional[float]:
    value, _ = arg
    return value if 0.0 <= value <= 100.0 else None


def _hue(arg: Argument) -> Optional[float]:
    value, percent = arg
    if percent:
        return None
    return value if 0.0 <= value <= 360.0 else None


def _to_hsva(hsv: np.ndarray, alpha: float) -> HSVA:
    """Clamp conversion round-off back into the domain."""
    h, s, v = (float(x) for x in np.clip(hsv, 0.0, _HSV_MAX))
    return HSVA(h, s, v, alpha)


# =============================================================================
# Per-grammar Parsers
# =============================================================================


def _parse_hex(digits: str) -> Optional[HSVA]:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) not in (6, 8):
        return None

    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    alpha = channels[3] / 255.0 if len(channels) == 4 else 1.0
    return _to_hsva(rgb_to_hsv(channels[:3]), alpha)


def _parse_rgb(args: list[Argument]) -> Optional[HSVA]:
    if len(args) not in (3, 4):
        return None
    channels = []
    for value, percent in args[:3]:
        if percent:
            value *= 2.55
        if not 0.0 <= value <= 255.0:
            return None
        channels.append(value)
    alpha = _alpha(args, 3)
    if alpha is None:
        return None
    return _to_hsva(rgb_to_hsv(channels), alpha)


def _parse_hsl(args: list[Argument]) -> Optional[HSVA]:
    if len(args) not in (3, 4):
        return None
    h, s, l, alpha = _hue(args[0]), _percent(args[1]), _percent(args[2]), _alpha(args, 3)
    if h is None or s is None or l is None or alpha is None:
        return None
    return _to_hsva(hsl_to_hsv([h, s, l]), alpha)


def _parse_hsv(args: list[Argument]) -> Optional[HSVA]:
    if len(args) not in (3, 4):
        return None
    h, s, v, alpha = _hue(args[0]), _percent(args[1]), _percent(args[2]), _alpha(args, 3)
    if h is None or s is None or v is None or alpha is None:
        return None
    return HSVA(h, s, v, alpha)


def _parse_cmyk(args: list[Argument]) -> Optional[HSVA]:
    if len(args) != 4:
        return None
    cmyk = [_percent(arg) for arg in args]
    if any(c is None for c in cmyk):
        return None
    return _to_hsva(rgb_to_hsv(cmyk_to_rgb(cmyk)), 1.0)


_FUNCTION_PARSERS: dict[str, Callable[[list[Argument]], Optional[HSVA]]] = {
    "rgb": _parse_rgb,
    "rgba": _parse_rgb,
    "hsl": _parse_hsl,
    "hsla": _parse_hsl,
    "hsv": _parse_hsv,
    "hsva": _parse_hsv,
    "cmyk": _parse_cmyk,
}


# =============================================================================
# Public API
# =============================================================================


def parse_to_hsva(text: str) -> Optional[HSVA]:
    """
    Parse color text into HSVA components.

    Args:
        text: User input such as ``"#fff"``, ``"rgb 10 10 200"`` or
            ``"hsla(120, 50%, 50%, 0.5)"``

    Returns:
        HSVA(h°, s%, v%, a) at full precision, or None if the text is not
        a color in one of the supported notations.

    Example:
        >>> parse_to_hsva("#fff")
        HSVA(h=0.0, s=0.0, v=100.0, a=1.0)
    """
    if not isinstance(text, str):
        return None

    stripped = text.strip()

    m = _FUNCTION_RE.fullmatch(stripped)
    if m:
        args = _split_arguments(m.group(2))
        result = _FUNCTION_PARSERS[m.group(1).lower()](args) if args is not None else None
    else:
        m = _HEX_RE.fullmatch(stripped)
        result = _parse_hex(m.group(1)) if m else None

    if result is None:
        logger.debug(f"Rejected color text: {text!r}")
    return result


def parse_to_color(text: str) -> Optional[HSVaColor]:
    """Parse color text straight into an HSVaColor (None if unparsable)."""
    parsed = parse_to_hsva(text)
    if parsed is None:
        return None
    return HSVaColor.from_hsva(*parsed)
