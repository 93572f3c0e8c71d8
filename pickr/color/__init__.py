# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""
Color model for Pickr.

HSVaColor is the canonical value; every textual format is a projection
of it, and the parser is the way back from text.
"""

from pickr.color.hsva import (
    CMYK,
    FORMATTERS,
    HSLA,
    HSVA,
    RGBA,
    HSVaColor,
    OutputFormat,
    is_valid_hsva,
)
from pickr.color.parse import parse_to_color, parse_to_hsva

__all__ = [
    "HSVaColor",
    "is_valid_hsva",
    # Textual projections
    "RGBA",
    "HSLA",
    "HSVA",
    "CMYK",
    "OutputFormat",
    "FORMATTERS",
    # Parsing
    "parse_to_hsva",
    "parse_to_color",
]
