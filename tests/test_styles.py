# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""Tests for the derived swatch backgrounds."""

from pickr.color.hsva import HSVaColor
from pickr.picker.styles import CLEARED_BACKGROUND, preview_styles


class TestPreviewStyles:

    def test_swatches(self):
        color = HSVaColor(h=120.0, s=200 / 3, v=75.0, a=0.5)
        last = HSVaColor(v=100.0)
        styles = preview_styles(color, last)
        assert styles.current == "rgba(64, 191, 64, 0.5)"
        assert styles.last == "rgba(255, 255, 255, 1)"
        assert styles.button == styles.last
        assert styles.hue_handle == "hsl(120, 100%, 50%)"
        assert styles.opacity_handle == "rgba(0, 0, 0, 0.5)"

    def test_palette_track_gradient(self):
        styles = preview_styles(HSVaColor(h=200.0, a=0.25), HSVaColor())
        assert styles.palette_track == (
            "linear-gradient(to top, rgba(0, 0, 0, 0.25), transparent), "
            "linear-gradient(to left, hsla(200, 100%, 50%, 0.25), "
            "rgba(255, 255, 255, 0.25))"
        )

    def test_cleared_button(self):
        styles = preview_styles(HSVaColor(), HSVaColor(), cleared=True)
        assert styles.button == CLEARED_BACKGROUND
