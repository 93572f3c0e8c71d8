# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""Tests for HSVaColor and its textual projections."""

import pytest

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
from pickr.color.parse import parse_to_color


class TestDomain:

    def test_valid_color(self):
        c = HSVaColor(h=200.0, s=50.0, v=75.0, a=0.5)
        assert (c.h, c.s, c.v, c.a) == (200.0, 50.0, 75.0, 0.5)

    def test_default_is_opaque_black(self):
        assert HSVaColor() == HSVaColor(0.0, 0.0, 0.0, 1.0)

    @pytest.mark.parametrize("h, s, v, a", [
        (-1, 0, 0, 1),
        (0, 101, 0, 1),
        (0, 0, 0, 1.5),
        (361, 0, 0, 1),
        (0, 0, -0.01, 1),
        (0, 0, 0, -0.1),
    ])
    def test_from_hsva_rejects_out_of_domain(self, h, s, v, a):
        assert HSVaColor.from_hsva(h, s, v, a) is None
        assert not is_valid_hsva(h, s, v, a)

    def test_from_hsva_accepts_upper_bounds(self):
        c = HSVaColor.from_hsva(360, 100, 100, 1)
        assert c == HSVaColor(360.0, 100.0, 100.0, 1.0)

    def test_from_hsva_rejects_nan_and_infinity(self):
        assert HSVaColor.from_hsva(float("nan"), 0, 0, 1) is None
        assert HSVaColor.from_hsva(0, float("inf"), 0, 1) is None

    def test_from_hsva_rejects_non_numbers(self):
        assert HSVaColor.from_hsva("red", 0, 0, 1) is None

    def test_direct_construction_raises(self):
        with pytest.raises(ValueError, match="Hue"):
            HSVaColor(h=400.0)
        with pytest.raises(ValueError, match="Saturation"):
            HSVaColor(s=-1.0)
        with pytest.raises(ValueError, match="Value"):
            HSVaColor(v=100.5)
        with pytest.raises(ValueError, match="Alpha"):
            HSVaColor(a=2.0)

    def test_frozen(self):
        c = HSVaColor(10.0, 20.0, 30.0, 1.0)
        with pytest.raises(AttributeError):
            c.h = 50.0


class TestRGBA:

    def test_hsla_example(self):
        # hsla(120, 50%, 50%, 0.5) in HSV
        c = HSVaColor(120.0, 200 / 3, 75.0, 0.5)
        assert c.to_rgba() == RGBA(64, 191, 64, 0.5)
        assert str(c.to_rgba()) == "rgba(64, 191, 64, 0.5)"

    def test_channels_are_ints(self):
        r, g, b, _ = HSVaColor(33.3, 44.4, 55.5, 1.0).to_rgba()
        assert all(isinstance(ch, int) for ch in (r, g, b))

    def test_alpha_formatting(self):
        assert str(HSVaColor(a=1.0).to_rgba()) == "rgba(0, 0, 0, 1)"
        assert str(HSVaColor(a=0.0).to_rgba()) == "rgba(0, 0, 0, 0)"
        assert str(HSVaColor(a=0.333).to_rgba()) == "rgba(0, 0, 0, 0.33)"
        assert str(HSVaColor(a=0.125).to_rgba()) == "rgba(0, 0, 0, 0.13)"

    @pytest.mark.parametrize("alpha, text", [
        (0.145, "0.15"),
        (0.285, "0.29"),
        (0.575, "0.58"),
        (0.005, "0.01"),
        (0.004, "0"),
        (0.5, "0.5"),
    ])
    def test_alpha_halves_round_up(self, alpha, text):
        assert str(HSVaColor(a=alpha).to_rgba()) == f"rgba(0, 0, 0, {text})"

    def test_typed_alpha_keeps_its_rounding(self):
        color = parse_to_color("rgba(0, 0, 0, 0.145)")
        assert str(color.to_rgba()) == "rgba(0, 0, 0, 0.15)"

    def test_white(self):
        assert HSVaColor(0.0, 0.0, 100.0).to_rgba() == RGBA(255, 255, 255, 1.0)


class TestHex:

    def test_uppercase_six_digits(self):
        assert HSVaColor(240.0, 95.0, 200 / 2.55).to_hex() == "#0A0AC8"

    def test_white(self):
        assert HSVaColor(0.0, 0.0, 100.0).to_hex() == "#FFFFFF"

    def test_alpha_is_not_encoded(self):
        opaque = HSVaColor(0.0, 100.0, 100.0, 1.0)
        translucent = HSVaColor(0.0, 100.0, 100.0, 0.2)
        assert opaque.to_hex() == translucent.to_hex() == "#FF0000"


class TestOtherFormats:

    def test_hsla(self):
        hsla = HSVaColor(120.0, 200 / 3, 75.0, 0.5).to_hsla()
        assert hsla.h == pytest.approx(120.0)
        assert hsla.s == pytest.approx(50.0)
        assert hsla.l == pytest.approx(50.0)
        assert str(hsla) == "hsla(120, 50%, 50%, 0.5)"

    def test_hsva_is_full_precision(self):
        c = HSVaColor(12.345, 67.891, 23.456, 0.789)
        assert c.to_hsva() == HSVA(12.345, 67.891, 23.456, 0.789)
        assert HSVaColor(*c.to_hsva()) == c

    def test_hsva_text_rounds_half_away(self):
        assert str(HSVaColor(10.5, 20.5, 30.4, 1.0).to_hsva()) == "hsva(11, 21%, 30%, 1)"

    def test_cmyk(self):
        cmyk = HSVaColor(0.0, 100.0, 100.0, 0.3).to_cmyk()
        assert cmyk == CMYK(0.0, 100.0, 100.0, 0.0)
        assert str(cmyk) == "cmyk(0%, 100%, 100%, 0%)"

    def test_cmyk_black(self):
        assert str(HSVaColor().to_cmyk()) == "cmyk(0%, 0%, 0%, 100%)"

    def test_hsla_string_for_gray(self):
        assert str(HSLA(0.0, 0.0, 50.0, 1.0)) == "hsla(0, 0%, 50%, 1)"


class TestFormatTable:

    def test_every_format_has_a_formatter(self):
        assert set(FORMATTERS) == set(OutputFormat)

    def test_format_dispatch(self):
        c = HSVaColor(120.0, 200 / 3, 75.0, 0.5)
        assert c.format(OutputFormat.HEX) == "#40BF40"
        assert c.format(OutputFormat.RGBA) == "rgba(64, 191, 64, 0.5)"
        assert c.format(OutputFormat.HSLA) == "hsla(120, 50%, 50%, 0.5)"
        assert c.format(OutputFormat.HSVA) == "hsva(120, 67%, 75%, 0.5)"
        assert c.format(OutputFormat.CMYK) == "cmyk(66%, 0%, 66%, 25%)"

    def test_from_label(self):
        assert OutputFormat.from_label("rgba") is OutputFormat.RGBA
        assert OutputFormat.from_label(" HSLa ") is OutputFormat.HSLA
        with pytest.raises(ValueError, match="Unknown output format"):
            OutputFormat.from_label("lab")


class TestFromRGBA:

    def test_known_color(self):
        c = HSVaColor.from_rgba(10, 10, 200)
        assert c.h == pytest.approx(240.0)
        assert c.s == pytest.approx(95.0)
        assert c.a == 1.0

    def test_rejects_out_of_range(self):
        assert HSVaColor.from_rgba(256, 0, 0) is None
        assert HSVaColor.from_rgba(0, 0, 0, 1.2) is None

    def test_roundtrip_channels(self):
        assert HSVaColor.from_rgba(12, 34, 56, 0.4).to_rgba() == RGBA(12, 34, 56, 0.4)


class TestCloneAndSerialization:

    def test_clone_is_equal_and_independent(self):
        c = HSVaColor(1.0, 2.0, 3.0, 0.4)
        copy = c.clone()
        assert copy == c
        assert copy is not c

    def test_to_dict_roundtrip(self):
        c = HSVaColor(100.0, 20.0, 30.0, 0.6)
        assert HSVaColor.from_dict(c.to_dict()) == c

    def test_from_dict_defaults_alpha(self):
        assert HSVaColor.from_dict({"h": 0, "s": 0, "v": 0}).a == 1.0

    def test_hashable(self):
        assert len({HSVaColor(1.0), HSVaColor(1.0), HSVaColor(2.0)}) == 2
