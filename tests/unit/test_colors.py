"""Tests for themegen.core.colors hex color math."""

from __future__ import annotations

import pytest

from themegen.core import colors
from themegen.core.errors import InvalidColorFormat


class TestParse:
    def test_six_digit(self):
        assert colors.parse("#4682B4") == (0x46, 0x82, 0xB4)

    def test_three_digit_expands(self):
        assert colors.parse("#F00") == (255, 0, 0)

    def test_hash_optional(self):
        assert colors.parse("4682b4") == (0x46, 0x82, 0xB4)

    @pytest.mark.parametrize("value", ["#12345", "#GG0000", "", "#80FF5722"])
    def test_rejects(self, value):
        with pytest.raises(InvalidColorFormat):
            colors.parse(value)


class TestIsValidHex:
    @pytest.mark.parametrize("value", ["#F00", "#ff5722", "#80FF5722"])
    def test_accepts(self, value):
        assert colors.is_valid_hex(value)

    @pytest.mark.parametrize("value", ["F00", "#12345", "#GGG", "{color.primary}", "red"])
    def test_rejects(self, value):
        assert not colors.is_valid_hex(value)


class TestNormalize:
    def test_expands_and_uppercases(self):
        assert colors.normalize("#f0a") == "#FF00AA"

    def test_keeps_eight_digits(self):
        assert colors.normalize("#80ff5722") == "#80FF5722"


class TestTokenReference:
    def test_dotted_reference(self):
        assert colors.is_token_reference("{color.primary}")
        assert colors.is_token_reference("{spacing.small}")

    def test_not_a_reference(self):
        assert not colors.is_token_reference("{primary}")
        assert not colors.is_token_reference("#FF5722")


class TestToArgbInt:
    def test_opaque(self):
        assert colors.to_argb_int("#FF5722") == 0xFFFF5722

    def test_short_form(self):
        assert colors.to_argb_int("#FFF") == 0xFFFFFFFF

    def test_with_alpha(self):
        assert colors.to_argb_int("#80FF5722") == 0x80FF5722

    def test_rejects_reference(self):
        with pytest.raises(InvalidColorFormat):
            colors.to_argb_int("{color.primary}")


class TestTransforms:
    def test_zero_amount_is_identity(self):
        rgb = colors.parse("#4682B4")
        assert colors.lighten(rgb, 0) == "#4682B4"
        assert colors.darken(rgb, 0) == "#4682B4"

    def test_lighten(self):
        assert colors.lighten(colors.parse("#4682B4"), 0.2) == "#6B9BC3"

    def test_lighten_full_is_white(self):
        assert colors.lighten(colors.parse("#4682B4"), 1) == "#FFFFFF"

    def test_darken(self):
        assert colors.darken(colors.parse("#FF5722"), 0.5) == "#7F2B11"

    def test_darken_full_is_black(self):
        assert colors.darken(colors.parse("#4682B4"), 1) == "#000000"

    def test_alpha(self):
        assert colors.apply_alpha(colors.parse("#FF5722"), 0.5) == "#80FF5722"

    def test_alpha_bounds(self):
        rgb = colors.parse("#FF5722")
        assert colors.apply_alpha(rgb, 0) == "#00FF5722"
        assert colors.apply_alpha(rgb, 1) == "#FFFF5722"

    def test_mix_with_self(self):
        assert colors.mix(colors.parse("#4682B4"), "#4682B4", 0.37) == "#4682B4"

    def test_mix_halfway(self):
        assert colors.mix(colors.parse("#000000"), "#FFFFFF", 0.5) == "#7F7F7F"

    def test_mix_ratio_clamped(self):
        assert colors.mix(colors.parse("#000000"), "#FFFFFF", 2.0) == "#FFFFFF"

    def test_mix_invalid_other(self):
        with pytest.raises(InvalidColorFormat):
            colors.mix(colors.parse("#000000"), "nope", 0.5)
