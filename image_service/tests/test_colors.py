"""Tests for color parsing and palette interpolation."""

import pytest

from image_service.services.colors import (
    Color,
    interpolate,
    lighten,
    parse_color,
    parse_palette,
    resolve_color,
    section_color,
)
from image_service.services.errors import InvalidColor

from conftest import BLUE, GREEN, LIME, NAVY, PURPLE, RED


class TestParseColor:
    def test_six_digit(self):
        assert parse_color("#3B82F6") == BLUE

    def test_three_digit_expands(self):
        assert parse_color("#abc") == Color(0xAA, 0xBB, 0xCC)

    def test_bare_hex_is_accepted(self):
        assert parse_color("10B981") == GREEN

    def test_eight_digit_alpha(self):
        c = parse_color("#3B82F680")
        assert (c.r, c.g, c.b) == (0x3B, 0x82, 0xF6)
        assert c.a == pytest.approx(128 / 255, abs=1e-3)
        assert not c.opaque

    def test_four_digit_alpha(self):
        c = parse_color("#f008")
        assert (c.r, c.g, c.b) == (255, 0, 0)
        assert c.a == pytest.approx(0x88 / 255, abs=1e-3)

    @pytest.mark.parametrize("text", ["red", "#12345", "#GGGGGG", "", "rgb(0,0,0)", "#3B82F6;"])
    def test_rejects_non_hex(self, text):
        with pytest.raises(InvalidColor) as exc:
            parse_color(text, param="color")
        assert exc.value.code == "invalid_color"
        assert exc.value.param == "color"

    def test_hex_output_is_lowercase(self):
        assert parse_color("#ABCDEF").hex == "#abcdef"

    def test_palette_splits_on_commas(self):
        assert parse_palette("#FF0000, #00FF00,#0000FF") == (RED, LIME, NAVY)

    def test_palette_rejects_any_bad_entry(self):
        with pytest.raises(InvalidColor):
            parse_palette("#FF0000,nope")

    def test_channel_invariant(self):
        with pytest.raises(ValueError):
            Color(256, 0, 0)
        with pytest.raises(ValueError):
            Color(0, 0, 0, 1.5)


class TestResolveColor:
    @pytest.mark.parametrize("fraction", [0, 0.1, 0.5, 0.99, 1])
    def test_single_color_is_constant(self, fraction):
        assert resolve_color([GREEN], fraction) == GREEN

    def test_two_color_endpoints(self):
        assert resolve_color([BLUE, PURPLE], 0) == BLUE
        assert resolve_color([BLUE, PURPLE], 1) == PURPLE

    def test_two_color_is_monotonic_per_channel(self):
        samples = [resolve_color([RED, NAVY], i / 20) for i in range(21)]
        reds = [c.r for c in samples]
        blues = [c.b for c in samples]
        assert reds == sorted(reds, reverse=True)
        assert blues == sorted(blues)

    def test_two_color_midpoint_rounds_half_up(self):
        assert resolve_color([Color(0, 0, 0), Color(1, 1, 1)], 0.5) == Color(1, 1, 1)

    @pytest.mark.parametrize("n", [3, 4, 5])
    def test_exact_at_segment_boundaries(self, n):
        palette = [Color(i * 40, 255 - i * 40, 7 * i) for i in range(n)]
        for i in range(n):
            assert resolve_color(palette, i / (n - 1)) == palette[i]

    def test_multi_color_interpolates_within_segment(self):
        # 3 colors: [0, .5] is RED→LIME, [.5, 1] is LIME→NAVY
        assert resolve_color([RED, LIME, NAVY], 0.25) == Color(128, 128, 0)
        assert resolve_color([RED, LIME, NAVY], 0.75) == Color(0, 128, 128)

    def test_fraction_one_returns_last(self):
        assert resolve_color([RED, LIME, NAVY], 1.0) == NAVY

    def test_fraction_is_clamped(self):
        assert resolve_color([RED, LIME, NAVY], -0.5) == RED
        assert resolve_color([RED, LIME, NAVY], 7) == NAVY

    def test_deterministic(self):
        palette = [RED, LIME, NAVY, GREEN]
        assert resolve_color(palette, 0.37) == resolve_color(palette, 0.37)

    def test_alpha_is_interpolated(self):
        c = interpolate(Color(0, 0, 0, 0.0), Color(0, 0, 0, 1.0), 0.25)
        assert c.a == 0.25


class TestSectionColor:
    def test_cycles_through_palette(self):
        palette = [RED, LIME]
        assert [section_color(palette, i) for i in range(5)] == [RED, LIME, RED, LIME, RED]

    def test_fewer_sections_than_colors(self):
        assert section_color([RED, LIME, NAVY], 1) == LIME

    def test_empty_palette_raises(self):
        with pytest.raises(ValueError):
            section_color([], 0)


class TestLighten:
    def test_moves_towards_white(self):
        assert lighten(BLUE, 85) == Color(226, 236, 254)

    def test_zero_and_full(self):
        assert lighten(BLUE, 0) == BLUE
        assert lighten(BLUE, 100) == Color(255, 255, 255)
