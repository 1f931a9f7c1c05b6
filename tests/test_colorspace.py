"""Tests for hex/RGB/HSL conversions."""

from __future__ import annotations

import random

import pytest

from code_regions.colorspace import (
    HSL,
    RGB,
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hex,
    parse_color,
    rgb_to_hex,
    rgb_to_hsl,
)
from code_regions.exceptions import CodeRegionsError, InvalidColorFormat


class TestHexToRgb:
    """Tests for hex_to_rgb."""

    def test_with_hash(self) -> None:
        """Test that each byte pair is divided by 255."""
        assert hex_to_rgb("#ff8000") == RGB(r=1.0, g=128 / 255, b=0.0)

    def test_without_hash(self) -> None:
        """Test that the leading '#' is optional."""
        assert hex_to_rgb("ff8000") == hex_to_rgb("#ff8000")

    def test_uppercase_digits(self) -> None:
        """Test that uppercase hex digits are accepted."""
        assert hex_to_rgb("#FFFFFF") == RGB(r=1.0, g=1.0, b=1.0)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "#",
            "#fff",
            "#1234567",
            "#gggggg",
            "12345",
            "+12345",
            " 12345",
            "#12 456",
            "##abcdef",
        ],
    )
    def test_malformed_returns_none(self, value: str) -> None:
        """Test that anything other than six hex digits returns None."""
        assert hex_to_rgb(value) is None

    def test_none_returns_none(self) -> None:
        """Test that None propagates instead of raising."""
        assert hex_to_rgb(None) is None


class TestRgbToHsl:
    """Tests for rgb_to_hsl."""

    def test_red(self) -> None:
        """Test hue from the red channel."""
        assert rgb_to_hsl(RGB(1.0, 0.0, 0.0)) == HSL(h=0.0, s=1.0, l=0.5)

    def test_green(self) -> None:
        """Test hue from the green channel."""
        hsl = rgb_to_hsl(RGB(0.0, 1.0, 0.0))
        assert hsl is not None
        assert hsl.h == pytest.approx(1 / 3)

    def test_blue(self) -> None:
        """Test hue from the blue channel."""
        hsl = rgb_to_hsl(RGB(0.0, 0.0, 1.0))
        assert hsl is not None
        assert hsl.h == pytest.approx(2 / 3)

    def test_red_max_with_blue_above_green_wraps(self) -> None:
        """Test that the red branch wraps the hue when blue exceeds green."""
        hsl = rgb_to_hsl(RGB(1.0, 0.0, 0.5))
        assert hsl is not None
        assert hsl.h == pytest.approx(5.5 / 6)
        assert 0.0 <= hsl.h <= 1.0

    def test_achromatic(self) -> None:
        """Test that greys have zero hue and saturation."""
        assert rgb_to_hsl(RGB(0.5, 0.5, 0.5)) == HSL(h=0.0, s=0.0, l=0.5)

    def test_saturation_branches_on_lightness(self) -> None:
        """Test both saturation formulas."""
        dark = rgb_to_hsl(RGB(0.4, 0.2, 0.2))
        light = rgb_to_hsl(RGB(0.8, 0.6, 0.6))
        assert dark is not None and light is not None
        # l = 0.3: d / (max + min)
        assert dark.s == pytest.approx(0.2 / 0.6)
        # l = 0.7: d / (2 - max - min)
        assert light.s == pytest.approx(0.2 / 0.6)

    def test_none_returns_none(self) -> None:
        """Test that None propagates."""
        assert rgb_to_hsl(None) is None


class TestHslToRgb:
    """Tests for hsl_to_rgb."""

    def test_zero_saturation_is_grey(self) -> None:
        """Test that all channels equal lightness when saturation is 0."""
        assert hsl_to_rgb(HSL(h=0.7, s=0.0, l=0.25)) == RGB(0.25, 0.25, 0.25)

    def test_red(self) -> None:
        """Test conversion of pure red."""
        rgb = hsl_to_rgb(HSL(h=0.0, s=1.0, l=0.5))
        assert rgb is not None
        assert (rgb.r, rgb.g, rgb.b) == pytest.approx((1.0, 0.0, 0.0))

    def test_blue(self) -> None:
        """Test conversion of pure blue (phase wraps for red)."""
        rgb = hsl_to_rgb(HSL(h=2 / 3, s=1.0, l=0.5))
        assert rgb is not None
        assert (rgb.r, rgb.g, rgb.b) == pytest.approx((0.0, 0.0, 1.0))

    def test_none_returns_none(self) -> None:
        """Test that None propagates."""
        assert hsl_to_rgb(None) is None


class TestRgbToHex:
    """Tests for rgb_to_hex."""

    def test_rounds_to_nearest(self) -> None:
        """Test that channels are rounded rather than truncated."""
        assert rgb_to_hex(RGB(0.5, 0.5, 0.5)) == "#808080"

    def test_lowercase(self) -> None:
        """Test that digits are lowercase."""
        assert rgb_to_hex(RGB(1.0, 0.6705882352941176, 0.8039215686274510)) == "#ffabcd"

    def test_clamps_out_of_range(self) -> None:
        """Test that out-of-range channels clamp instead of raising."""
        assert rgb_to_hex(RGB(1.2, -0.1, 0.5)) == "#ff0080"

    def test_none_returns_none(self) -> None:
        """Test that None propagates."""
        assert rgb_to_hex(None) is None


class TestRoundTrip:
    """Tests for hex -> RGB -> HSL -> RGB -> hex."""

    @staticmethod
    def _round_trip(color: str) -> str | None:
        return rgb_to_hex(hsl_to_rgb(rgb_to_hsl(hex_to_rgb(color))))

    @staticmethod
    def _channels(color: str) -> tuple[int, int, int]:
        return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)

    @pytest.mark.parametrize(
        "color", ["#000000", "#ffffff", "#202020", "#1e1e2e", "#abcdef", "#fedcba", "#ff0000"]
    )
    def test_known_colors(self, color: str) -> None:
        """Test that common editor colors survive the round trip."""
        result = self._round_trip(color)
        assert result is not None
        for before, after in zip(self._channels(color), self._channels(result), strict=True):
            assert abs(before - after) <= 1

    def test_sampled_colors(self) -> None:
        """Test the round trip over a deterministic sample of colors."""
        rng = random.Random(1234)
        for _ in range(500):
            color = f"#{rng.randrange(0x1000000):06x}"
            result = self._round_trip(color)
            assert result is not None, color
            for before, after in zip(self._channels(color), self._channels(result), strict=True):
                assert abs(before - after) <= 1, (color, result)


class TestParseColor:
    """Tests for normalize_hex and parse_color."""

    def test_normalize(self) -> None:
        """Test canonical lowercase form with '#'."""
        assert normalize_hex("ABCDEF") == "#abcdef"
        assert normalize_hex("#AbCdEf") == "#abcdef"

    def test_normalize_malformed(self) -> None:
        """Test that malformed colors normalize to None."""
        assert normalize_hex("#abc") is None
        assert normalize_hex("##abcdef") is None

    def test_parse_valid(self) -> None:
        """Test parsing a valid color."""
        assert parse_color("#1E1E2E") == "#1e1e2e"

    def test_parse_invalid_raises(self) -> None:
        """Test that malformed colors raise InvalidColorFormat."""
        with pytest.raises(InvalidColorFormat, match="Invalid color"):
            parse_color("blue")
        with pytest.raises(InvalidColorFormat):
            parse_color("##abcdef")

    def test_invalid_color_format_hierarchy(self) -> None:
        """Test that InvalidColorFormat is both a package error and a ValueError."""
        assert issubclass(InvalidColorFormat, CodeRegionsError)
        assert issubclass(InvalidColorFormat, ValueError)
