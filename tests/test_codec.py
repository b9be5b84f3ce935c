"""
Unit tests for the hex codec.

- parsing with and without '#', any case
- canonical uppercase output with channel clamping
- InvalidColorFormat for malformed input
"""

import numpy as np
import pytest

from tonal_theme.codec import (
    hex_to_rgb,
    normalise_hex,
    rgb_to_hex,
)
from tonal_theme.core_types import InvalidColorFormat


class TestHexToRgb:
    """Parsing hex strings"""

    def test_primary_colours(self):
        assert hex_to_rgb("#FF0000") == (255, 0, 0)
        assert hex_to_rgb("#00FF00") == (0, 255, 0)
        assert hex_to_rgb("#0000FF") == (0, 0, 255)

    def test_optional_hash_and_case(self):
        assert hex_to_rgb("6750a4") == (103, 80, 164)
        assert hex_to_rgb("#6750A4") == hex_to_rgb("6750A4") == hex_to_rgb("#6750a4")

    @pytest.mark.parametrize(
        "bad", ["", "#", "#FFF", "FFFFF", "#1234567", "GGGGGG", "#12 456", " #123456", "##123456"]
    )
    def test_malformed_raises(self, bad):
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(bad)

    def test_non_string_raises(self):
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(None)  # type: ignore[arg-type]

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            hex_to_rgb("nope")


class TestRgbToHex:
    """Formatting RGB triples"""

    def test_uppercase_seven_chars(self):
        assert rgb_to_hex(255, 0, 0) == "#FF0000"
        assert rgb_to_hex(10, 171, 205) == "#0AABCD"
        assert len(rgb_to_hex(0, 0, 0)) == 7

    def test_channels_are_clamped(self):
        assert rgb_to_hex(-5, 300, 128) == "#00FF80"

    def test_round_trip_samples(self):
        rng = np.random.default_rng(7)
        samples = rng.integers(0, 256, size=(200, 3)).tolist()
        samples += [[0, 0, 0], [255, 255, 255], [1, 254, 16]]
        for r, g, b in samples:
            assert hex_to_rgb(rgb_to_hex(r, g, b)) == (r, g, b)

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_round_trip_every_channel_value(self, position):
        for v in range(256):
            rgb = [37, 200, 5]
            rgb[position] = v
            assert hex_to_rgb(rgb_to_hex(*rgb)) == tuple(rgb)

    def test_float_channels_round_half_up(self):
        assert rgb_to_hex(0.5, 1.5, 2.5) == "#010203"
        assert rgb_to_hex(254.5, 127.49, 0.49) == "#FF7F00"

    def test_normalise_hex(self):
        assert normalise_hex("6750a4") == "#6750A4"
