"""
Unit tests for wallpaper colour extraction and seed scoring.

- RGBA buffer coercion
- alpha filtering and 16-wide quantization
- frequency ordering and the distinctness filter
- downsampling of wide buffers
- seed scoring and the default fallback
"""

import numpy as np
import pytest

from tonal_theme.extraction import (
    as_rgba_rows,
    downsample_rgba,
    extract_colors_from_pixels,
    extract_primary_color,
    quantize_pixels,
    score_color,
)


def _rgba(*groups):
    """Flat RGBA bytes from (count, (r, g, b, a)) groups."""
    out = bytearray()
    for count, px in groups:
        out.extend(bytes(px) * count)
    return bytes(out)


class TestAsRgbaRows:
    """Pixel buffer coercion"""

    def test_bytes(self):
        rows = as_rgba_rows(bytes([1, 2, 3, 4, 5, 6, 7, 8]))
        assert rows.shape == (2, 4)
        assert rows.dtype == np.uint8

    def test_image_shaped_array(self):
        arr = np.zeros((3, 5, 4), dtype=np.uint8)
        assert as_rgba_rows(arr).shape == (15, 4)

    def test_list_of_tuples_and_clipping(self):
        rows = as_rgba_rows([(300, -1, 10, 255), (0, 0, 0, 0)])
        assert rows.tolist() == [[255, 0, 10, 255], [0, 0, 0, 0]]

    def test_partial_pixel_dropped(self):
        assert as_rgba_rows(bytes(10)).shape == (2, 4)

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            as_rgba_rows(42)


class TestQuantizePixels:
    """Histogram building"""

    def test_bucket_floor_to_16(self):
        hist = quantize_pixels(as_rgba_rows(_rgba((1, (255, 17, 31, 255)))))
        assert hist == {(240, 16, 16): 1}

    def test_alpha_threshold(self):
        data = _rgba((3, (10, 10, 10, 127)), (2, (200, 200, 200, 128)))
        hist = quantize_pixels(as_rgba_rows(data))
        assert hist == {(192, 192, 192): 2}

    def test_order_by_count_then_first_seen(self):
        data = _rgba(
            (2, (0, 0, 255, 255)),
            (5, (255, 0, 0, 255)),
            (2, (0, 255, 0, 255)),
        )
        hist = quantize_pixels(as_rgba_rows(data))
        assert list(hist) == [(240, 0, 0), (0, 0, 240), (0, 240, 0)]
        assert list(hist.values()) == [5, 2, 2]


class TestExtractColorsFromPixels:
    """Distinct colour extraction"""

    PIXELS = _rgba(
        (10, (200, 0, 0, 255)),
        (5, (208, 0, 0, 255)),
        (3, (255, 255, 255, 255)),
        (2, (0, 0, 0, 255)),
    )

    def test_similar_buckets_filtered(self):
        colors = extract_colors_from_pixels(self.PIXELS, 20, 1, 3)
        assert colors == ["#C00000", "#F0F0F0", "#000000"]

    def test_stops_at_k(self):
        assert extract_colors_from_pixels(self.PIXELS, 20, 1, 2) == ["#C00000", "#F0F0F0"]

    def test_fewer_than_k_when_not_distinct(self):
        data = _rgba((4, (200, 0, 0, 255)), (4, (208, 0, 0, 255)))
        assert extract_colors_from_pixels(data, 8, 1, 5) == ["#C00000"]

    def test_empty_and_transparent(self):
        assert extract_colors_from_pixels(b"", 0, 0, 5) == []
        assert extract_colors_from_pixels(_rgba((50, (255, 0, 0, 0))), 50, 1, 5) == []
        assert extract_colors_from_pixels(self.PIXELS, 20, 1, 0) == []

    def test_declared_size_must_match(self):
        with pytest.raises(ValueError):
            extract_colors_from_pixels(self.PIXELS, 3, 3, 3)

    def test_declared_size_small_image_untouched(self):
        colors = extract_colors_from_pixels(self.PIXELS, 5, 4, 3)
        assert colors == ["#C00000", "#F0F0F0", "#000000"]

    def test_wide_image_downsampled(self):
        img = np.zeros((60, 400, 4), dtype=np.uint8)
        img[...] = (103, 80, 164, 255)
        colors = extract_colors_from_pixels(img, 400, 60, 5)
        assert colors == ["#6050A0"]

    def test_debug_logging(self, capsys):
        extract_colors_from_pixels(self.PIXELS, 20, 1, 3, debug=True)
        out = capsys.readouterr().out
        assert "[debug]" in out
        assert "Kept: 3" in out

    def test_dimensions_required(self):
        with pytest.raises(TypeError):
            extract_colors_from_pixels(self.PIXELS)  # type: ignore[call-arg]

    def test_very_wide_strip_is_always_reduced(self, capsys):
        strip = np.zeros((1, 100_000, 4), dtype=np.uint8)
        strip[...] = (200, 0, 0, 255)
        colors = extract_colors_from_pixels(strip, 100_000, 1, 5, debug=True)
        out = capsys.readouterr().out
        assert colors == ["#C00000"]
        assert "Sampled: 100x1" in out
        assert "Visible: 100" in out
        assert "Visible: 100,000" not in out


def test_downsample_rgba_keeps_aspect():
    rows = np.full((200 * 400, 4), 255, dtype=np.uint8)
    out, w, h = downsample_rgba(rows, 400, 200)
    assert (w, h) == (100, 50)
    assert out.shape == (5000, 4)
    assert np.all(out == 255)


class TestPrimaryColor:
    """Seed scoring"""

    def test_empty_falls_back_to_default(self):
        assert extract_primary_color([]) == "#6750A4"

    def test_prefers_colourful_over_grey(self):
        assert extract_primary_color(["#808080", "#6750A4"]) == "#6750A4"

    def test_scores(self):
        assert score_color("#6750A4") == 80
        # mid grey reads as tone 76, above the 30..70 bonus band
        assert score_color("#808080") == -50
        assert score_color("#000000") == -80

    def test_ties_keep_input_order(self):
        assert score_color("#0A0A0A") == score_color("#050505")
        assert extract_primary_color(["#0A0A0A", "#050505"]) == "#0A0A0A"
        assert extract_primary_color(["#050505", "#0A0A0A"]) == "#050505"

    def test_output_canonical(self):
        assert extract_primary_color(["6750a4"]) == "#6750A4"
