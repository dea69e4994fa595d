"""
Unit tests for pixel_aggregator module.

Tests counting of exact RGB colors from flat buffers and numpy arrays.
"""

import numpy as np
import pytest

from SA_Libs.SpectrumLib.color_models import InvalidPixelBufferError, PixelBuffer
from SA_Libs.SpectrumLib.pixel_aggregator import aggregate_array, aggregate_pixels

from conftest import make_buffer


class TestAggregatePixels:
    """Tests for aggregate_pixels function."""

    def test_counts_each_exact_color(self):
        buffer = make_buffer([
            (255, 0, 0),
            (0, 255, 0),
            (255, 0, 0),
            (0, 0, 255),
        ])

        result = aggregate_pixels(buffer)

        assert result.counts == {(255, 0, 0): 2, (0, 255, 0): 1, (0, 0, 255): 1}
        assert result.total_pixels == 4
        assert result.distinct_count == 3

    def test_alpha_is_ignored_in_keys(self):
        buffer = make_buffer([(10, 20, 30, 255), (10, 20, 30, 0)])

        result = aggregate_pixels(buffer)

        assert result.counts == {(10, 20, 30): 2}

    def test_keys_keep_first_encounter_order(self):
        buffer = make_buffer([(3, 3, 3), (1, 1, 1), (2, 2, 2), (1, 1, 1)])

        result = aggregate_pixels(buffer)

        assert list(result.counts) == [(3, 3, 3), (1, 1, 1), (2, 2, 2)]

    def test_rgb_stride(self):
        buffer = PixelBuffer(width=2, height=1, data=[1, 2, 3, 1, 2, 3], channels=3)

        result = aggregate_pixels(buffer)

        assert result.counts == {(1, 2, 3): 2}

    def test_bytes_buffer(self):
        buffer = PixelBuffer(width=1, height=2, data=bytes([9, 8, 7, 255, 9, 8, 7, 255]))

        assert aggregate_pixels(buffer).counts == {(9, 8, 7): 2}

    def test_counts_sum_to_pixel_total(self, sample_rgba_colors):
        pixels = sample_rgba_colors * 5
        buffer = make_buffer(pixels, width=len(sample_rgba_colors))

        result = aggregate_pixels(buffer)

        assert sum(result.counts.values()) == buffer.width * buffer.height == 30

    def test_empty_image(self):
        result = aggregate_pixels(PixelBuffer(width=0, height=0, data=[]))

        assert result.counts == {}
        assert result.total_pixels == 0

    def test_rejects_short_buffer(self):
        with pytest.raises(InvalidPixelBufferError):
            aggregate_pixels(PixelBuffer(width=3, height=1, data=[0] * 8))

    def test_trailing_data_past_dimensions_is_not_counted(self):
        buffer = PixelBuffer(width=1, height=1, data=[1, 1, 1, 255, 2, 2, 2, 255])

        assert aggregate_pixels(buffer).counts == {(1, 1, 1): 1}


class TestAggregateArray:
    """Tests for aggregate_array function."""

    def test_matches_flat_aggregation(self):
        colors = [(5, 5, 5), (0, 255, 0), (5, 5, 5), (255, 0, 0), (0, 255, 0), (1, 2, 3)]
        buffer = make_buffer(colors, width=3)
        array = np.array(buffer.data, dtype=np.uint8).reshape(2, 3, 4)

        from_array = aggregate_array(array)
        from_buffer = aggregate_pixels(buffer)

        assert from_array.counts == from_buffer.counts
        assert list(from_array.counts) == list(from_buffer.counts)
        assert from_array.total_pixels == 6

    def test_keys_are_plain_ints(self):
        array = np.zeros((1, 1, 3), dtype=np.uint8)

        result = aggregate_array(array)

        key = next(iter(result.counts))
        assert all(type(channel) is int for channel in key)
        assert type(result.counts[key]) is int

    def test_empty_array(self):
        result = aggregate_array(np.zeros((0, 5, 4), dtype=np.uint8))

        assert result.counts == {}
        assert result.total_pixels == 0

    def test_rejects_wrong_shape(self):
        with pytest.raises(InvalidPixelBufferError):
            aggregate_array(np.zeros((4, 4), dtype=np.uint8))
