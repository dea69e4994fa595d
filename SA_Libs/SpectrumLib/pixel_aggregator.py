"""
Pixel aggregation into exact-color buckets.

Functions:
    aggregate_pixels: Count every RGB triple in a flat PixelBuffer
    aggregate_array: Count every RGB triple in a (height, width, channels) array
"""

import logging
from typing import Any, Dict

import numpy as np

from SA_Libs.constants import RGB_CHANNELS, SUPPORTED_CHANNEL_STRIDES
from SA_Libs.SpectrumLib.color_models import (
    ColorCounts,
    InvalidPixelBufferError,
    PixelBuffer,
    RgbColor,
)

logger = logging.getLogger(__name__)


def aggregate_pixels(buffer: PixelBuffer) -> ColorCounts:
    """
    Count occurrences of each exact RGB color in a pixel buffer.

    The buffer is validated first. Every pixel is visited once and adds 1 to
    its (r, g, b) key; channels past the third (alpha) are ignored. Keys keep
    first-encounter order.

    Args:
        buffer: Row-major pixel samples

    Returns:
        ColorCounts with total_pixels = width * height

    Raises:
        InvalidPixelBufferError: If the buffer does not match its dimensions
    """
    buffer.validate()

    counts: Dict[RgbColor, int] = {}
    data = buffer.data
    stride = buffer.channels

    for offset in range(0, buffer.expected_length, stride):
        key = (int(data[offset]), int(data[offset + 1]), int(data[offset + 2]))
        counts[key] = counts.get(key, 0) + 1

    logger.debug(
        f"Aggregated {buffer.pixel_count} pixels into {len(counts)} distinct colors"
    )
    return ColorCounts(counts=counts, total_pixels=buffer.pixel_count)


def aggregate_array(array: Any) -> ColorCounts:
    """
    Count occurrences of each exact RGB color in an image array.

    Produces the same mapping (including key order) as aggregate_pixels on the
    equivalent flat buffer.

    Args:
        array: numpy-compatible array of shape (height, width, 3 or 4)

    Returns:
        ColorCounts with total_pixels = height * width

    Raises:
        InvalidPixelBufferError: If the array is not (height, width, 3|4)
    """
    pixels = np.asarray(array)
    if pixels.ndim != 3 or pixels.shape[2] not in SUPPORTED_CHANNEL_STRIDES:
        raise InvalidPixelBufferError(
            f"Expected array of shape (height, width, 3|4), got {pixels.shape}"
        )

    height, width = pixels.shape[0], pixels.shape[1]
    total_pixels = height * width
    if total_pixels == 0:
        return ColorCounts(counts={}, total_pixels=0)

    rgb = pixels[:, :, :RGB_CHANNELS].reshape(-1, RGB_CHANNELS)
    unique_colors, first_index, color_counts = np.unique(
        rgb, axis=0, return_index=True, return_counts=True
    )

    # np.unique sorts lexicographically; restore first-encounter order
    order = np.argsort(first_index, kind="stable")
    counts: Dict[RgbColor, int] = {}
    for position in order:
        r, g, b = unique_colors[position]
        counts[(int(r), int(g), int(b))] = int(color_counts[position])

    logger.debug(f"Aggregated {total_pixels} pixels into {len(counts)} distinct colors")
    return ColorCounts(counts=counts, total_pixels=total_pixels)
