"""
One-pass spectrum analysis: aggregate, classify, report.

Functions:
    analyze_pixel_buffer: Analyse a raw PixelBuffer
    downscale_image: Shrink an image so neither side exceeds a limit
    analyze_image: Downscale a PIL Image and analyse it
"""

import logging
import random
from typing import Any

import numpy as np

from SA_Libs.constants import DEFAULT_MAX_IMAGE_SIZE
from SA_Libs.pillow_compat import RESAMPLE_FILTER
from SA_Libs.SpectrumLib.color_models import PixelBuffer, image_size
from SA_Libs.SpectrumLib.distribution_reporter import (
    ChoiceFunction,
    SpectrumReport,
    build_report,
)
from SA_Libs.SpectrumLib.pixel_aggregator import aggregate_array, aggregate_pixels

logger = logging.getLogger(__name__)


def analyze_pixel_buffer(
    buffer: PixelBuffer,
    choice: ChoiceFunction = random.choice,
) -> SpectrumReport:
    """
    Run the full pipeline over one pixel buffer.

    Args:
        buffer: Row-major pixel samples
        choice: Flavor phrase selector passed to the reporter

    Returns:
        SpectrumReport for the buffer

    Raises:
        InvalidPixelBufferError: If the buffer does not match its dimensions
    """
    return build_report(aggregate_pixels(buffer), choice=choice)


def downscale_image(image: Any, max_size: int = DEFAULT_MAX_IMAGE_SIZE) -> Any:
    """
    Shrink an image proportionally so neither side exceeds max_size.

    Images that already fit are returned unchanged.

    Args:
        image: PIL Image
        max_size: Largest allowed width or height, in pixels

    Returns:
        The original image or a resized copy

    Raises:
        ValueError: If max_size is not positive
        TypeError: If image is not a PIL Image
    """
    if max_size <= 0:
        raise ValueError(f"max_size must be > 0, got {max_size}")

    width, height = image_size(image)
    if width <= max_size and height <= max_size:
        return image

    scale = min(max_size / width, max_size / height)
    new_size = (max(1, int(width * scale)), max(1, int(height * scale)))
    logger.debug(f"Downscaling image from {width}x{height} to {new_size[0]}x{new_size[1]}")
    return image.resize(new_size, RESAMPLE_FILTER)


def analyze_image(
    image: Any,
    max_size: int = DEFAULT_MAX_IMAGE_SIZE,
    choice: ChoiceFunction = random.choice,
) -> SpectrumReport:
    """
    Downscale and analyse a decoded image.

    Args:
        image: PIL Image in any mode
        max_size: Largest allowed width or height before analysis
        choice: Flavor phrase selector passed to the reporter

    Returns:
        SpectrumReport for the (possibly downscaled) image
    """
    prepared = downscale_image(image, max_size)
    if prepared.mode != "RGBA":
        prepared = prepared.convert("RGBA")

    color_counts = aggregate_array(np.asarray(prepared))
    return build_report(color_counts, choice=choice)
