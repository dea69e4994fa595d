"""
Pytest configuration and shared fixtures for Color Spectrum Analyzer tests.

This module provides shared test fixtures and helpers used across
multiple test modules.
"""

from typing import Iterable, Sequence, Tuple

import pytest
from PIL import Image

from SA_Libs.SpectrumLib.color_models import PixelBuffer


def make_buffer(colors: Iterable[Tuple[int, ...]], width: int = None) -> PixelBuffer:
    """
    Build an RGBA PixelBuffer from a list of RGB or RGBA tuples.

    Pixels are laid out row-major; by default the image is one row high.
    """
    pixels = list(colors)
    width = len(pixels) if width is None else width
    height = len(pixels) // width if width else 0
    data = []
    for pixel in pixels:
        r, g, b = pixel[:3]
        alpha = pixel[3] if len(pixel) > 3 else 255
        data.extend((r, g, b, alpha))
    return PixelBuffer(width=width, height=height, data=data, channels=4)


def first_choice(options: Sequence[str]) -> str:
    return options[0]


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (128, 128, 128, 255),  # Gray
    ]


@pytest.fixture
def two_tone_image():
    """A 10x10 RGBA image: red top half, blue bottom half."""
    image = Image.new("RGBA", (10, 10), color=(0, 0, 255, 255))
    pixels = image.load()
    for y in range(5):
        for x in range(10):
            pixels[x, y] = (255, 0, 0, 255)
    return image


@pytest.fixture
def image_file(tmp_path, two_tone_image):
    """Path to a PNG file holding two_tone_image."""
    path = tmp_path / "two_tone.png"
    two_tone_image.save(path)
    return path
