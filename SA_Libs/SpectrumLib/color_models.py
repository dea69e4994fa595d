"""
Spectrum analysis data models.

This module defines the core data structures passed between the pipeline
stages.

Classes:
    PixelBuffer: Raw row-major pixel samples with their dimensions
    ColorCounts: Occurrence count per exact RGB triple plus the pixel total
    ColorRecord: One aggregated color with share, hex code and wavelength

Functions:
    rgb_to_hex: Encode an RGB triple as '#rrggbb'
    hex_to_rgb: Decode '#rrggbb' (case-insensitive) back to an RGB triple

Type Aliases:
    RgbColor: A tuple of 3 integers representing RGB color values (0-255)
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Tuple

from SA_Libs.constants import RGBA_CHANNELS, SUPPORTED_CHANNEL_STRIDES
from SA_Libs.pillow_compat import ImageClass
from SA_Libs.SpectrumLib.wavelength_classifier import get_color_name

RgbColor = Tuple[int, int, int]

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


class InvalidPixelBufferError(ValueError):
    """Raised when a pixel buffer does not match its declared dimensions."""


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return "#" + "".join(f"{channel:02x}" for channel in (r, g, b))


def hex_to_rgb(hex_code: str) -> RgbColor:
    """
    Decode a 6-digit hex color code.

    Args:
        hex_code: '#rrggbb' or 'rrggbb', any letter case

    Returns:
        The (r, g, b) triple

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    match = _HEX_PATTERN.match(hex_code.strip())
    if match is None:
        raise ValueError(f"Invalid hex color: {hex_code!r}")
    digits = match.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major pixel samples for one image.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        data: Flat channel values (0-255), `channels` values per pixel
        channels: Channel stride, 3 (RGB) or 4 (RGBA)
    """

    width: int
    height: int
    data: Sequence[int]
    channels: int = RGBA_CHANNELS

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def expected_length(self) -> int:
        return self.pixel_count * self.channels

    def validate(self) -> None:
        """
        Check the buffer against its declared dimensions.

        Zero width or height is accepted as an empty image.

        Raises:
            InvalidPixelBufferError: If dimensions are negative, the channel
                stride is unsupported, or the data is too short
        """
        if self.width < 0 or self.height < 0:
            raise InvalidPixelBufferError(
                f"Dimensions must be >= 0, got {self.width}x{self.height}"
            )
        if self.channels not in SUPPORTED_CHANNEL_STRIDES:
            raise InvalidPixelBufferError(
                f"channels must be one of {SUPPORTED_CHANNEL_STRIDES}, got {self.channels}"
            )
        if len(self.data) < self.expected_length:
            raise InvalidPixelBufferError(
                f"Buffer too short for {self.width}x{self.height}x{self.channels}: "
                f"expected {self.expected_length} values, got {len(self.data)}"
            )

    @classmethod
    def from_image(cls, image: Any) -> "PixelBuffer":
        """Build an RGBA buffer from a PIL Image."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        width, height = image.size
        return cls(width=width, height=height, data=image.tobytes(), channels=RGBA_CHANNELS)


@dataclass(frozen=True)
class ColorCounts:
    """Aggregated pixel counts keyed by exact RGB triple, in first-seen order."""

    counts: Dict[RgbColor, int] = field(default_factory=dict)
    total_pixels: int = 0

    @property
    def distinct_count(self) -> int:
        return len(self.counts)


@dataclass(frozen=True)
class ColorRecord:
    """One distinct color observed in an image.

    Attributes:
        rgb: Exact observed (r, g, b) triple
        hex: '#rrggbb' encoding of `rgb`
        count: Number of pixels with exactly this color
        percentage: Share of the image, count / total * 100
        wavelength: Approximate wavelength in nanometers (380-750)
    """

    rgb: RgbColor
    hex: str
    count: int
    percentage: float
    wavelength: float

    @property
    def color_name(self) -> str:
        return get_color_name(self.wavelength)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rgb": list(self.rgb),
            "hex": self.hex,
            "count": self.count,
            "percentage": self.percentage,
            "wavelength": self.wavelength,
            "color_name": self.color_name,
        }


def image_size(image: Any) -> Tuple[int, int]:
    """Return (width, height) for a PIL Image, rejecting non-image objects."""
    if not isinstance(image, ImageClass):
        raise TypeError(f"Expected PIL Image, got {type(image)}")
    return image.size
